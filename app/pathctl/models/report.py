"""Analysis report models.

Results of running the duplicate and shadow analysis over a path,
with helpers for JSON serialization.
"""

from dataclasses import dataclass, field
from typing import Any

from pathctl.models.segment import Segment, SegmentStatus


@dataclass(frozen=True, slots=True)
class InvalidEntry:
    """A segment that does not name an existing directory.

    Attributes:
        segment: The offending segment.
        status: Why the segment is invalid (MISSING or NOT_A_DIRECTORY).
    """

    segment: Segment
    status: SegmentStatus

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "directory": self.segment.text,
            "position": self.segment.position,
            "status": self.status.value,
        }


@dataclass(frozen=True, slots=True)
class DuplicateEntry:
    """A segment whose normalized form already appeared earlier.

    Attributes:
        segment: The repeated (later) segment.
        first: The earliest segment with the same normalized form.
    """

    segment: Segment
    first: Segment


@dataclass(frozen=True, slots=True)
class ShadowedFile:
    """A filename in a later directory hidden by an earlier directory.

    Attributes:
        name: The shadowed filename.
        directory: Segment whose copy of the file is unreachable.
        winner: Earliest segment providing a file of the same name.
    """

    name: str
    directory: Segment
    winner: Segment


@dataclass(frozen=True, slots=True)
class ShadowGroup:
    """All shadowed files of one (losing) directory, sorted by filename."""

    directory: Segment
    files: tuple[ShadowedFile, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "directory": self.directory.text,
            "position": self.directory.position,
            "files": [{"name": f.name, "resolves_to": f.winner.text} for f in self.files],
        }


@dataclass(frozen=True, slots=True)
class PathReport:
    """Complete analysis of a path.

    Attributes:
        invalid: Segments of the raw path that are not valid directories.
        duplicates: Every duplicate segment of the effective path, in order.
        shadowed: Shadowed files grouped by losing directory, in path order.
    """

    invalid: list[InvalidEntry] = field(default_factory=lambda: [])
    duplicates: list[DuplicateEntry] = field(default_factory=lambda: [])
    shadowed: list[ShadowGroup] = field(default_factory=lambda: [])

    @property
    def duplicate_dirs(self) -> list[str]:
        """Distinct duplicated directory values, in order of first repetition."""
        seen: set[str] = set()
        result: list[str] = []
        for dup in self.duplicates:
            value = dup.first.key
            if value not in seen:
                seen.add(value)
                result.append(value)
        return result

    @property
    def is_clean(self) -> bool:
        """True if nothing was found in any section."""
        return not (self.invalid or self.duplicates or self.shadowed)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "invalid": [entry.to_dict() for entry in self.invalid],
            "duplicates": self.duplicate_dirs,
            "shadowed": [group.to_dict() for group in self.shadowed],
        }
