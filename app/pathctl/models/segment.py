"""Path segment models.

This module defines the data structures for a single entry of a
delimited search path and its filesystem classification.
"""

from dataclasses import dataclass
from enum import Enum


class SegmentStatus(str, Enum):
    """Filesystem classification of a path segment.

    Attributes:
        VALID: Segment names an existing directory.
        MISSING: Nothing exists at the segment's location.
        NOT_A_DIRECTORY: Something exists there, but it is not a directory.
    """

    VALID = "valid"
    MISSING = "missing"
    NOT_A_DIRECTORY = "not_a_directory"


@dataclass(frozen=True, slots=True)
class Segment:
    """One directory entry of a delimited path.

    Attributes:
        text: Segment text as it appears in the path.
        position: 0-based ordinal in the original path.
        resolved: Symlink-resolved absolute form, if normalization ran.
    """

    text: str
    position: int
    resolved: str | None = None

    def __post_init__(self) -> None:
        """Validate segment data after initialization."""
        if self.position < 0:
            msg = f"Position must be non-negative, got {self.position}"
            raise ValueError(msg)

    @property
    def key(self) -> str:
        """Form used to compare segments for duplicates."""
        if self.resolved is not None:
            return self.resolved
        return self.text
