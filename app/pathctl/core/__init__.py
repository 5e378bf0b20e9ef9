"""Path analysis core for pathctl.

Pure functions over ordered lists of path segments: splitting and
joining, filtering and normalization, duplicate detection and
shadowed-file detection.
"""

from pathctl.core.analyzer import analyze_path
from pathctl.core.classify import FilterMode, apply_filter, classify, resolve
from pathctl.core.duplicates import duplicate_dirs, find_duplicates
from pathctl.core.pathlist import add_path, append_path, join, new_path, split, to_segments
from pathctl.core.shadow import find_shadowed, group_shadowed

__all__ = [
    "FilterMode",
    "add_path",
    "analyze_path",
    "append_path",
    "apply_filter",
    "classify",
    "duplicate_dirs",
    "find_duplicates",
    "find_shadowed",
    "group_shadowed",
    "join",
    "new_path",
    "resolve",
    "split",
    "to_segments",
]
