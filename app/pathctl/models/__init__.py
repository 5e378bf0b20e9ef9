"""Data models for pathctl.

This module exports the core data structures used throughout the application.
"""

from pathctl.models.report import (
    DuplicateEntry,
    InvalidEntry,
    PathReport,
    ShadowedFile,
    ShadowGroup,
)
from pathctl.models.segment import Segment, SegmentStatus

__all__ = [
    "DuplicateEntry",
    "InvalidEntry",
    "PathReport",
    "Segment",
    "SegmentStatus",
    "ShadowGroup",
    "ShadowedFile",
]
