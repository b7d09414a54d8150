"""
Core — Data layer for gtm

Contains the foundational data structures:
- Note: CommitNote / FileDetail (pending time per tracked path)
- Project: Project index and tag storage
"""

from .note import CommitNote, FileDetail
from .project import ProjectIndex, parse_tags, load_tags, save_tags

__all__ = [
    "CommitNote", "FileDetail",
    "ProjectIndex", "parse_tags", "load_tags", "save_tags",
]
