"""Data models for SkillPack."""

from skillpack.models.entry import ExpandedFile, ExpandFilesReport, RawEntry

__all__ = ["RawEntry", "ExpandedFile", "ExpandFilesReport"]
