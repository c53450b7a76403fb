"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiffMode(str, Enum):
    """Granularity of a text comparison"""

    LINE = "line"
    WORD = "word"
    CHAR = "char"


class DiffKind(str, Enum):
    """Kind of a single difference"""

    ADD = "add"
    REMOVE = "remove"
    CHANGE = "change"


class DiffEntry(BaseModel):
    """One unit of difference between two texts"""

    model_config = ConfigDict(populate_by_name=True)

    kind: DiffKind = Field(alias="type")
    line: str | None = None  # add / remove
    old_line: str | None = Field(default=None, alias="oldLine")  # change
    new_line: str | None = Field(default=None, alias="newLine")  # change
    position: int | None = Field(default=None, alias="lineNumber")  # 1-indexed, line mode only

    @classmethod
    def added(cls, unit: str, position: int | None = None) -> DiffEntry:
        return cls(kind=DiffKind.ADD, line=unit, position=position)

    @classmethod
    def removed(cls, unit: str, position: int | None = None) -> DiffEntry:
        return cls(kind=DiffKind.REMOVE, line=unit, position=position)

    @classmethod
    def changed(cls, old: str, new: str, position: int | None = None) -> DiffEntry:
        return cls(kind=DiffKind.CHANGE, old_line=old, new_line=new, position=position)

    @property
    def content(self) -> str | tuple[str, str]:
        """The added/removed unit, or the (old, new) pair of a change"""
        if self.kind == DiffKind.CHANGE:
            return self.old_line or "", self.new_line or ""
        return self.line or ""


class DiffStats(BaseModel):
    """Aggregate counts derived from a diff entry sequence"""

    model_config = ConfigDict(populate_by_name=True)

    additions: int = 0
    deletions: int = 0
    changes: int = 0
    total_diffs: int = Field(default=0, alias="totalDiffs")

    @classmethod
    def from_entries(cls, entries: list[DiffEntry]) -> DiffStats:
        stats = cls()
        for entry in entries:
            if entry.kind == DiffKind.ADD:
                stats.additions += 1
            elif entry.kind == DiffKind.REMOVE:
                stats.deletions += 1
            elif entry.kind == DiffKind.CHANGE:
                stats.changes += 1
            stats.total_diffs += 1
        return stats


class DiffResult(BaseModel):
    """Complete diff result for two texts"""

    differences: list[DiffEntry]
    stats: DiffStats


class DiffRequest(BaseModel):
    """Request to compare two texts"""

    text1: str
    text2: str
    mode: DiffMode | None = None  # falls back to the configured default

    @field_validator("text1")
    @classmethod
    def _first_text_required(cls, value: str) -> str:
        if not value:
            raise ValueError("First text is required")
        return value

    @field_validator("text2")
    @classmethod
    def _second_text_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Second text is required")
        return value

    @field_validator("mode", mode="before")
    @classmethod
    def _known_mode(cls, value):
        if value is None:
            return value
        if not isinstance(value, str) or value not in {m.value for m in DiffMode}:
            raise ValueError("Invalid diff mode")
        return value
