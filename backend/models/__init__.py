"""Models module - Pydantic data models"""

from .config import TextSettings
from .diff import DiffEntry, DiffKind, DiffMode, DiffRequest, DiffResult, DiffStats
from .regex import PatternToken, PatternTokenKind, RegexRequest, RegexResult
from .text import (
    CaseConvertRequest,
    CaseType,
    EncodeRequest,
    EncodeResult,
    LoremType,
    MarkdownRequest,
    MarkdownResult,
    TextResult,
)

__all__ = [
    # Config models
    "TextSettings",
    # Diff models
    "DiffEntry",
    "DiffKind",
    "DiffMode",
    "DiffRequest",
    "DiffResult",
    "DiffStats",
    # Regex models
    "PatternToken",
    "PatternTokenKind",
    "RegexRequest",
    "RegexResult",
    # Text models
    "CaseConvertRequest",
    "CaseType",
    "EncodeRequest",
    "EncodeResult",
    "LoremType",
    "MarkdownRequest",
    "MarkdownResult",
    "TextResult",
]
