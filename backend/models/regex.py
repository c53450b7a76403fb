"""Regex tester data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatternTokenKind(str, Enum):
    """Classification of an explained pattern fragment"""

    CHARACTER_CLASS = "characterClass"
    QUANTIFIER = "quantifier"
    ANCHOR = "anchor"
    GROUP = "group"
    ESCAPED_LITERAL = "escaped"
    LITERAL = "literal"


class PatternToken(BaseModel):
    """One explained fragment of a regular-expression source string"""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(alias="pattern")  # exact substring of the source
    kind: PatternTokenKind = Field(alias="type")
    explanation: str


class RegexRequest(BaseModel):
    """Request to run a pattern against a text"""

    text: str
    pattern: str
    flags: str | None = None  # JS-style flags, e.g. "gi"

    @field_validator("text")
    @classmethod
    def _text_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Text is required")
        return value

    @field_validator("pattern")
    @classmethod
    def _pattern_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Pattern is required")
        return value


class RegexResult(BaseModel):
    """Matches, highlighting and explanation for a tested pattern"""

    model_config = ConfigDict(populate_by_name=True)

    matches: list[str] = []
    error: str | None = None
    highlighted_text: str = Field(alias="highlightedText")
    capture_groups: list[list[str | None]] = Field(default=[], alias="captureGroups")
    pattern_parts: list[PatternToken] = Field(default=[], alias="patternParts")
