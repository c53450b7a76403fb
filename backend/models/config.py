"""Configuration data models"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .diff import DiffMode

# Flag letters accepted by the regex tester
REGEX_FLAG_LETTERS = frozenset("gimsuy")


class TextSettings(BaseModel):
    """The "text" section of the configuration"""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    default_diff_mode: DiffMode = Field(default=DiffMode.LINE, alias="defaultDiffMode")
    default_regex_flags: str = Field(default="g", alias="defaultRegexFlags")
    max_lorem_paragraphs: int = Field(default=10, ge=1, alias="maxLoremParagraphs")

    @field_validator("default_regex_flags")
    @classmethod
    def _known_flags(cls, value: str) -> str:
        unknown = set(value) - REGEX_FLAG_LETTERS
        if unknown:
            raise ValueError(f"Unknown regex flags: {''.join(sorted(unknown))}")
        return value
