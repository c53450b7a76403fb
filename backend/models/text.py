"""Text utility data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CaseType(str, Enum):
    """Supported case conversions"""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    TITLECASE = "titlecase"


class LoremType(str, Enum):
    """Unit of generated placeholder text"""

    WORDS = "words"
    PARAGRAPHS = "paragraphs"


class CaseConvertRequest(BaseModel):
    """Request for case conversion"""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    case_type: CaseType = Field(alias="caseType")

    @field_validator("text")
    @classmethod
    def _text_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Text is required")
        return value

    @field_validator("case_type", mode="before")
    @classmethod
    def _known_case(cls, value):
        if not isinstance(value, str) or value not in {c.value for c in CaseType}:
            raise ValueError("Invalid case type")
        return value


class EncodeRequest(BaseModel):
    """Request for base64 encoding or decoding"""

    text: str
    encoding: str
    decode: bool = False

    @field_validator("text")
    @classmethod
    def _text_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Text is required")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        if value != "base64":
            raise ValueError("Invalid encoding type")
        return value


class EncodeResult(BaseModel):
    """Either the encoded or the decoded text"""

    encoded: str | None = None
    decoded: str | None = None


class TextResult(BaseModel):
    """Plain text result"""

    result: str


class MarkdownRequest(BaseModel):
    """Request for a markdown preview"""

    markdown: str

    @field_validator("markdown")
    @classmethod
    def _markdown_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Markdown text is required")
        return value


class MarkdownResult(BaseModel):
    """Sanitized HTML rendering of markdown"""

    html: str
