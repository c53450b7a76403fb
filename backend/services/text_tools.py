"""
Text Tools Service - Small text utilities: case conversion, base64, lorem ipsum
"""

from __future__ import annotations

import base64
import binascii
import re

from models.text import CaseType, LoremType

DEFAULT_MAX_PARAGRAPHS = 10

NON_BASE64_PATTERN = re.compile(r"[^A-Za-z0-9+/]")
URL_SAFE_TRANSLATION = str.maketrans("-_", "+/")

LOREM_IPSUM_SENTENCES = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
    "Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua.",
    "Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat.",
    "Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur.",
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt mollit anim id est laborum.",
    "Sed ut perspiciatis unde omnis iste natus error sit voluptatem accusantium doloremque laudantium.",
    "Nemo enim ipsam voluptatem quia voluptas sit aspernatur aut odit aut fugit.",
    "Neque porro quisquam est, qui dolorem ipsum quia dolor sit amet, consectetur, adipisci velit.",
    "Quis autem vel eum iure reprehenderit qui in ea voluptate velit esse quam nihil molestiae consequatur.",
    "At vero eos et accusamus et iusto odio dignissimos ducimus qui blanditiis praesentium voluptatum.",
)

LOREM_IPSUM_WORDS = tuple(" ".join(LOREM_IPSUM_SENTENCES).split())


class TextToolError(Exception):
    """Raised when a text tool cannot process its input"""


def convert_case(text: str, case_type: CaseType) -> str:
    if case_type == CaseType.UPPERCASE:
        return text.upper()
    if case_type == CaseType.LOWERCASE:
        return text.lower()
    if case_type == CaseType.TITLECASE:
        # Split on single spaces so runs of spaces survive
        return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))
    return text


def encode_base64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64(text: str) -> str:
    """
    Lenient decode: whitespace, padding and stray characters are ignored
    and URL-safe letters are accepted. Invalid UTF-8 bytes become U+FFFD.
    """
    cleaned = NON_BASE64_PATTERN.sub("", text.translate(URL_SAFE_TRANSLATION))
    if len(cleaned) % 4 == 1:
        # one leftover character carries too few bits for a byte
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned).decode("utf-8", errors="replace")
    except (binascii.Error, ValueError) as e:
        raise TextToolError("Invalid base64 string") from e


def generate_lorem_ipsum(
    count: int,
    kind: LoremType = LoremType.PARAGRAPHS,
    max_paragraphs: int = DEFAULT_MAX_PARAGRAPHS,
) -> str:
    """Generate count words, or count paragraphs clamped to [1, max_paragraphs]"""
    if kind == LoremType.WORDS:
        return " ".join(LOREM_IPSUM_WORDS[i % len(LOREM_IPSUM_WORDS)] for i in range(count))

    paragraph_count = min(max(count, 1), max_paragraphs)
    return "\n\n".join(
        LOREM_IPSUM_SENTENCES[i % len(LOREM_IPSUM_SENTENCES)] for i in range(paragraph_count)
    )
