"""
Regex Tester Service - Run a pattern against a text with the native engine
"""

from __future__ import annotations

import logging
import re

from models.regex import RegexResult
from services.pattern_explainer import explain_pattern

logger = logging.getLogger(__name__)

INVALID_PATTERN_MESSAGE = "Invalid regular expression pattern"

# JS-style flag letters understood by the tester; "g" is handled separately
FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": 0,
    "y": 0,
}


def compile_flags(flags: str) -> int:
    """Translate JS-style flag letters into re flags, ValueError on unknown letters"""
    compiled = 0
    for letter in flags:
        if letter == "g":
            continue
        if letter not in FLAG_MAP:
            raise ValueError(f"Unknown regex flag: {letter}")
        compiled |= FLAG_MAP[letter]
    return compiled


def highlight_matches(text: str, matches: list[re.Match]) -> str:
    """Wrap every match in <mark> tags"""
    parts = []
    last_index = 0
    for match in matches:
        parts.append(text[last_index:match.start()])
        parts.append(f"<mark>{match.group(0)}</mark>")
        last_index = match.end()
    parts.append(text[last_index:])
    return "".join(parts)


def run_pattern(text: str, pattern: str, flags: str = "g") -> RegexResult:
    """Find matches of pattern in text and explain the pattern"""
    pattern_parts = explain_pattern(pattern)

    try:
        regex = re.compile(pattern, compile_flags(flags))
    except (re.error, ValueError) as e:
        logger.info("Rejected pattern %r (flags=%r): %s", pattern, flags, e)
        return RegexResult(
            error=INVALID_PATTERN_MESSAGE,
            highlighted_text=text,
            pattern_parts=pattern_parts,
        )

    # Without "g" the first match is returned rather than an error
    if "g" in flags:
        found = list(regex.finditer(text))
    else:
        first = regex.search(text)
        found = [first] if first else []

    return RegexResult(
        matches=[match.group(0) for match in found],
        highlighted_text=highlight_matches(text, found),
        capture_groups=[[match.group(0), *match.groups()] for match in found],
        pattern_parts=pattern_parts,
    )
