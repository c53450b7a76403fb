"""
Pattern Explainer Service - Describe a regular expression piece by piece

The pattern is scanned lexically and never compiled, so patterns that the
regex engine would reject can still be explained.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType

from models.regex import PatternToken, PatternTokenKind

logger = logging.getLogger(__name__)

CHARACTER_SET_EXPLANATIONS = MappingProxyType(
    {
        "\\d": "Matches any digit (0-9)",
        "\\D": "Matches any non-digit character",
        "\\w": "Matches any word character (alphanumeric & underscore)",
        "\\W": "Matches any non-word character",
        "\\s": "Matches any whitespace character (space, tab, newline)",
        "\\S": "Matches any non-whitespace character",
        "\\b": "Matches a word boundary",
        "\\B": "Matches a non-word boundary",
        "[A-Z]": "Matches any uppercase letter from A to Z",
        "[a-z]": "Matches any lowercase letter from a to z",
        "[0-9]": "Matches any digit from 0 to 9",
        "[A-Za-z]": "Matches any letter (case-sensitive)",
        "[^]": "Matches any character except those in brackets",
    }
)

# Brace forms are templates filled with the bounds found in the pattern
QUANTIFIER_EXPLANATIONS = MappingProxyType(
    {
        "*": "Matches 0 or more times",
        "+": "Matches 1 or more times",
        "?": "Matches 0 or 1 time",
        "{n}": "Matches exactly {n} times",
        "{n,}": "Matches {n} or more times",
        "{n,m}": "Matches between {n} and {m} times",
    }
)

ANCHOR_EXPLANATIONS = MappingProxyType(
    {
        "^": "Start of string or line",
        "$": "End of string or line",
    }
)

# Longest prefixes first: "(?<=" must win over a bare "("
GROUP_EXPLANATIONS = MappingProxyType(
    {
        "(?<=": "Positive lookbehind",
        "(?<!": "Negative lookbehind",
        "(?:": "Non-capturing group",
        "(?=": "Positive lookahead",
        "(?!": "Negative lookahead",
    }
)

SHORTHAND_CLASSES = frozenset("dDwWsSbB")
METACHARACTERS = frozenset(".*+?{}()[]\\|")

_BRACE_FORMS = (
    (re.compile(r"\{(\d+)\}"), "{n}"),
    (re.compile(r"\{(\d+),\}"), "{n,}"),
    (re.compile(r"\{(\d+),(\d+)\}"), "{n,m}"),
)


def _token(text: str, kind: PatternTokenKind, explanation: str) -> PatternToken:
    return PatternToken(text=text, kind=kind, explanation=explanation)


def _find_closing(pattern: str, start: int, closer: str) -> int:
    """Index of the first unescaped closer at or after start, -1 if none"""
    i = start
    while i < len(pattern):
        if pattern[i] == "\\":
            i += 2
            continue
        if pattern[i] == closer:
            return i
        i += 1
    return -1


def _escape_token(char: str) -> PatternToken:
    text = "\\" + char
    if char in SHORTHAND_CLASSES:
        return _token(text, PatternTokenKind.CHARACTER_CLASS, CHARACTER_SET_EXPLANATIONS[text])
    return _token(text, PatternTokenKind.ESCAPED_LITERAL, f'Matches the literal character "{char}"')


def _character_class_explanation(text: str) -> str:
    return CHARACTER_SET_EXPLANATIONS.get(text, f"Character set: {text}")


def _quantifier_explanation(text: str) -> str:
    if len(text) == 1 and text in QUANTIFIER_EXPLANATIONS:
        return QUANTIFIER_EXPLANATIONS[text]
    for form, key in _BRACE_FORMS:
        match = form.fullmatch(text)
        if match:
            bounds = match.groups()
            return QUANTIFIER_EXPLANATIONS[key].format(
                n=bounds[0], m=bounds[1] if len(bounds) > 1 else ""
            )
    return f"Quantifier: {text}"


def _group_explanation(text: str) -> str | None:
    """Explanation for a known group form, None for unknown (?... constructs"""
    for prefix, explanation in GROUP_EXPLANATIONS.items():
        if text.startswith(prefix):
            return explanation
    if text.startswith("(?"):
        return None
    return "Capturing group"


def explain_pattern(pattern: str) -> list[PatternToken]:
    """
    Split a regex source string into explained tokens.

    Groups are scanned flat: the first unescaped ")" closes the group, so
    nested groups end up inside their outer group's token. An unterminated
    bracket class or group drops the rest of the pattern; an unterminated
    brace quantifier is kept as a partial token.
    """
    tokens: list[PatternToken] = []
    i = 0

    while i < len(pattern):
        char = pattern[i]

        if char == "\\":
            if i + 1 < len(pattern):
                tokens.append(_escape_token(pattern[i + 1]))
            i += 2
            continue

        if char in "[(":
            closer = "]" if char == "[" else ")"
            end = _find_closing(pattern, i + 1, closer)
            if end == -1:
                logger.debug("Unterminated %r at %d in pattern", char, i)
                break
            text = pattern[i:end + 1]
            if char == "[":
                tokens.append(
                    _token(text, PatternTokenKind.CHARACTER_CLASS, _character_class_explanation(text))
                )
            else:
                explanation = _group_explanation(text)
                if explanation:
                    tokens.append(_token(text, PatternTokenKind.GROUP, explanation))
            i = end + 1
            continue

        if char == "{":
            end = pattern.find("}", i + 1)
            end = len(pattern) - 1 if end == -1 else end
            text = pattern[i:end + 1]
            tokens.append(_token(text, PatternTokenKind.QUANTIFIER, _quantifier_explanation(text)))
            i = end + 1
            continue

        if char in "*+?":
            tokens.append(_token(char, PatternTokenKind.QUANTIFIER, _quantifier_explanation(char)))
        elif char in ANCHOR_EXPLANATIONS:
            tokens.append(_token(char, PatternTokenKind.ANCHOR, ANCHOR_EXPLANATIONS[char]))
        elif char not in METACHARACTERS:
            tokens.append(
                _token(char, PatternTokenKind.LITERAL, f'Matches the literal character "{char}"')
            )
        i += 1

    return tokens
