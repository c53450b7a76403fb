"""
Diff Engine Service - Compare two texts at line, word or character granularity
"""

from __future__ import annotations

import logging
import re

from models.diff import DiffEntry, DiffMode, DiffResult, DiffStats

logger = logging.getLogger(__name__)

# Keeps whitespace runs as separate tokens
WHITESPACE_SPLIT_PATTERN = re.compile(r"(\s+)")

# How far word mode looks ahead to re-synchronize after a mismatch
LOOKAHEAD_WINDOW = 2


class DiffEngine:
    """Compute element-level differences between two texts"""

    def compute_diff(
        self,
        text_a: str,
        text_b: str,
        mode: DiffMode = DiffMode.LINE,
    ) -> DiffResult:
        """Diff text_a against text_b and attach statistics"""
        if mode == DiffMode.WORD:
            differences = self._word_diff(text_a, text_b)
        elif mode == DiffMode.CHAR:
            differences = self._char_diff(text_a, text_b)
        else:
            differences = self._line_diff(text_a, text_b)

        stats = DiffStats.from_entries(differences)
        logger.debug(
            "%s diff: +%d -%d ~%d", mode.value, stats.additions, stats.deletions, stats.changes
        )
        return DiffResult(differences=differences, stats=stats)

    def _line_diff(self, text_a: str, text_b: str) -> list[DiffEntry]:
        """Index-aligned comparison: line i of a is only ever compared to line i of b"""
        lines_a = text_a.split("\n") if text_a else []
        lines_b = text_b.split("\n") if text_b else []
        differences = []

        for i in range(max(len(lines_a), len(lines_b))):
            if i >= len(lines_a):
                differences.append(DiffEntry.added(lines_b[i], position=i + 1))
            elif i >= len(lines_b):
                differences.append(DiffEntry.removed(lines_a[i], position=i + 1))
            elif lines_a[i] != lines_b[i]:
                differences.append(DiffEntry.changed(lines_a[i], lines_b[i], position=i + 1))

        return differences

    def _word_diff(self, text_a: str, text_b: str) -> list[DiffEntry]:
        """
        Greedy two-cursor walk over word/whitespace tokens.

        On a mismatch the next LOOKAHEAD_WINDOW tokens of a are searched first
        (removal), then those of b (addition); otherwise the pair is a change.
        """
        words_a = WHITESPACE_SPLIT_PATTERN.split(text_a) if text_a else []
        words_b = WHITESPACE_SPLIT_PATTERN.split(text_b) if text_b else []
        differences = []
        i = j = 0

        while i < len(words_a) or j < len(words_b):
            if i >= len(words_a):
                differences.append(DiffEntry.added("".join(words_b[j:])))
                break
            if j >= len(words_b):
                differences.append(DiffEntry.removed("".join(words_a[i:])))
                break

            if words_a[i] == words_b[j]:
                i += 1
                j += 1
                continue

            skip = self._lookahead(words_a, i, words_b[j])
            if skip:
                differences.append(DiffEntry.removed("".join(words_a[i:i + skip])))
                i += skip
                continue

            skip = self._lookahead(words_b, j, words_a[i])
            if skip:
                differences.append(DiffEntry.added("".join(words_b[j:j + skip])))
                j += skip
                continue

            differences.append(DiffEntry.changed(words_a[i], words_b[j]))
            i += 1
            j += 1

        return differences

    @staticmethod
    def _lookahead(tokens: list[str], start: int, target: str) -> int:
        """Offset (1..LOOKAHEAD_WINDOW) of the first token after start equal to target, or 0"""
        for k in range(1, LOOKAHEAD_WINDOW + 1):
            if start + k >= len(tokens):
                break
            if tokens[start + k] == target:
                return k
        return 0

    def _char_diff(self, text_a: str, text_b: str) -> list[DiffEntry]:
        """Position-aligned character walk; consecutive mismatches merge into one change"""
        differences = []
        pending_old = []
        pending_new = []
        i = j = 0

        def flush():
            if pending_old:
                differences.append(DiffEntry.changed("".join(pending_old), "".join(pending_new)))
                pending_old.clear()
                pending_new.clear()

        while i < len(text_a) or j < len(text_b):
            if i >= len(text_a):
                flush()
                differences.append(DiffEntry.added(text_b[j:]))
                break
            if j >= len(text_b):
                flush()
                differences.append(DiffEntry.removed(text_a[i:]))
                break

            if text_a[i] == text_b[j]:
                flush()
            else:
                pending_old.append(text_a[i])
                pending_new.append(text_b[j])
            i += 1
            j += 1

        flush()
        return differences
