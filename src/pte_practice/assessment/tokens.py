"""Text primitives shared by the scoring engine."""

import functools
import math
import re

_NON_TOKEN_CHARS = re.compile(r"[^a-z0-9\s']")
_WHITESPACE = re.compile(r"\s+")

# Ordered rewrite rules; each applies to the output of the previous one.
PHONETIC_RULES: tuple[tuple[str, str], ...] = (
    (r"ph", "f"),
    (r"ght", "t"),
    (r"kn", "n"),
    (r"wr", "r"),
    (r"wh", "w"),
    (r"tion\b", "shun"),
    (r"sion\b", "zhun"),
    (r"qu", "kw"),
    (r"c(?=[eiy])", "s"),
    (r"c", "k"),
    (r"x", "ks"),
    (r"[^a-z]", ""),
)

_COMPILED_RULES = tuple((re.compile(pattern), repl) for pattern, repl in PHONETIC_RULES)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (12.5 -> 13, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def tokenize(text: str | None) -> list[str]:
    """Split raw text into lowercase word tokens.

    Anything other than ``a-z``, digits, whitespace and apostrophes becomes a
    space, so "Don't stop!" gives ``["don't", "stop"]``.

    Args:
        text: Raw text. ``None`` is treated as empty.

    Returns:
        Tokens in speech order.
    """
    cleaned = _NON_TOKEN_CHARS.sub(" ", (text or "").lower())
    return [token for token in _WHITESPACE.split(cleaned) if token]


@functools.lru_cache(maxsize=4096)
def approx_phonetic(word: str) -> str:
    """Map a word to a coarse phonetic key used only for equality checks."""
    key = word.lower()
    for pattern, repl in _COMPILED_RULES:
        key = pattern.sub(repl, key)
    return key


def levenshtein(a: str, b: str) -> int:
    """Classic edit distance with unit insert, delete and substitute costs."""
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost,
            )
    return dp[m][n]
