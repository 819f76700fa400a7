"""Utility functions for openhue.

- similarity_score: Fuzzy string matching used for command typo suggestions
- mask_key: Hide most of an application key for display
"""


def similarity_score(s1: str, s2: str) -> int:
    """Score how alike two command names are, from 0 to 100.

    Case is ignored. Equal names score 100, a prefix 80 and a substring 60.
    Otherwise the score is the share of s1's characters found in order in
    s2, scaled to 50; anything at or below 20 counts as no match.
    """
    a, b = s1.lower(), s2.lower()

    if a == b:
        return 100
    if a.startswith(b) or b.startswith(a):
        return 80
    if a in b or b in a:
        return 60

    remaining = iter(b)
    matches = sum(1 for char in a if char in remaining)
    score = int(matches / max(len(a), len(b)) * 50)
    return score if score > 20 else 0


def mask_key(key: str, visible: int = 4) -> str:
    """Mask an application key, keeping only its first characters."""
    if not key:
        return '(not set)'
    if len(key) <= visible:
        return '*' * len(key)
    return key[:visible] + '*' * (len(key) - visible)
