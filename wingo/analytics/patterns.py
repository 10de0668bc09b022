import re
from enum import Enum

# Windows are most-recent-first strings of 'B' / 'S'
_ALTERNATING = re.compile(r"(BS)+B?|(SB)+S?")
_STREAK = re.compile(r"BBB|SSS")
_BROKEN_STREAKS = ("BBBS", "SSSB", "SBBB", "BSSS")


class PatternType(str, Enum):
    ALTERNATING = "Alternating"
    STABLE = "Stable"
    BREAK_BREAKER = "Break-Breaker"
    MIXED = "Mixed"


def is_alternating(seq: str) -> bool:
    return bool(_ALTERNATING.fullmatch(seq))


def is_break_breaker(seq: str) -> bool:
    # three-long streak at one edge, opposite symbol at the other
    return seq in _BROKEN_STREAKS


def is_stable(seq: str) -> bool:
    return bool(_STREAK.search(seq)) and not is_break_breaker(seq)


def detect(seq: str) -> PatternType:
    if is_alternating(seq):
        return PatternType.ALTERNATING
    if is_stable(seq):
        return PatternType.STABLE
    if is_break_breaker(seq):
        return PatternType.BREAK_BREAKER
    return PatternType.MIXED


def runs(labels, k: int = 3):
    labels = list(labels)
    out = []
    if not labels:
        return out
    cur = labels[0]
    start = 0
    for i in range(1, len(labels)):
        if labels[i] == cur:
            continue
        seg_len = i - start
        if seg_len >= k:
            out.append((start, i-1, cur, seg_len))
        cur = labels[i]
        start = i
    # tail
    seg_len = len(labels) - start
    if seg_len >= k:
        out.append((start, len(labels)-1, cur, seg_len))
    return out
