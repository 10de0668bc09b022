import logging
import math
import threading
from typing import Optional, Protocol

from sqlmodel import Session

from wingo.analytics.patterns import PatternType, detect, runs
from wingo.config import settings
from wingo.core.symbols import Symbol, classify
from wingo.db.crud import (
    create_prediction, get_draw, get_or_create_pattern, insert_draw, latest_prediction,
    list_patterns, recent_draws, record_occurrence, trailing_sequence,
)
from wingo.db.models import Draw
from wingo.notify import format_report
from wingo.sources import LatestDraw

logger = logging.getLogger(__name__)

WAIT, BIG, SMALL = "WAIT", "BIG", "SMALL"
ALLOWED, NOT_ALLOWED = "ALLOWED", "NOT_ALLOWED"

# one invocation at a time per process; overlapping triggers are dropped
_engine_lock = threading.Lock()


class DrawSource(Protocol):
    def fetch_latest(self) -> LatestDraw: ...


class ReportSink(Protocol):
    def send(self, text: str) -> None: ...


def decide(pattern_type: str, sequence: str, occurred: int, success: int,
           min_occurrences: int | None = None, floor: int | None = None) -> tuple[str, int, str]:
    min_occurrences = settings.min_occurrences if min_occurrences is None else min_occurrences
    floor = settings.confidence_floor if floor is None else floor
    if pattern_type != PatternType.BREAK_BREAKER or occurred < min_occurrences:
        return WAIT, 0, NOT_ALLOWED
    decision = BIG if sequence.startswith("BBB") else SMALL
    # half-up rounding; a zero ratio falls back to the floor
    ratio = math.floor(success / occurred * 100 + 0.5) if occurred else 0
    confidence = min(100, max(floor, ratio or floor))
    return decision, confidence, ALLOWED


def process_draw(session: Session, latest: LatestDraw, sink: ReportSink, window: int | None = None) -> Optional[dict]:
    if get_draw(session, latest.period):
        return None
    symbol = classify(latest.number)
    draw = insert_draw(session, Draw(period=latest.period, number=latest.number, symbol=symbol.label, color=latest.color))
    if draw is None:
        logger.info("period %s already stored by another writer", latest.period)
        return None

    seq = trailing_sequence(session, window or settings.window)
    pattern_type = detect(seq)
    stat = get_or_create_pattern(session, pattern_type.value, seq)
    stat = record_occurrence(session, stat)

    decision, confidence, status = decide(pattern_type, seq, stat.occurred, stat.success)
    pred = create_prediction(session, draw.period, decision, confidence, status)

    try:
        sink.send(format_report(draw, stat, pred))
    except Exception as e:
        logger.warning("report for %s not delivered: %s", draw.period, e)

    logger.info("saved %s %s %s -> %s", draw.period, seq, pattern_type.value, decision)
    return {
        'period': draw.period,
        'number': draw.number,
        'symbol': draw.symbol,
        'color': draw.color,
        'pattern_type': stat.pattern_type,
        'sequence': stat.sequence,
        'occurred': stat.occurred,
        'decision': pred.decision,
        'confidence': pred.confidence,
        'status': pred.status,
    }


def run_engine(session: Session, source: DrawSource, sink: ReportSink) -> Optional[dict]:
    # None when skipped: busy, or the period is known
    if not _engine_lock.acquire(blocking=False):
        logger.debug("engine busy, trigger dropped")
        return None
    try:
        latest = source.fetch_latest()
        return process_draw(session, latest, sink)
    finally:
        _engine_lock.release()


def draw_to_dict(d: Draw) -> dict:
    return {
        'period': d.period,
        'number': d.number,
        'symbol': d.symbol,
        'color': d.color,
        'recorded_at': d.recorded_at.isoformat(),
    }


def get_live(session: Session, limit: int | None = None):
    return [draw_to_dict(d) for d in recent_draws(session, limit=limit or settings.live_limit)]


def get_latest_prediction(session: Session):
    p = latest_prediction(session)
    if not p:
        return []
    return [{
        'period': p.period,
        'decision': p.decision,
        'confidence': p.confidence,
        'status': p.status,
        'created_at': p.created_at.isoformat(),
    }]


def get_patterns(session: Session, limit: int = 50, pattern_type: str | None = None):
    return [
        {'pattern_type': s.pattern_type, 'sequence': s.sequence, 'occurred': s.occurred, 'success': s.success}
        for s in list_patterns(session, limit=limit, pattern_type=pattern_type)
    ]


def get_streaks(session: Session, min_run: int = 3, limit: int | None = None):
    # runs over the live window, oldest first
    rows = list(reversed(recent_draws(session, limit=limit or settings.live_limit)))
    labels = [Symbol.from_label(d.symbol).value for d in rows]
    return [
        {'start': rows[a].period, 'end': rows[b].period, 'symbol': sym, 'length': n}
        for a, b, sym, n in runs(labels, k=min_run)
    ]
