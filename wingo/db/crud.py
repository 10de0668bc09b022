from typing import Optional
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select
from wingo.core.symbols import Symbol
from wingo.db.models import Draw, PatternStat, Prediction


# Draw repository


def insert_draw(session: Session, draw: Draw) -> Optional[Draw]:
    # None when the period is already stored
    session.add(draw)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        return None
    session.refresh(draw)
    return draw


def get_draw(session: Session, period: str) -> Optional[Draw]:
    return session.exec(select(Draw).where(Draw.period == period)).first()


def recent_draws(session: Session, limit: int = 20) -> list[Draw]:
    return session.exec(
        select(Draw).order_by(Draw.recorded_at.desc(), Draw.id.desc()).limit(limit)
    ).all()


def trailing_sequence(session: Session, window: int = 4) -> str:
    # most recent first
    return "".join(Symbol.from_label(d.symbol).value for d in recent_draws(session, limit=window))


# Pattern learning store


def get_or_create_pattern(session: Session, pattern_type: str, sequence: str) -> PatternStat:
    stmt = select(PatternStat).where(PatternStat.pattern_type == pattern_type).where(PatternStat.sequence == sequence)
    stat = session.exec(stmt).first()
    if stat:
        return stat
    stat = PatternStat(pattern_type=pattern_type, sequence=sequence)
    session.add(stat)
    try:
        session.commit()
    except IntegrityError:
        # created by a concurrent writer
        session.rollback()
        return session.exec(stmt).one()
    session.refresh(stat)
    return stat


def record_occurrence(session: Session, stat: PatternStat) -> PatternStat:
    # increment in SQL so concurrent writers do not lose counts
    session.exec(update(PatternStat).where(PatternStat.id == stat.id).values(occurred=PatternStat.occurred + 1))
    session.commit()
    session.refresh(stat)
    return stat


def list_patterns(session: Session, limit: int = 50, pattern_type: str | None = None) -> list[PatternStat]:
    stmt = select(PatternStat)
    if pattern_type:
        stmt = stmt.where(PatternStat.pattern_type == pattern_type)
    return session.exec(stmt.order_by(PatternStat.occurred.desc(), PatternStat.id).limit(limit)).all()


# Prediction log


def create_prediction(session: Session, period: str, decision: str, confidence: int, status: str) -> Prediction:
    pred = Prediction(period=period, decision=decision, confidence=confidence, status=status)
    session.add(pred)
    session.commit()
    session.refresh(pred)
    return pred


def latest_prediction(session: Session) -> Optional[Prediction]:
    return session.exec(
        select(Prediction).order_by(Prediction.created_at.desc(), Prediction.id.desc()).limit(1)
    ).first()
