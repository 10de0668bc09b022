from sqlmodel import Session

from wingo.db.crud import (
    get_or_create_pattern, record_occurrence, list_patterns, insert_draw, get_draw, recent_draws, trailing_sequence,
)
from wingo.db.models import Draw

def test_get_or_create_is_idempotent(session):
    a = get_or_create_pattern(session, "Stable", "BBBB")
    b = get_or_create_pattern(session, "Stable", "BBBB")
    assert a.id == b.id and a.occurred == 0 and a.success == 0
    c = get_or_create_pattern(session, "Mixed", "BBBB")
    assert c.id != a.id

def test_record_occurrence(session):
    s = get_or_create_pattern(session, "Break-Breaker", "BBBS")
    for _ in range(3):
        s = record_occurrence(session, s)
    assert get_or_create_pattern(session, "Break-Breaker", "BBBS").occurred == 3
    assert s.success == 0

def test_list_patterns_most_seen_first(session):
    record_occurrence(session, get_or_create_pattern(session, "Mixed", "BSSB"))
    s = get_or_create_pattern(session, "Stable", "SSSS")
    record_occurrence(session, s); record_occurrence(session, s)
    rows = list_patterns(session)
    assert [r.sequence for r in rows] == ["SSSS", "BSSB"]
    assert [r.sequence for r in list_patterns(session, pattern_type="Mixed")] == ["BSSB"]

def test_insert_draw_unique_period(session):
    assert insert_draw(session, Draw(period="1", number=3, symbol="Small")) is not None
    assert insert_draw(session, Draw(period="1", number=8, symbol="Big")) is None
    assert get_draw(session, "1").number == 3

def test_recent_draws_order(session):
    for i, (n, sym) in enumerate([(1, "Small"), (9, "Big"), (6, "Big")]):
        insert_draw(session, Draw(period=str(i), number=n, symbol=sym))
    assert [d.period for d in recent_draws(session, limit=2)] == ["2", "1"]
    assert trailing_sequence(session, 4) == "BBS"

def test_timestamps_are_timezone_aware(session):
    d = Draw(period="tz", number=5, symbol="Big")
    assert d.recorded_at.tzinfo is not None
    assert insert_draw(session, d) is not None
    assert get_draw(session, "tz").recorded_at is not None

def test_record_occurrence_from_two_sessions(db_engine):
    with Session(db_engine) as s:
        get_or_create_pattern(s, "Break-Breaker", "SBBB")
    with Session(db_engine) as a, Session(db_engine) as b:
        stat_a = get_or_create_pattern(a, "Break-Breaker", "SBBB")
        stat_b = get_or_create_pattern(b, "Break-Breaker", "SBBB")
        record_occurrence(a, stat_a)
        record_occurrence(b, stat_b)
    with Session(db_engine) as s:
        assert get_or_create_pattern(s, "Break-Breaker", "SBBB").occurred == 2
