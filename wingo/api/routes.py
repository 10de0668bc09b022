from fastapi import APIRouter, Depends, HTTPException, Header
from fastapi.responses import PlainTextResponse
from sqlmodel import Session
from wingo.analytics.patterns import PatternType
from wingo.db.base import get_session
from wingo.db.crud import get_draw
from wingo.api.schemas import DrawItem, PredictionItem, PatternItem, StreakItem, TickOut
from wingo.services import get_live, get_latest_prediction, get_patterns, get_streaks, draw_to_dict, run_engine
from wingo.sources import FetchError, HttpDrawSource
from wingo.notify import build_sink
from wingo.config import settings
from wingo.core.validation import is_valid_period

router = APIRouter()


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


def get_source():
    return HttpDrawSource(settings.api_url, timeout=settings.fetch_timeout)


def get_sink():
    return build_sink(settings)


@router.get('/', response_class=PlainTextResponse)
def home():
    return "Wingo backend running"

@router.get('/api/live', response_model=list[DrawItem])
def live(session: Session = Depends(get_session)):
    return get_live(session)

@router.get('/api/prediction', response_model=list[PredictionItem])
def prediction(session: Session = Depends(get_session)):
    return get_latest_prediction(session)

@router.get('/api/draws/{period}', response_model=DrawItem)
def draw(period: str, session: Session = Depends(get_session)):
    if not is_valid_period(period):
        raise HTTPException(400, detail="malformed period")
    d = get_draw(session, period)
    if not d:
        raise HTTPException(404, detail="unknown period")
    return draw_to_dict(d)

@router.get('/api/patterns', response_model=list[PatternItem])
def patterns(limit: int = 50, pattern_type: PatternType | None = None, session: Session = Depends(get_session)):
    return get_patterns(session, limit=limit, pattern_type=pattern_type.value if pattern_type else None)

@router.get('/api/streaks', response_model=list[StreakItem])
def streaks(min_k: int = 3, session: Session = Depends(get_session)):
    return get_streaks(session, min_run=min_k)

@router.post('/api/engine/tick', response_model=TickOut)
def tick(session: Session = Depends(get_session), source=Depends(get_source), sink=Depends(get_sink), ok=Depends(_auth)):
    try:
        result = run_engine(session, source, sink)
    except FetchError as e:
        raise HTTPException(502, detail=f"draw source failed: {e}")
    return {'processed': result is not None, 'result': result}
