from pydantic import BaseModel
from typing import Optional


class DrawItem(BaseModel):
    period: str
    number: int
    symbol: str
    color: Optional[str] = None
    recorded_at: str


class PredictionItem(BaseModel):
    period: str
    decision: str
    confidence: int
    status: str
    created_at: str


class PatternItem(BaseModel):
    pattern_type: str
    sequence: str
    occurred: int
    success: int


class StreakItem(BaseModel):
    start: str
    end: str
    symbol: str
    length: int


class TickOut(BaseModel):
    processed: bool
    result: Optional[dict] = None
