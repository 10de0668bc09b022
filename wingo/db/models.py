from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone


class Draw(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    period: str = Field(index=True, unique=True)
    number: int
    symbol: str  # 'Big' | 'Small'
    color: str | None = None
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)


class PatternStat(SQLModel, table=True):
    __table_args__ = (UniqueConstraint("pattern_type", "sequence"),)

    id: int | None = Field(default=None, primary_key=True)
    pattern_type: str = Field(index=True)  # 'Alternating' | 'Stable' | 'Break-Breaker' | 'Mixed'
    sequence: str  # most recent first, e.g. 'SBBB'
    occurred: int = 0
    success: int = 0


class Prediction(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    period: str = Field(index=True, unique=True)
    decision: str  # 'WAIT' | 'BIG' | 'SMALL'
    confidence: int = 0
    status: str  # 'ALLOWED' | 'NOT_ALLOWED'
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
