from sqlmodel import SQLModel, create_engine, Session
from wingo.config import settings
import os

# data dir for the default SQLite file
if settings.db_dsn.startswith("sqlite:///./"):
    os.makedirs("data", exist_ok=True)

connect_args = {"check_same_thread": False} if settings.db_dsn.startswith("sqlite") else {}
engine = create_engine(settings.db_dsn, echo=False, connect_args=connect_args)

def init_db(bind=None):
    # register tables on SQLModel.metadata
    from wingo.db import models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)

def get_session():
    with Session(engine) as session:
        yield session
