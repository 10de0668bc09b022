from fastapi import FastAPI
from contextlib import asynccontextmanager
from wingo.config import settings
from wingo.db.base import init_db
from wingo.api.routes import router
from wingo.log import setup_logging
from wingo.scheduler import EngineScheduler

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    init_db()
    runner = None
    if settings.scheduler_enabled:
        runner = EngineScheduler(settings)
        runner.start()
    yield
    if runner:
        runner.stop()

app = FastAPI(title="Wingo Streak Engine", lifespan=lifespan)
app.include_router(router)
