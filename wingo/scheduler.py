import logging
import threading

import schedule
from sqlmodel import Session

from wingo.config import Settings
from wingo.db.base import engine as default_engine
from wingo.notify import build_sink
from wingo.services import run_engine
from wingo.sources import FetchError, HttpDrawSource

logger = logging.getLogger(__name__)


class EngineScheduler:
    def __init__(self, cfg: Settings, bind=None, source=None, sink=None):
        self.cfg = cfg
        self.bind = bind or default_engine
        self.source = source or HttpDrawSource(cfg.api_url, timeout=cfg.fetch_timeout)
        self.sink = sink or build_sink(cfg)
        self.jobs = schedule.Scheduler()
        self.stop_event = threading.Event()
        self.thread: threading.Thread | None = None

    def trigger(self):
        try:
            with Session(self.bind) as session:
                return run_engine(session, self.source, self.sink)
        except FetchError as e:
            logger.warning("fetch failed: %s", e)
        except Exception:
            logger.exception("engine invocation failed")
        return None

    def run_forever(self):
        self.jobs.every(self.cfg.interval_seconds).seconds.do(self.trigger)
        logger.info("engine scheduled every %ss", self.cfg.interval_seconds)
        while not self.stop_event.is_set():
            self.jobs.run_pending()
            self.stop_event.wait(0.2)
        self.jobs.clear()

    def start(self):
        self.thread = threading.Thread(target=self.run_forever, name="wingo-engine", daemon=True)
        self.thread.start()

    def stop(self, timeout: float = 5.0):
        self.stop_event.set()
        if self.thread:
            self.thread.join(timeout)
