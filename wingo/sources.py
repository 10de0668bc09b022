import logging
import time

import requests
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    pass


class LatestDraw(BaseModel):
    period: str = Field(min_length=1)
    number: int
    color: str | None = None


def parse_history_page(data: dict) -> LatestDraw:
    try:
        item = data["data"]["list"][0]
        return LatestDraw(period=str(item["issueNumber"]), number=item["number"], color=item.get("color"))
    except (KeyError, IndexError, TypeError, AttributeError, ValidationError) as e:
        raise FetchError(f"Unexpected API format: {e}") from e


class HttpDrawSource:
    def __init__(self, url: str, timeout: float = 10.0, session: requests.Session | None = None):
        self.url = url
        self.timeout = timeout
        self.http = session or requests.Session()

    def fetch_latest(self) -> LatestDraw:
        try:
            # cache buster, the page is served through a CDN
            r = self.http.get(self.url, params={"ts": int(time.time() * 1000)}, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            raise FetchError(str(e)) from e
        latest = parse_history_page(data)
        logger.debug("fetched period %s", latest.period)
        return latest
