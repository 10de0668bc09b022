import typer
import requests
import os
from sqlmodel import Session
from wingo.config import settings
from wingo.db.base import engine, init_db
from wingo.log import setup_logging
from wingo.notify import build_sink
from wingo.scheduler import EngineScheduler
from wingo.services import run_engine
from wingo.sources import FetchError, HttpDrawSource


app = typer.Typer()
BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")


def _headers():
    h = {}
    if settings.api_key:
        h["X-API-Key"] = settings.api_key
    return h


@app.command()
def tick():
    """Run one engine invocation against the configured database."""
    setup_logging(settings.log_level)
    init_db()
    source = HttpDrawSource(settings.api_url, timeout=settings.fetch_timeout)
    with Session(engine) as session:
        try:
            result = run_engine(session, source, build_sink(settings))
        except FetchError as e:
            typer.echo(f"fetch failed: {e}", err=True)
            raise typer.Exit(code=1)
    typer.echo(result if result else "nothing new")


@app.command()
def run(interval: int = typer.Option(None, help="seconds between invocations")):
    """Run the engine on a fixed interval until interrupted."""
    setup_logging(settings.log_level)
    init_db()
    if interval:
        settings.interval_seconds = interval
    runner = EngineScheduler(settings)
    try:
        runner.run_forever()
    except KeyboardInterrupt:
        runner.stop_event.set()


@app.command()
def live():
    r = requests.get(f"{BASE}/api/live", headers=_headers())
    typer.echo(r.json())


@app.command()
def prediction():
    r = requests.get(f"{BASE}/api/prediction", headers=_headers())
    typer.echo(r.json())


@app.command()
def patterns(limit: int = 50):
    r = requests.get(f"{BASE}/api/patterns", params={"limit": limit}, headers=_headers())
    typer.echo(r.json())


if __name__ == "__main__":
    app()
