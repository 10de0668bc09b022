import logging

import requests

from wingo.config import Settings

logger = logging.getLogger(__name__)

TELEGRAM_API = "https://api.telegram.org"


def format_report(draw, stat, pred) -> str:
    return (
        "📊 Result\n"
        f"Period: {draw.period}\n"
        f"Number: {draw.number}\n"
        f"Big/Small: {draw.symbol}\n"
        f"Color: {draw.color}\n"
        "\n"
        "🧠 Learning\n"
        f"Pattern: {stat.pattern_type}\n"
        f"Sequence: {stat.sequence}\n"
        f"Occurred: {stat.occurred}\n"
        "\n"
        "🔮 Prediction\n"
        f"Decision: {pred.decision}\n"
        f"Confidence: {pred.confidence}%\n"
        f"Status: {pred.status}"
    )


class TelegramSink:
    def __init__(self, bot_token: str, chat_id: str, timeout: float = 10.0):
        self.url = f"{TELEGRAM_API}/bot{bot_token}/sendMessage"
        self.chat_id = chat_id
        self.timeout = timeout

    def send(self, text: str):
        r = requests.post(self.url, json={"chat_id": self.chat_id, "text": text}, timeout=self.timeout)
        r.raise_for_status()


class LogSink:
    def send(self, text: str):
        logger.info("report\n%s", text)


def build_sink(cfg: Settings):
    if cfg.bot_token and cfg.chat_id:
        return TelegramSink(cfg.bot_token, cfg.chat_id, timeout=cfg.fetch_timeout)
    logger.warning("BOT_TOKEN/CHAT_ID not set, reports go to the log")
    return LogSink()
