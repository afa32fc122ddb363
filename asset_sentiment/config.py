# asset_sentiment/config.py
from __future__ import annotations
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "http://127.0.0.1:8000"
DEFAULT_API_PATH = "/analyze"

def _as_int(v: str | None, default: int) -> int:
    try:
        return int(v) if v is not None else default
    except Exception:
        return default

def _as_float(v: str | None, default: Optional[float]) -> Optional[float]:
    if v is None or not str(v).strip():
        return default
    try:
        return float(v)
    except Exception:
        return default

def _as_level(v: str | None, default: int = logging.INFO) -> int:
    if v is None:
        return default
    if str(v).strip().isdigit():
        return _as_int(v, default)
    level = logging.getLevelName(str(v).strip().upper())
    return level if isinstance(level, int) else default

@dataclass
class Settings:
    api_url: str
    api_path: str
    # None means the request waits for the backend indefinitely
    request_timeout: Optional[float]
    log_level: int

    @property
    def analyze_url(self) -> str:
        return self.api_url.rstrip("/") + "/" + self.api_path.lstrip("/")

    @classmethod
    def load(cls) -> "Settings":
        return cls(
            api_url=os.getenv("SENTIMENT_API_URL", DEFAULT_API_URL),
            api_path=os.getenv("SENTIMENT_API_PATH", DEFAULT_API_PATH),
            request_timeout=_as_float(os.getenv("SENTIMENT_API_TIMEOUT"), None),
            log_level=_as_level(os.getenv("LOG_LEVEL")),
        )

def get_settings() -> Settings:
    s = Settings.load()
    if not s.api_url.strip():
        raise RuntimeError("SENTIMENT_API_URL is empty. Unset it or point it at the backend.")
    if s.request_timeout is not None and s.request_timeout <= 0:
        raise RuntimeError("SENTIMENT_API_TIMEOUT must be a positive number of seconds.")
    return s

def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stdout. Safe to call on every Streamlit rerun."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if any(getattr(h, "_asset_sentiment", False) for h in root_logger.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    handler._asset_sentiment = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_API_PATH",
    "Settings",
    "get_settings",
    "configure_logging",
]
