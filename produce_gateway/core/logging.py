"""Centralized logging configuration for the gateway.

Entry points call configure_logging() once, before the app is created.
Every handler gets a SecretRedactingFilter masking Google API keys and
``key=`` query parameters in upstream URLs.
"""

import logging
import re
import sys

DEFAULT_REDACT_PATTERNS: list[str] = [
    # Google API keys
    r"\b(AIza[0-9A-Za-z\-_]{20,})\b",
    # key=... query parameters
    r"[?&]key=([^&\s\"']+)",
]

# Third-party loggers that are too noisy at INFO level
NOISY_LOGGERS = [
    "httpx",
    "httpcore",
    "hpack",
    "uvicorn.access",
]


class SecretRedactingFilter(logging.Filter):
    """Masks API keys in log messages, keeping the first and last 4 characters."""

    def __init__(self, patterns: list[str] | None = None) -> None:
        super().__init__()
        self.patterns = [
            re.compile(p) for p in (patterns or DEFAULT_REDACT_PATTERNS)
        ]

    def redact(self, text: str) -> str:
        for pattern in self.patterns:
            text = pattern.sub(self._mask_match, text)
        return text

    def _mask_match(self, match: re.Match[str]) -> str:
        full = match.group(0)
        token = match.group(1)
        if len(token) < 12:
            return full.replace(token, "***")
        return full.replace(token, f"{token[:4]}...{token[-4:]}")

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the gateway.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR). Unknown names fall back to INFO.
    """
    level = level.upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        level = "INFO"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    handler.addFilter(SecretRedactingFilter())

    logging.basicConfig(level=getattr(logging, level), handlers=[handler], force=True)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    # Route uvicorn's own loggers through the redacting handler
    for logger_name in ("uvicorn", "uvicorn.error"):
        uv_logger = logging.getLogger(logger_name)
        uv_logger.handlers = [handler]
        uv_logger.propagate = False
