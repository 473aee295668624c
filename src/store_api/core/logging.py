"""
Logging for the store.

Handlers live on the ``store_api`` package logger; module loggers obtained
through ``get_logger`` propagate to it. A YAML ``dictConfig`` file, when
present at ``settings.log_config_path``, replaces the programmatic setup.
"""

import json
import logging
import logging.config
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from functools import cache
from pathlib import Path
from typing import Any

import yaml

from .config import LogFormat, settings
from .exceptions import ConfigurationException

PACKAGE_LOGGER = "store_api"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Attributes every LogRecord has; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with ``extra=`` fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        entry.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ColoredFormatter(logging.Formatter):
    """Text formatter that colors the whole line by level, for terminals."""

    LEVEL_COLORS = {
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        return f"\033[{color}m{line}\033[0m" if color else line


def _console_formatter(use_json: bool) -> logging.Formatter:
    if use_json:
        return JSONFormatter()
    if sys.stdout.isatty():
        return ColoredFormatter(TEXT_FORMAT)
    return logging.Formatter(TEXT_FORMAT)


def _apply_config_file(path: Path) -> None:
    try:
        logging.config.dictConfig(yaml.safe_load(path.read_text(encoding="utf-8")))
    except (yaml.YAMLError, ValueError, TypeError) as exc:
        raise ConfigurationException(
            f"Invalid logging configuration in {path}", details={"path": str(path)}
        ) from exc


def setup_logging(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    log_file: Path | None = None,
    use_json: bool | None = None,
) -> logging.Logger:
    """
    Attach handlers to the named logger, defaulting every option from settings.

    Raises ConfigurationException when the dictConfig file cannot be applied.
    """
    if settings.log_config_path.exists():
        _apply_config_file(settings.log_config_path)
        return logging.getLogger(name)

    level_no = logging.getLevelName((level or settings.log_level).upper())
    if not isinstance(level_no, int):
        level_no = logging.INFO
    log_file = log_file or settings.log_file_path
    if use_json is None:
        use_json = settings.log_format is LogFormat.JSON

    logger = logging.getLogger(name)
    logger.setLevel(level_no)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_console_formatter(use_json))
    logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter() if use_json else logging.Formatter(TEXT_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


@cache
def _package_logger() -> logging.Logger:
    return setup_logging(PACKAGE_LOGGER)


@cache
def get_logger(name: str) -> logging.Logger:
    """Module logger under the configured ``store_api`` package logger."""
    _package_logger()
    return logging.getLogger(name)


class ContextAdapter(logging.LoggerAdapter):
    """Adds fixed context to every record; per-call ``extra`` wins on conflicts."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger_with_context(name: str, **context: Any) -> ContextAdapter:
    return ContextAdapter(get_logger(name), context)
