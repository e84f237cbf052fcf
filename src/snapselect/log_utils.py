"""
log_utils.py
Configuração central de logging com:
 - Console handler (sempre)
 - File handler rotativo (se log_file configurado)
 - JSON opcional (SNAPSELECT_LOG_JSON=1)
 - Compatível com chamadas repetidas (idempotente)

Only the ``snapselect`` logger namespace is configured; the root logger is
left to the host application. Library modules only call
``logging.getLogger(__name__)``; applications opt in by calling
``configure_logging()`` themselves.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from .settings import SETTINGS

LOGGER_NAMESPACE = "snapselect"

_LOCK = threading.Lock()
_CONFIGURED = False

_RESERVED_ATTRS = frozenset({
    "args", "msg", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "taskName", "name",
})


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        # Extra
        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS or k.startswith("_"):
                continue
            try:
                json.dumps({k: v})
                data[k] = v
            except (TypeError, ValueError):
                data[k] = str(v)
        return json.dumps(data, ensure_ascii=False)


def _ensure_log_dir(path: str) -> None:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)


def configure_logging(level: str | None = None) -> None:
    global _CONFIGURED
    with _LOCK:
        if _CONFIGURED:
            return
        log_conf = SETTINGS.logging
        raw_level = level or log_conf.level
        chosen_level = getattr(logging, raw_level.upper(), logging.INFO)

        pkg_logger = logging.getLogger(LOGGER_NAMESPACE)
        pkg_logger.setLevel(chosen_level)

        # Limpando handlers prévios (caso já exista algo residual)
        for h in list(pkg_logger.handlers):
            pkg_logger.removeHandler(h)

        if log_conf.json:
            formatter: logging.Formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
                "%Y-%m-%d %H:%M:%S",
            )

        # Console
        ch = logging.StreamHandler()
        ch.setLevel(chosen_level)
        ch.setFormatter(formatter)
        pkg_logger.addHandler(ch)

        # Arquivo (rotativo) se log_file definido
        if log_conf.log_file:
            try:
                _ensure_log_dir(log_conf.log_file)
                fh = RotatingFileHandler(
                    log_conf.log_file,
                    maxBytes=log_conf.max_bytes,
                    backupCount=log_conf.backup_count,
                    encoding="utf-8",
                )
            except OSError as e:
                pkg_logger.warning("Could not create file handler", extra={"err": str(e)})
            else:
                fh.setLevel(chosen_level)
                fh.setFormatter(formatter)
                pkg_logger.addHandler(fh)

        _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
