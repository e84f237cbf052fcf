"""
settings.py
Configurações centrais e imutáveis (dataclasses) para o snapselect.

Every default is read from an environment variable once, at import time.
Callers that need different values per call pass them explicitly to
``Select.create`` / ``LocatorElement`` instead of mutating SETTINGS.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import OPTION_SELECTOR, TIMEOUT_ELEMENT_DEFAULT


# ---------------- Timeouts ----------------
@dataclass(frozen=True)
class TimeoutConfig:
    action_timeout_ms: int = int(
        os.getenv("SNAPSELECT_ACTION_TIMEOUT_MS", str(TIMEOUT_ELEMENT_DEFAULT))
    )


# ---------------- Select ----------------
@dataclass(frozen=True)
class SelectConfig:
    option_selector: str = os.getenv("SNAPSELECT_OPTION_SELECTOR", OPTION_SELECTOR)
    # Segunda passada por texto com espaços normalizados
    text_fallback: bool = os.getenv("SNAPSELECT_TEXT_FALLBACK", "1") == "1"


# ---------------- Logging ----------------
@dataclass(frozen=True)
class LoggingConfig:
    level: str = os.getenv("SNAPSELECT_LOG_LEVEL", "INFO")
    json: bool = os.getenv("SNAPSELECT_LOG_JSON", "0") == "1"
    log_file: str = os.getenv("SNAPSELECT_LOG_FILE", "")
    max_bytes: int = int(os.getenv("SNAPSELECT_LOG_MAX_BYTES", "1048576"))      # 1MB
    backup_count: int = int(os.getenv("SNAPSELECT_LOG_BACKUP_COUNT", "3"))


# ---------------- Settings globais ----------------
@dataclass(frozen=True)
class Settings:
    timeouts: TimeoutConfig = TimeoutConfig()
    select: SelectConfig = SelectConfig()
    logging: LoggingConfig = LoggingConfig()


SETTINGS = Settings()
