# settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from emission_catalog import CATALOGS

log = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class QuizSettings:
    catalog_name: str = "standard"
    log_level: str = "INFO"
    kiosk_title: str = "Choose Our Future"
    show_periods: bool = True
    icon_dir: str = "icons"


def _from_secrets(name: str) -> Optional[str]:
    # st.secrets raises when no secrets.toml exists at all
    try:
        value = st.secrets.get(name, None)
    except Exception:
        return None
    return None if value is None else str(value)


def _get(name: str) -> Optional[str]:
    """Streamlit secrets first, then the environment."""
    value = _from_secrets(name)
    if value is None:
        value = os.getenv(name)
    return value


def _as_bool(raw: str) -> Optional[bool]:
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    return None


def load_settings() -> QuizSettings:
    defaults = QuizSettings()

    catalog_name = _get("QUIZ_CATALOG") or defaults.catalog_name
    if catalog_name not in CATALOGS:
        log.warning("QUIZ_CATALOG=%r is not a known catalog; using %r", catalog_name, defaults.catalog_name)
        catalog_name = defaults.catalog_name

    log_level = (_get("QUIZ_LOG_LEVEL") or defaults.log_level).upper()
    if log_level not in LOG_LEVELS:
        log.warning("QUIZ_LOG_LEVEL=%r is not a log level; using %s", log_level, defaults.log_level)
        log_level = defaults.log_level

    show_periods = defaults.show_periods
    raw = _get("QUIZ_SHOW_PERIODS")
    if raw is not None:
        parsed = _as_bool(raw)
        if parsed is None:
            log.warning("QUIZ_SHOW_PERIODS=%r is not a boolean; using %s", raw, show_periods)
        else:
            show_periods = parsed

    return QuizSettings(
        catalog_name=catalog_name,
        log_level=log_level,
        kiosk_title=_get("QUIZ_KIOSK_TITLE") or defaults.kiosk_title,
        show_periods=show_periods,
        icon_dir=_get("QUIZ_ICON_DIR") or defaults.icon_dir,
    )
