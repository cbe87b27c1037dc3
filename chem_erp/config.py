from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import streamlit as st

ENV_CURRENCY = "CHEM_ERP_CURRENCY"
ENV_COMPANY = "CHEM_ERP_COMPANY"
ENV_DATE_FORMAT = "CHEM_ERP_DATE_FORMAT"
ENV_LOG_LEVEL = "CHEM_ERP_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    currency: str = "Rs."
    company_name: str = "Chem ERP"
    date_format: str = "%d %b %Y"
    log_level: str = "INFO"


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    return s if s else None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    # Environment overrides, falling back to the dataclass defaults.
    env = os.environ if environ is None else environ
    defaults = Settings()

    log_level = (_clean(env.get(ENV_LOG_LEVEL)) or defaults.log_level).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = defaults.log_level

    return Settings(
        currency=_clean(env.get(ENV_CURRENCY)) or defaults.currency,
        company_name=_clean(env.get(ENV_COMPANY)) or defaults.company_name,
        date_format=_clean(env.get(ENV_DATE_FORMAT)) or defaults.date_format,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("chem_erp").setLevel(level)


@st.cache_resource
def get_settings() -> Settings:
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings
