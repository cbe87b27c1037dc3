from __future__ import annotations

import logging

from chem_erp.config import Settings, configure_logging, load_settings


def test_defaults():
    assert load_settings({}) == Settings()


def test_environment_overrides():
    settings = load_settings(
        {
            "CHEM_ERP_CURRENCY": "₹",
            "CHEM_ERP_COMPANY": " Acme Chemicals ",
            "CHEM_ERP_DATE_FORMAT": "%Y-%m-%d",
            "CHEM_ERP_LOG_LEVEL": "debug",
        }
    )
    assert settings.currency == "₹"
    assert settings.company_name == "Acme Chemicals"
    assert settings.date_format == "%Y-%m-%d"
    assert settings.log_level == "DEBUG"


def test_blank_values_and_bad_log_level_fall_back():
    settings = load_settings({"CHEM_ERP_CURRENCY": "  ", "CHEM_ERP_LOG_LEVEL": "chatty"})
    assert settings.currency == "Rs."
    assert settings.log_level == "INFO"


def test_configure_logging_sets_package_level():
    configure_logging("WARNING")
    assert logging.getLogger("chem_erp").level == logging.WARNING
    configure_logging("INFO")
    assert logging.getLogger("chem_erp.services.ledger").getEffectiveLevel() == logging.INFO
