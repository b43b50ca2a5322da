"""Environment-driven configuration for the issuance service."""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from issuance.models import IssuanceConfig

ENV_PREFIX = "ISSUANCE_"

# env suffix -> config field, and whether the value is a comma-separated list
_ENV_FIELDS = {
    "ORIGIN_TIME": ("originTime", False),
    "INITIAL_SUPPLY": ("initialSupply", False),
    "RATES": ("rates", True),
    "YEAR_SECONDS": ("yearSeconds", False),
    "ADMIN": ("admin", False),
    "TREASURY": ("treasury", False),
    "CORS_ORIGINS": ("corsOrigins", True),
    "LOG_LEVEL": ("logLevel", False),
}


def load_config(environ: Optional[Mapping[str, str]] = None) -> IssuanceConfig:
    """
    Build an IssuanceConfig from ``ISSUANCE_*`` variables.

    When ``environ`` is omitted a ``.env`` file in the working directory is
    loaded first, then ``os.environ`` is read. Unset variables keep the model
    defaults; values are validated by pydantic.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    raw: Dict[str, Any] = {}
    for suffix, (field_name, is_list) in _ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is None or value.strip() == "":
            continue
        if is_list:
            raw[field_name] = [item.strip() for item in value.split(",") if item.strip()]
        else:
            raw[field_name] = value.strip()
    return IssuanceConfig.model_validate(raw)
