from __future__ import annotations

import pytest
from pydantic import ValidationError

from issuance.config import load_config
from issuance.core.schedule import REFERENCE_RATES, YEAR_IN_SECONDS
from issuance.models import DEFAULT_INITIAL_SUPPLY, IssuanceConfig


def test_defaults_use_reference_schedule():
    config = load_config({})

    assert config.rates == list(REFERENCE_RATES)
    assert config.yearSeconds == YEAR_IN_SECONDS
    assert config.initialSupply == DEFAULT_INITIAL_SUPPLY
    assert config.originTime is None
    assert config.logLevel == "INFO"


def test_environment_overrides():
    config = load_config(
        {
            "ISSUANCE_ORIGIN_TIME": "1700000000",
            "ISSUANCE_INITIAL_SUPPLY": "5000",
            "ISSUANCE_RATES": "500, 400,300",
            "ISSUANCE_ADMIN": "ops",
            "ISSUANCE_CORS_ORIGINS": "http://a.example,http://b.example",
            "ISSUANCE_LOG_LEVEL": "DEBUG",
            "UNRELATED": "ignored",
        }
    )

    assert config.originTime == 1_700_000_000
    assert config.initialSupply == 5000
    assert config.rates == [500, 400, 300]
    assert config.admin == "ops"
    assert config.corsOrigins == ["http://a.example", "http://b.example"]
    assert config.logLevel == "DEBUG"


def test_blank_values_keep_defaults():
    config = load_config({"ISSUANCE_ADMIN": "  "})

    assert config.admin == "admin"


@pytest.mark.parametrize(
    "overrides",
    [
        {"rates": []},
        {"rates": [900, -1]},
        {"yearSeconds": 0},
        {"initialSupply": -1},
        {"logLevel": "LOUD"},
        {"unknown": 1},
    ],
)
def test_invalid_config_is_rejected(overrides):
    with pytest.raises(ValidationError):
        IssuanceConfig.model_validate(overrides)
