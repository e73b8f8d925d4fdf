from decimal import Decimal

import pytest

from app import create_app
from config import TestingConfig, config


class CappedConfig(TestingConfig):
    PAGIBIG_EMPLOYEE_CAP = "100.00"


class MalformedCapConfig(TestingConfig):
    PAGIBIG_EMPLOYEE_CAP = "one hundred"


class NegativeCapConfig(TestingConfig):
    PAGIBIG_EMPLOYEE_CAP = "-100"


def test_pagibig_cap_from_environment_is_read_as_decimal(monkeypatch):
    monkeypatch.setitem(config, "capped", CappedConfig)

    app = create_app("capped")

    assert app.config["PAGIBIG_EMPLOYEE_CAP"] == Decimal("100.00")
    with app.test_client() as client:
        assert client.get("/payroll/deductions?salary=20000").get_json()["pagibig"] == "100.00"


@pytest.mark.parametrize("config_class", [MalformedCapConfig, NegativeCapConfig])
def test_invalid_pagibig_cap_fails_at_startup(monkeypatch, config_class):
    monkeypatch.setitem(config, "bad_cap", config_class)

    with pytest.raises(ValueError, match="PAGIBIG_EMPLOYEE_CAP"):
        create_app("bad_cap")


def test_pagibig_cap_unset_by_default(app):
    assert app.config["PAGIBIG_EMPLOYEE_CAP"] is None
