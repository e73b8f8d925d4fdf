from decimal import Decimal

from app.payroll.formatting import display_amounts, format_peso, serialize_amounts


def test_format_peso_thousands_and_centavos():
    assert format_peso(Decimal("1234.5")) == "₱1,234.50"
    assert format_peso(Decimal("1000000")) == "₱1,000,000.00"
    assert format_peso(Decimal("0")) == "₱0.00"


def test_format_peso_rounds_half_up():
    assert format_peso(Decimal("1874.9995")) == "₱1,875.00"
    assert format_peso(Decimal("30.005")) == "₱30.01"


def test_format_peso_negative_amount():
    assert format_peso(Decimal("-330")) == "-₱330.00"


def test_format_peso_accepts_plain_numbers_and_symbol():
    assert format_peso(1500.01) == "₱1,500.01"
    assert format_peso(25, symbol="PHP ") == "PHP 25.00"


def test_format_peso_none():
    assert format_peso(None) == "N/A"


def test_serialize_amounts_walks_nested_dicts():
    data = {
        "gross_pay": Decimal("22500"),
        "deductions": {"pagibig": Decimal("30.0002"), "total": Decimal("1874.9995")},
        "overtime_type": "holiday",
    }

    assert serialize_amounts(data) == {
        "gross_pay": "22500.00",
        "deductions": {"pagibig": "30.00", "total": "1875.00"},
        "overtime_type": "holiday",
    }


def test_display_amounts_only_keeps_money():
    data = {"net_pay": Decimal("20900"), "deductions": {"sss": Decimal("900")}, "label": "x"}

    assert display_amounts(data) == {"net_pay": "₱20,900.00", "deductions": {"sss": "₱900.00"}}
