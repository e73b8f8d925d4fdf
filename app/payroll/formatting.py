# app/payroll/formatting.py

from decimal import Decimal

from .calculator import to_centavos

PESO_SIGN = '₱'


def format_peso(amount, symbol=PESO_SIGN):
    """Formats an amount as '₱1,234.50'. Negative amounts keep their sign in front of the symbol."""
    if amount is None:
        return 'N/A'
    value = to_centavos(amount if isinstance(amount, Decimal) else Decimal(str(amount)))
    sign = '-' if value < 0 else ''
    return f'{sign}{symbol}{abs(value):,.2f}'


def serialize_amounts(data):
    """Turns every Decimal in a (possibly nested) breakdown dict into a centavo string for JSON."""
    result = {}
    for key, value in data.items():
        if isinstance(value, dict):
            result[key] = serialize_amounts(value)
        elif isinstance(value, Decimal):
            result[key] = str(to_centavos(value))
        else:
            result[key] = value
    return result


def display_amounts(data, symbol=PESO_SIGN):
    """Same walk as serialize_amounts, but produces peso strings for display."""
    result = {}
    for key, value in data.items():
        if isinstance(value, dict):
            result[key] = display_amounts(value, symbol=symbol)
        elif isinstance(value, Decimal):
            result[key] = format_peso(value, symbol=symbol)
    return result
