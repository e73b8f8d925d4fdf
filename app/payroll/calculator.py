# app/payroll/calculator.py

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum

ZERO = Decimal('0')
CENTAVO = Decimal('0.01')


class InvalidInputError(ValueError):
    """Raised when an amount, hour count or overtime type is outside the engine's domain."""


# --- HELPERS ---
def to_decimal(value, field='amount'):
    """Reads a numeric input as a non-negative, finite Decimal."""
    if isinstance(value, bool) or value is None:
        raise InvalidInputError(f'{field} must be a number, got {value!r}')
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            # str() keeps 4250.01 as 4250.01 instead of its binary expansion
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            raise InvalidInputError(f'{field} must be a number, got {value!r}') from None
    if not amount.is_finite():
        raise InvalidInputError(f'{field} must be finite, got {value!r}')
    if amount < ZERO:
        raise InvalidInputError(f'{field} must not be negative, got {value!r}')
    return amount


def to_centavos(amount):
    """Rounds an amount to centavos. Only used when presenting or storing results."""
    return Decimal(amount).quantize(CENTAVO, rounding=ROUND_HALF_UP)


# --- SSS CONTRIBUTION TABLE ---
# (bracket ceiling, employee share). First ceiling >= salary wins.
SSS_TABLE = (
    (Decimal('4250.00'), Decimal('180.00')),
    (Decimal('4750.00'), Decimal('202.50')),
    (Decimal('5250.00'), Decimal('225.00')),
    (Decimal('5750.00'), Decimal('247.50')),
    (Decimal('6250.00'), Decimal('270.00')),
    (Decimal('6750.00'), Decimal('292.50')),
    (Decimal('7250.00'), Decimal('315.00')),
    (Decimal('7750.00'), Decimal('337.50')),
    (Decimal('8250.00'), Decimal('360.00')),
    (Decimal('8750.00'), Decimal('382.50')),
    (Decimal('9250.00'), Decimal('405.00')),
    (Decimal('9750.00'), Decimal('427.50')),
    (Decimal('10250.00'), Decimal('450.00')),
    (Decimal('10750.00'), Decimal('472.50')),
    (Decimal('11250.00'), Decimal('495.00')),
    (Decimal('11750.00'), Decimal('517.50')),
    (Decimal('12250.00'), Decimal('540.00')),
    (Decimal('12750.00'), Decimal('562.50')),
    (Decimal('13250.00'), Decimal('585.00')),
    (Decimal('13750.00'), Decimal('607.50')),
    (Decimal('14250.00'), Decimal('630.00')),
    (Decimal('14750.00'), Decimal('652.50')),
    (Decimal('15250.00'), Decimal('675.00')),
    (Decimal('15750.00'), Decimal('697.50')),
    (Decimal('16250.00'), Decimal('720.00')),
    (Decimal('16750.00'), Decimal('742.50')),
    (Decimal('17250.00'), Decimal('765.00')),
    (Decimal('17750.00'), Decimal('787.50')),
    (Decimal('18250.00'), Decimal('810.00')),
    (Decimal('18750.00'), Decimal('832.50')),
    (Decimal('19250.00'), Decimal('855.00')),
    (Decimal('19750.00'), Decimal('877.50')),
    (Decimal('20250.00'), Decimal('900.00')),
    (Decimal('20750.00'), Decimal('922.50')),
    (Decimal('21250.00'), Decimal('945.00')),
    (Decimal('21750.00'), Decimal('967.50')),
    (Decimal('22250.00'), Decimal('990.00')),
    (Decimal('22750.00'), Decimal('1012.50')),
    (Decimal('23250.00'), Decimal('1035.00')),
    (Decimal('23750.00'), Decimal('1057.50')),
    (Decimal('24250.00'), Decimal('1080.00')),
    (Decimal('24750.00'), Decimal('1102.50')),
)
SSS_MAX_CONTRIBUTION = Decimal('1125.00')


def calculate_sss(monthly_salary):
    """Calculates the employee's share of SSS contribution from the bracket table."""
    salary = to_decimal(monthly_salary, 'monthly_salary')
    for max_bracket, contribution in SSS_TABLE:
        if salary <= max_bracket:
            return contribution
    return SSS_MAX_CONTRIBUTION


# --- PHILHEALTH CONTRIBUTION ---
# 3% premium split 50/50, so the employee pays 1.5% of the clamped salary.
PHILHEALTH_EMPLOYEE_RATE = Decimal('0.015')
PHILHEALTH_FLOOR = Decimal('10000.00')
PHILHEALTH_CEILING = Decimal('80000.00')


def calculate_philhealth(monthly_salary):
    """Calculates the employee's share of PhilHealth premium."""
    salary = to_decimal(monthly_salary, 'monthly_salary')
    base_salary = max(PHILHEALTH_FLOOR, min(PHILHEALTH_CEILING, salary))
    return base_salary * PHILHEALTH_EMPLOYEE_RATE


# --- PAG-IBIG (HDMF) CONTRIBUTION ---
PAGIBIG_LOW_THRESHOLD = Decimal('1500.00')
PAGIBIG_LOW_RATE = Decimal('0.01')
PAGIBIG_HIGH_RATE = Decimal('0.02')


def calculate_pagibig(monthly_salary, cap=None):
    """
    Calculates the employee's Pag-IBIG contribution.

    1% of salary up to 1,500, 2% above it. The policy page mentions a 100.00
    cap but payroll records have always been generated uncapped, so a cap is
    only applied when the caller passes one.
    """
    salary = to_decimal(monthly_salary, 'monthly_salary')
    if salary <= PAGIBIG_LOW_THRESHOLD:
        contribution = salary * PAGIBIG_LOW_RATE
    else:
        contribution = salary * PAGIBIG_HIGH_RATE
    if cap is not None:
        contribution = min(contribution, to_decimal(cap, 'cap'))
    return contribution


# --- WITHHOLDING TAX (BIR annual schedule) ---
# (annual ceiling, base tax, rate, excess over). None marks the open top bracket.
ANNUAL_TAX_TABLE = (
    (Decimal('250000'), Decimal('0'), Decimal('0'), Decimal('0')),
    (Decimal('400000'), Decimal('0'), Decimal('0.15'), Decimal('250000')),
    (Decimal('800000'), Decimal('22500'), Decimal('0.20'), Decimal('400000')),
    (Decimal('2000000'), Decimal('102500'), Decimal('0.25'), Decimal('800000')),
    (Decimal('8000000'), Decimal('402500'), Decimal('0.30'), Decimal('2000000')),
    (None, Decimal('2202500'), Decimal('0.35'), Decimal('8000000')),
)
MONTHS_PER_YEAR = Decimal('12')


def calculate_annual_tax(annual_salary):
    """Applies the progressive annual schedule to an annual salary."""
    annual = to_decimal(annual_salary, 'annual_salary')
    for max_bracket, base_tax, rate, excess_over in ANNUAL_TAX_TABLE[:-1]:
        if annual <= max_bracket:
            return base_tax + (annual - excess_over) * rate
    _, base_tax, rate, excess_over = ANNUAL_TAX_TABLE[-1]
    return base_tax + (annual - excess_over) * rate


def calculate_withholding_tax(monthly_salary):
    """Annualizes the monthly salary, applies the annual schedule and returns the monthly share."""
    salary = to_decimal(monthly_salary, 'monthly_salary')
    return calculate_annual_tax(salary * MONTHS_PER_YEAR) / MONTHS_PER_YEAR


# --- AGGREGATES ---
@dataclass(frozen=True)
class DeductionBreakdown:
    sss: Decimal
    philhealth: Decimal
    pagibig: Decimal
    withholding_tax: Decimal

    @property
    def total(self):
        return self.sss + self.philhealth + self.pagibig + self.withholding_tax

    def as_dict(self):
        return {
            'sss': self.sss,
            'philhealth': self.philhealth,
            'pagibig': self.pagibig,
            'withholding_tax': self.withholding_tax,
            'total': self.total,
        }


@dataclass(frozen=True)
class PayBreakdown:
    base_salary: Decimal
    overtime_pay: Decimal
    allowances: Decimal
    deductions: DeductionBreakdown

    @property
    def gross_pay(self):
        return self.base_salary + self.overtime_pay + self.allowances

    @property
    def net_pay(self):
        # may go negative; callers decide what to do with that
        return self.gross_pay - self.deductions.total

    def as_dict(self):
        return {
            'base_salary': self.base_salary,
            'overtime_pay': self.overtime_pay,
            'allowances': self.allowances,
            'gross_pay': self.gross_pay,
            'deductions': self.deductions.as_dict(),
            'net_pay': self.net_pay,
        }


def calculate_deductions(monthly_salary, pagibig_cap=None):
    """Runs all four statutory deductions against one monthly salary."""
    salary = to_decimal(monthly_salary, 'monthly_salary')
    return DeductionBreakdown(
        sss=calculate_sss(salary),
        philhealth=calculate_philhealth(salary),
        pagibig=calculate_pagibig(salary, cap=pagibig_cap),
        withholding_tax=calculate_withholding_tax(salary),
    )


def calculate_net_pay(base_salary, overtime_pay=ZERO, allowances=ZERO, pagibig_cap=None):
    """
    Builds the pay breakdown for one period.

    Deductions come from the base salary alone; overtime pay and allowances
    only raise gross pay.

    Args:
        base_salary: Monthly base salary.
        overtime_pay: Approved overtime pay for the period (defaults to 0).
        allowances: Allowances for the period (defaults to 0).
        pagibig_cap: Optional cap on the Pag-IBIG contribution.

    Returns:
        A PayBreakdown whose gross_pay and net_pay are derived on access.
    """
    base = to_decimal(base_salary, 'base_salary')
    return PayBreakdown(
        base_salary=base,
        overtime_pay=to_decimal(ZERO if overtime_pay is None else overtime_pay, 'overtime_pay'),
        allowances=to_decimal(ZERO if allowances is None else allowances, 'allowances'),
        deductions=calculate_deductions(base, pagibig_cap=pagibig_cap),
    )


# --- OVERTIME ---
WORKING_DAYS_PER_MONTH = Decimal('22')
HOURS_PER_DAY = Decimal('8')
HOURS_PER_MONTH = WORKING_DAYS_PER_MONTH * HOURS_PER_DAY


class OvertimeType(Enum):
    REGULAR = 'regular'
    HOLIDAY = 'holiday'
    NIGHT_DIFFERENTIAL = 'night_differential'

    @property
    def multiplier(self):
        return OVERTIME_MULTIPLIERS[self]

    @property
    def label(self):
        return f"{self.value.replace('_', ' ').title()} ({self.multiplier}x)"


OVERTIME_MULTIPLIERS = {
    OvertimeType.REGULAR: Decimal('1.25'),
    OvertimeType.HOLIDAY: Decimal('2.0'),
    OvertimeType.NIGHT_DIFFERENTIAL: Decimal('1.5'),
}


def overtime_multiplier(category):
    """Looks up the rate multiplier for an OvertimeType or its string value."""
    try:
        return OvertimeType(category).multiplier
    except ValueError:
        raise InvalidInputError(f'Unknown overtime type: {category!r}') from None


def hourly_rate_from_monthly_salary(monthly_salary):
    """Hourly rate on 22 working days of 8 hours."""
    return to_decimal(monthly_salary, 'monthly_salary') / HOURS_PER_MONTH


def calculate_overtime_pay(hourly_rate, hours, multiplier=OVERTIME_MULTIPLIERS[OvertimeType.REGULAR]):
    """hourly_rate x hours x multiplier. The 12-hour limit per entry is enforced by the form, not here."""
    return (
        to_decimal(hourly_rate, 'hourly_rate')
        * to_decimal(hours, 'hours')
        * to_decimal(multiplier, 'multiplier')
    )


def calculate_overtime_for_salary(monthly_salary, hours, category=OvertimeType.REGULAR):
    hourly_rate = hourly_rate_from_monthly_salary(monthly_salary)
    return calculate_overtime_pay(hourly_rate, hours, overtime_multiplier(category))
