# app/payroll/routes.py

from datetime import datetime

import pytz
from flask import current_app, jsonify, request

from app.payroll import bp
from app.payroll.forms import OvertimePreviewForm, PayrollPreviewForm
from . import calculator
from .formatting import display_amounts, serialize_amounts


def _computed_at():
    """Current time in the configured payroll timezone, ISO formatted."""
    tz_name = current_app.config.get('TIMEZONE', 'Asia/Manila')
    local_tz = pytz.UTC if tz_name == 'UTC' else pytz.timezone(tz_name)
    return datetime.now(pytz.UTC).astimezone(local_tz).isoformat()


def _breakdown_response(data):
    payload = serialize_amounts(data)
    payload['display'] = display_amounts(data, symbol=current_app.config.get('CURRENCY_SYMBOL', '₱'))
    payload['computed_at'] = _computed_at()
    return payload


def _form_errors(form):
    return jsonify({'error': 'invalid_input', 'fields': form.errors}), 400


@bp.route('/deductions', methods=['GET'])
def deductions_preview():
    """Statutory deductions for a monthly salary given as ?salary=."""
    salary = request.args.get('salary')
    if salary is None:
        raise calculator.InvalidInputError('salary query parameter is required')

    deductions = calculator.calculate_deductions(
        salary, pagibig_cap=current_app.config.get('PAGIBIG_EMPLOYEE_CAP')
    )
    current_app.logger.info('Deductions preview computed for salary %s', salary)

    payload = _breakdown_response(deductions.as_dict())
    payload['monthly_salary'] = str(calculator.to_centavos(calculator.to_decimal(salary)))
    return jsonify(payload)


@bp.route('/preview', methods=['POST'])
def net_pay_preview():
    form = PayrollPreviewForm()
    if not form.validate_on_submit():
        return _form_errors(form)

    breakdown = calculator.calculate_net_pay(
        form.base_salary.data,
        overtime_pay=form.overtime_pay.data,
        allowances=form.allowances.data,
        pagibig_cap=current_app.config.get('PAGIBIG_EMPLOYEE_CAP'),
    )
    current_app.logger.info(
        'Net pay preview: gross %s, deductions %s, net %s',
        calculator.to_centavos(breakdown.gross_pay),
        calculator.to_centavos(breakdown.deductions.total),
        calculator.to_centavos(breakdown.net_pay),
    )
    if breakdown.net_pay < 0:
        current_app.logger.warning('Net pay preview is negative for base salary %s', form.base_salary.data)

    return jsonify(_breakdown_response(breakdown.as_dict()))


@bp.route('/overtime/preview', methods=['POST'])
def overtime_preview():
    form = OvertimePreviewForm()
    if not form.validate_on_submit():
        return _form_errors(form)

    overtime_type = calculator.OvertimeType(form.overtime_type.data)
    hourly_rate = calculator.hourly_rate_from_monthly_salary(form.monthly_salary.data)
    amount = calculator.calculate_overtime_pay(hourly_rate, form.hours.data, overtime_type.multiplier)
    current_app.logger.info('Overtime preview: %s hours of %s', form.hours.data, overtime_type.value)

    payload = _breakdown_response({'hourly_rate': hourly_rate, 'amount': amount})
    payload.update({
        'hours': str(form.hours.data),
        'overtime_type': overtime_type.value,
        'multiplier': str(overtime_type.multiplier),
    })
    return jsonify(payload)
