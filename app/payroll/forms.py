# app/payroll/forms.py

from decimal import Decimal

from flask_wtf import FlaskForm
from wtforms import DecimalField, SelectField
from wtforms.validators import InputRequired, NumberRange, Optional

from .calculator import OvertimeType


class AmountField(DecimalField):
    """DecimalField that reads JSON numbers through str(), so 0.3 stays 0.3."""

    def process_formdata(self, valuelist):
        if valuelist and isinstance(valuelist[0], (int, float)) and not isinstance(valuelist[0], bool):
            # raw_data is what InputRequired inspects; a JSON 0 must not read as missing
            self.raw_data = valuelist = [str(valuelist[0])]
        super().process_formdata(valuelist)


class PayrollPreviewForm(FlaskForm):
    """Inputs for a one-employee net pay preview. Posted as JSON by the payroll screens."""

    class Meta:
        csrf = False

    base_salary = AmountField('Base Salary', places=2,
                              validators=[InputRequired(), NumberRange(min=0)])
    overtime_pay = AmountField('Overtime Pay', places=2, default=0,
                               validators=[Optional(), NumberRange(min=0)])
    allowances = AmountField('Allowances', places=2, default=0,
                             validators=[Optional(), NumberRange(min=0)])


class OvertimePreviewForm(FlaskForm):
    """Mirrors the overtime entry form: half an hour up to 12 hours per entry."""

    class Meta:
        csrf = False

    monthly_salary = AmountField('Monthly Salary', places=2,
                                 validators=[InputRequired(), NumberRange(min=0)])
    hours = AmountField('Hours', places=2,
                        validators=[InputRequired(), NumberRange(min=Decimal('0.5'), max=12)])
    overtime_type = SelectField('Overtime Type',
                                choices=[(t.value, t.label) for t in OvertimeType],
                                default=OvertimeType.REGULAR.value,
                                validators=[InputRequired()])
