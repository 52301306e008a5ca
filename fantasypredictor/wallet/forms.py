"""Forms for the wallet blueprint."""

from flask_wtf import FlaskForm
from wtforms import DecimalField, SubmitField
from wtforms.validators import DataRequired, NumberRange


class AmountForm(FlaskForm):
    """Deposit or withdraw an amount."""

    amount = DecimalField(
        "Amount (₹)",
        places=2,
        validators=[
            DataRequired(message="Please enter a valid amount."),
            NumberRange(min=0.01, message="Please enter a valid amount."),
        ],
    )
    deposit = SubmitField("Deposit")
    withdraw = SubmitField("Withdraw")
