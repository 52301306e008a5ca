"""Utility functions for the application."""

import smtplib
from decimal import Decimal, InvalidOperation

from flask import current_app, render_template
from flask_mail import Message

from .core.constants import SMTP_AUTH_ERROR_CODE
from .extensions import mail

CENTS = Decimal("0.01")


class EmailError(Exception):
    """Base class for email errors."""

    pass


def send_email(to, subject, template, **kwargs):
    """Send an email to a recipient.

    Raises:
        EmailError: If sending the email fails.
    """
    msg = Message(
        subject,
        recipients=[to],
        html=render_template(template, **kwargs),
        sender=current_app.config["MAIL_DEFAULT_SENDER"],
    )
    try:
        mail.send(msg)
    except smtplib.SMTPAuthenticationError as e:
        if e.smtp_code == SMTP_AUTH_ERROR_CODE:
            raise EmailError(
                "Authentication failed. Google requires you to use an App Password. "
                "Please verify your MAIL_USERNAME and MAIL_PASSWORD settings."
            ) from e
        raise EmailError(f"SMTP Authentication failed: {e}") from e
    except Exception as e:
        raise EmailError(f"Failed to send email: {e}") from e


def to_money(value):
    """Coerce a stored or submitted amount into a cent-quantized Decimal.

    Firestore hands numbers back as float or int, forms as Decimal or str.
    Unparseable values become zero.
    """
    if value is None:
        return Decimal("0.00")
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(value).quantize(CENTS)
    except (InvalidOperation, TypeError, ValueError):
        return Decimal("0.00")


def format_money(value):
    """Render an amount the way the UI shows balances, e.g. ₹10,000."""
    amount = to_money(value)
    if amount == amount.to_integral_value():
        return f"₹{int(amount):,}"
    return f"₹{amount:,.2f}"
