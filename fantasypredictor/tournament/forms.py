"""Forms for the tournament blueprint."""

from flask_wtf import FlaskForm
from wtforms import DecimalField, IntegerField, StringField, SubmitField
from wtforms.validators import DataRequired, Length, NumberRange

from fantasypredictor.core.constants import DEFAULT_ENTRY_FEE, DEFAULT_MAX_PARTICIPANTS


class TournamentForm(FlaskForm):
    """Form for configuring a hosted tournament."""

    name = StringField(
        "Tournament Name",
        validators=[DataRequired(message="Enter tournament name."), Length(max=80)],
        render_kw={"placeholder": "Enter tournament name"},
    )
    entry_fee = DecimalField(
        "Entry Fee (₹)",
        places=2,
        default=DEFAULT_ENTRY_FEE,
        validators=[
            DataRequired(message="Entry fee must be greater than zero."),
            NumberRange(min=1, message="Entry fee must be greater than zero."),
        ],
    )
    max_participants = IntegerField(
        "Max Participants",
        default=DEFAULT_MAX_PARTICIPANTS,
        validators=[
            DataRequired(message="Max participants must be greater than zero."),
            NumberRange(min=2, message="At least 2 participants are needed."),
        ],
    )
    submit = SubmitField("Create Tournament")
