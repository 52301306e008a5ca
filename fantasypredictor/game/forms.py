"""Forms for the game blueprint."""

from flask_wtf import FlaskForm
from wtforms import IntegerField, RadioField
from wtforms.validators import DataRequired, InputRequired
from wtforms.widgets import HiddenInput

from .models import Outcome

OUTCOME_LABELS = {
    Outcome.TEAM1: "Team 1",
    Outcome.DRAW: "Draw",
    Outcome.TEAM2: "Team 2",
}


class PredictionForm(FlaskForm):
    """Pick an outcome for one match."""

    match_id = IntegerField("Match", validators=[InputRequired()], widget=HiddenInput())
    outcome = RadioField(
        "Prediction",
        choices=[(outcome.value, label) for outcome, label in OUTCOME_LABELS.items()],
        validators=[DataRequired(message="Choose team 1, draw or team 2.")],
    )
