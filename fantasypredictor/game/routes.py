"""Routes for the game blueprint."""

from __future__ import annotations

from typing import Any

from flask import flash, g, jsonify, redirect, render_template, url_for

from fantasypredictor.auth.decorators import login_required
from fantasypredictor.core.types import APIResponse
from fantasypredictor.errors import AppError
from fantasypredictor.utils import to_money

from . import bp
from .catalog import get_match, get_sport, get_tournament, get_tournaments
from .forms import OUTCOME_LABELS, PredictionForm
from .models import GameMode, Outcome, Sport
from .scoring import match_points
from .services import GameService
from .state import GameState


def _screen_url(state: GameState) -> str:
    """URL of the screen the game is currently on."""
    if state.mode is GameMode.TOURNAMENT:
        return url_for("game.tournaments")
    if state.mode is GameMode.CREATE_TOURNAMENT:
        return url_for("tournament.create_tournament")
    if state.tournament is not None:
        return url_for("game.play")
    return url_for("game.index")


@bp.route("/", methods=["GET"])
def index() -> Any:
    """Sport picker, or the screen the current game is on."""
    state = GameService.load()
    if g.user and (state.mode is not GameMode.SELECT or state.tournament):
        return redirect(_screen_url(state))
    return render_template("game/sports.html", sports=list(Sport))


@bp.route("/sports/<string:sport>", methods=["POST"])
@login_required(message="Log in or sign up to start playing.")
def select_sport(sport: str) -> Any:
    """Choose a sport and move on to its tournaments."""
    state = GameService.load()
    try:
        state.select_sport(get_sport(sport))
    except AppError as e:
        flash(e.message, "danger")
        return redirect(_screen_url(state))
    GameService.save(state)
    return redirect(url_for(".tournaments"))


@bp.route("/tournaments", methods=["GET"])
@login_required
def tournaments() -> Any:
    """List the tournament tiers for the chosen sport."""
    state = GameService.load()
    if state.mode is not GameMode.TOURNAMENT or state.sport is None:
        return redirect(_screen_url(state))
    return render_template(
        "game/tournaments.html",
        sport=state.sport,
        tournaments=get_tournaments(state.sport),
        balance=to_money(g.user.get("balance")),
    )


@bp.route("/tournaments/<string:tournament_id>/join", methods=["POST"])
@login_required
def join_tournament(tournament_id: str) -> Any:
    """Pay the entry fee and enter a tournament."""
    state = GameService.load()
    if state.sport is None:
        return redirect(url_for(".index"))
    try:
        tournament = get_tournament(state.sport, tournament_id)
        GameService.join_tournament(state, g.user, tournament)
    except AppError as e:
        flash(e.message, "danger")
        return redirect(_screen_url(state))

    GameService.save(state)
    flash(f"You have joined {tournament.name}!", "success")
    return redirect(url_for(".play"))


@bp.route("/play", methods=["GET"])
@login_required
def play() -> Any:
    """Mode chooser, prediction board or results board."""
    state = GameService.load()
    if state.tournament is None or state.mode not in (
        GameMode.SELECT,
        GameMode.PREDICT,
        GameMode.RESULTS,
    ):
        return redirect(_screen_url(state))

    if state.mode is GameMode.SELECT:
        return render_template("game/mode.html", state=state)

    return render_template(
        "game/play.html",
        state=state,
        summary=state.score(),
        outcome_labels=OUTCOME_LABELS,
        match_points=match_points,
        show_results=state.mode is GameMode.RESULTS,
    )


@bp.route("/mode/<string:mode>", methods=["POST"])
@login_required
def choose_mode(mode: str) -> Any:
    """Start predicting or view the results."""
    state = GameService.load()
    try:
        state.choose_mode(GameMode(mode))
    except ValueError:
        flash("Unknown game mode.", "danger")
    except AppError as e:
        flash(e.message, "warning")
    else:
        GameService.save(state)
    return redirect(_screen_url(state))


@bp.route("/predict", methods=["POST"])
@login_required
def predict() -> Any:
    """Record a prediction for one match."""
    state = GameService.load()
    if state.mode is not GameMode.PREDICT or state.sport is None:
        flash("Predictions are closed for this game.", "warning")
        return redirect(_screen_url(state))

    form = PredictionForm()
    if form.validate_on_submit():
        try:
            match = get_match(state.sport, form.match_id.data)
        except AppError as e:
            flash(e.message, "danger")
        else:
            state.set_prediction(match.id, Outcome(form.outcome.data))
            GameService.save(state)
    else:
        for errors in form.errors.values():
            for error in errors:
                flash(error, "danger")
    return redirect(url_for(".play"))


def _toggle_role(match_id: int, vice: bool) -> Any:
    state = GameService.load()
    if state.mode is not GameMode.PREDICT:
        flash("Captains can only be changed while predicting.", "warning")
        return redirect(_screen_url(state))
    try:
        if vice:
            state.set_vice_captain(match_id)
        else:
            state.set_captain(match_id)
    except AppError as e:
        flash(e.message, "warning")
    else:
        GameService.save(state)
    return redirect(url_for(".play"))


@bp.route("/captain/<int:match_id>", methods=["POST"])
@login_required
def toggle_captain(match_id: int) -> Any:
    """Make a match the captain, or clear it if it already is."""
    return _toggle_role(match_id, vice=False)


@bp.route("/vice-captain/<int:match_id>", methods=["POST"])
@login_required
def toggle_vice_captain(match_id: int) -> Any:
    """Make a match the vice-captain, or clear it if it already is."""
    return _toggle_role(match_id, vice=True)


@bp.route("/back", methods=["POST"])
@login_required
def back() -> Any:
    """Go back one screen."""
    state = GameService.load()
    state.back()
    GameService.save(state)
    return redirect(_screen_url(state))


@bp.route("/reset", methods=["POST"])
@login_required
def reset() -> Any:
    """Throw away the current game and start a new one."""
    GameService.reset()
    return redirect(url_for(".index"))


@bp.route("/score", methods=["GET"])
@login_required
def score() -> Any:
    """Current score as JSON."""
    state = GameService.load()
    summary = state.score()
    response: APIResponse = {
        "success": True,
        "message": "",
        "data": {
            "sport": state.sport.value if state.sport else None,
            "mode": state.mode.value,
            "correct": summary.correct,
            "total": summary.total,
            "score": str(summary.score),
            "accuracy": str(summary.accuracy),
            "remaining": state.remaining,
            "captain": state.captain,
            "viceCaptain": state.vice_captain,
        },
    }
    return jsonify(response)
