"""Routes for the tournament blueprint."""

from __future__ import annotations

from typing import Any

from flask import flash, g, redirect, render_template, session, url_for

from fantasypredictor.auth.decorators import login_required
from fantasypredictor.errors import AppError
from fantasypredictor.game.catalog import get_match
from fantasypredictor.game.models import GameMode
from fantasypredictor.game.services import GameService

from . import bp
from .forms import TournamentForm
from .models import MatchSelection
from .services import TournamentService, prize_distribution

DRAFT_KEY = "tournament_draft"


def _load_selection(sport) -> MatchSelection:
    return MatchSelection.from_dict(session.get(DRAFT_KEY), sport)


def _save_selection(selection: MatchSelection) -> None:
    session[DRAFT_KEY] = selection.to_dict()


@bp.route("/new", methods=["POST"])
@login_required
def start_tournament() -> Any:
    """Open the tournament creator for the current sport."""
    state = GameService.load()
    try:
        state.open_creator()
    except AppError as e:
        flash(e.message, "warning")
        return redirect(url_for("game.index"))
    GameService.save(state)
    session.pop(DRAFT_KEY, None)
    return redirect(url_for(".create_tournament"))


@bp.route("/create", methods=["GET", "POST"])
@login_required
def create_tournament() -> Any:
    """Configure and create a tournament."""
    state = GameService.load()
    if state.mode is not GameMode.CREATE_TOURNAMENT or state.sport is None:
        return redirect(url_for("game.index"))

    selection = _load_selection(state.sport)
    form = TournamentForm()
    if form.validate_on_submit():
        try:
            TournamentService.create_tournament(
                selection,
                form.name.data,
                form.entry_fee.data,
                form.max_participants.data,
                host_uid=g.user["uid"],
            )
        except AppError as e:
            flash(e.message, "danger")
        else:
            state.close_creator()
            GameService.save(state)
            session.pop(DRAFT_KEY, None)
            flash(
                f'Tournament created successfully! Your {state.sport.value} '
                f'tournament "{form.name.data.strip()}" is now live.',
                "success",
            )
            return redirect(url_for("game.tournaments"))
    elif form.errors:
        for errors in form.errors.values():
            for error in errors:
                flash(error, "danger")

    return render_template(
        "tournament/create.html",
        form=form,
        sport=state.sport,
        matches=state.matches,
        selection=selection,
        can_create=selection.can_create(
            form.name.data, form.entry_fee.data, form.max_participants.data
        ),
        split=prize_distribution(100),
    )


@bp.route("/create/matches/<int:match_id>", methods=["POST"])
@login_required
def toggle_match(match_id: int) -> Any:
    """Add a match to the draft, or remove it if already picked."""
    state = GameService.load()
    if state.mode is not GameMode.CREATE_TOURNAMENT or state.sport is None:
        return redirect(url_for("game.index"))

    try:
        selection = _load_selection(state.sport)
        selection.toggle(get_match(state.sport, match_id))
    except AppError as e:
        flash(e.message, "danger")
    else:
        _save_selection(selection)
    return redirect(url_for(".create_tournament"))


@bp.route("/cancel", methods=["POST"])
@login_required
def cancel() -> Any:
    """Leave the creator and go back to the tournament list."""
    state = GameService.load()
    if state.mode is GameMode.CREATE_TOURNAMENT:
        state.close_creator()
        GameService.save(state)
    session.pop(DRAFT_KEY, None)
    return redirect(url_for("game.tournaments"))
