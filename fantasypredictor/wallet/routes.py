"""Routes for the wallet blueprint."""

from __future__ import annotations

from typing import Any

from flask import flash, g, redirect, render_template, url_for

from fantasypredictor.auth.decorators import login_required
from fantasypredictor.errors import AppError
from fantasypredictor.utils import format_money, to_money

from . import bp
from .forms import AmountForm
from .services import WalletService


@bp.route("/", methods=["GET", "POST"])
@login_required
def manage_wallet() -> Any:
    """Show the balance and handle deposits and withdrawals."""
    form = AmountForm()
    if form.validate_on_submit():
        amount = form.amount.data
        try:
            if form.withdraw.data:
                WalletService.withdraw(g.user["uid"], amount)
                flash(
                    f"Withdrawal successful: {format_money(amount)} has been "
                    "withdrawn from your wallet.",
                    "success",
                )
            else:
                WalletService.deposit(g.user["uid"], amount)
                flash(
                    f"Deposit successful: {format_money(amount)} has been "
                    "added to your wallet.",
                    "success",
                )
            return redirect(url_for(".manage_wallet"))
        except AppError as e:
            flash(e.message, "danger")
    elif form.errors:
        for errors in form.errors.values():
            for error in errors:
                flash(error, "danger")

    entries = WalletService.history(g.user["uid"])
    return render_template(
        "wallet/wallet.html",
        form=form,
        balance=to_money(g.user.get("balance")),
        entries=entries,
    )
