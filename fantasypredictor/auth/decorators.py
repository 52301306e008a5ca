"""Decorators for the auth blueprint."""

from functools import wraps

from flask import flash, g, redirect, request, session, url_for


def login_required(f=None, message=None):
    """Redirect to the login page if the user is not logged in.

    Usage:
    @login_required
    def protected_view():
        ...

    @login_required(message="Log in to pick a sport.")
    def play():
        ...
    """

    def decorator(func):
        @wraps(func)
        def decorated_function(*args, **kwargs):
            if "user_id" not in session or not g.get("user"):
                if message:
                    flash(message, "info")
                return redirect(url_for("auth.login", next=request.path))
            return func(*args, **kwargs)

        return decorated_function

    if f:
        return decorator(f)
    return decorator
