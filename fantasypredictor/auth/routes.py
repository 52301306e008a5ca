import json
import os

from firebase_admin import auth, firestore
from firebase_admin.exceptions import FirebaseError
from flask import (
    Response,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from fantasypredictor.core.constants import USERS_COLLECTION
from fantasypredictor.utils import EmailError, format_money, send_email

from . import bp
from .forms import LoginForm, RegisterForm


@bp.route("/register", methods=["GET", "POST"])
def register():
    form = RegisterForm()
    if form.validate_on_submit():
        db = firestore.client()
        username = form.username.data
        email = form.email.data
        password = form.password.data

        # Check if username is already taken in Firestore
        users_ref = db.collection(USERS_COLLECTION)
        if users_ref.where("username", "==", username).limit(1).get():
            flash("Username already exists. Please choose a different one.", "danger")
            return redirect(url_for(".register"))

        try:
            # Create user in Firebase Authentication
            user_record = auth.create_user(
                email=email, password=password, email_verified=False
            )

            bonus = current_app.config["SIGNUP_BONUS"]
            db.collection(USERS_COLLECTION).document(user_record.uid).set(
                {
                    "username": username,
                    "email": email,
                    "balance": float(bonus),
                    "createdAt": firestore.SERVER_TIMESTAMP,
                }
            )
        except auth.EmailAlreadyExistsError:
            flash("Email address is already registered.", "danger")
            return redirect(url_for(".register"))
        except Exception as e:
            current_app.logger.error(f"Error during registration: {e}")
            flash("Authentication failed. Please try again.", "danger")
            return redirect(url_for(".register"))

        # A missing verification email should not undo the account.
        try:
            verification_link = auth.generate_email_verification_link(email)
            send_email(
                to=email,
                subject="Verify Your Email",
                template="email/verify_email.html",
                user={"username": username},
                verification_link=verification_link,
            )
        except (EmailError, FirebaseError) as e:
            current_app.logger.warning(f"Verification email to {email} failed: {e}")

        flash(
            f"Account created! You've received a {format_money(bonus)} welcome bonus.",
            "success",
        )
        # Client-side will handle login and redirect to the sport picker
        return redirect(url_for(".login"))

    return render_template("auth/register.html", form=form)


@bp.route("/login", methods=["GET"])
def login():
    """
    Renders the login page.
    The actual login process is handled by the Firebase client-side SDK.
    The client will get an ID token and post it to session_login.
    """
    form = LoginForm()
    return render_template(
        "auth/login.html", form=form, next_url=request.args.get("next", "")
    )


@bp.route("/session_login", methods=["POST"])
def session_login():
    """
    Called from the client-side after a successful Firebase login.
    It receives the ID token, verifies it, and creates a server-side session.
    """
    payload = request.get_json(silent=True) or {}
    id_token = payload.get("idToken")
    if not id_token:
        return jsonify({"status": "error", "message": "Missing ID token."}), 400
    try:
        decoded_token = auth.verify_id_token(id_token)
        uid = decoded_token["uid"]
        db = firestore.client()
        user_doc = db.collection(USERS_COLLECTION).document(uid).get()
        if user_doc.exists:
            session.clear()
            session["user_id"] = uid
            current_app.logger.info(f"User {uid} logged in")
            return jsonify({"status": "success"})
        else:
            return (
                jsonify({"status": "error", "message": "User not found in Firestore."}),
                404,
            )
    except Exception as e:
        current_app.logger.error(f"Error during session login: {e}")
        return (
            jsonify({"status": "error", "message": "Invalid token or server error."}),
            401,
        )


@bp.route("/logout")
def logout():
    """
    The Firebase sign-out itself happens client-side.
    Clearing the session also throws away the game in progress.
    """
    session.clear()
    flash("You have been logged out.", "success")
    return redirect(url_for("game.index"))


@bp.route("/firebase-config.js")
def firebase_config():
    api_key = os.environ.get("FIREBASE_API_KEY")
    if not api_key:
        current_app.logger.error(
            "FIREBASE_API_KEY is not set. Frontend will not be able to connect to Firebase."
        )
        error_script = 'console.error("Firebase API key is missing. Please set the FIREBASE_API_KEY environment variable.");'
        return Response(error_script, mimetype="application/javascript")

    project_id = os.environ.get("FIREBASE_PROJECT_ID", "fantasy-predictor")
    config = {
        "apiKey": api_key,
        "authDomain": os.environ.get(
            "FIREBASE_AUTH_DOMAIN", f"{project_id}.firebaseapp.com"
        ),
        "projectId": project_id,
        "appId": os.environ.get("FIREBASE_APP_ID", ""),
    }
    js_config = f"const firebaseConfig = {json.dumps(config)};"
    return Response(js_config, mimetype="application/javascript")
