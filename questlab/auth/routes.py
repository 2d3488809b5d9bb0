from flask import Blueprint, flash, redirect, request, url_for

from ..errors import QuestLabError
from ..utils import get_directory

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


@auth_bp.post("/signup")
def signup():
    try:
        account = get_directory().create_account(
            request.form.get("name", ""),
            request.form.get("email", ""),
            request.form.get("password", ""),
        )
    except QuestLabError as exc:
        flash(exc.message)
        return redirect(url_for("main.index"))
    flash(f"Welcome, {account.name}!")
    return redirect(url_for("main.index"))


@auth_bp.post("/login")
def login():
    try:
        get_directory().authenticate(
            request.form.get("name", ""),
            request.form.get("password", ""),
        )
    except QuestLabError as exc:
        flash(exc.message)
    return redirect(url_for("main.index"))


@auth_bp.post("/logout")
def logout():
    get_directory().logout()
    return redirect(url_for("main.index"))
