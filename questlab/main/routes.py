from flask import Blueprint, abort, current_app, flash, redirect, render_template, url_for
from flask_login import current_user

from ..errors import SignInRequiredError, UnknownSubjectError
from ..ledger import record_attempt, record_solve, scoreboard, subject_stats
from ..utils import get_directory, get_navigator, save_navigator

main_bp = Blueprint("main", __name__)


def _active_account():
    return current_user._get_current_object() if current_user.is_authenticated else None


@main_bp.route("/")
def index():
    nav = get_navigator()
    account = _active_account()
    return render_template(
        "dashboard.html",
        account=account,
        catalog=current_app.extensions["questlab_catalog"],
        nav=nav,
        question=nav.current_question(),
        board=scoreboard(account),
        stats=subject_stats(account, current_app.extensions["questlab_catalog"]),
    )


@main_bp.post("/subject/<name>")
def select_subject(name):
    nav = get_navigator()
    try:
        nav.select_subject(name)
    except UnknownSubjectError:
        abort(404)
    save_navigator(nav)
    return redirect(url_for("main.index"))


@main_bp.post("/hint")
def toggle_hint():
    nav = get_navigator()
    if nav.active_subject is None:
        return redirect(url_for("main.index"))
    nav.toggle_hint()
    save_navigator(nav)
    # Opening and closing the hint both count as an attempt.
    if record_attempt(_active_account(), nav.active_subject) is not None:
        get_directory().persist()
    return redirect(url_for("main.index"))


@main_bp.post("/solve")
def mark_solved():
    nav = get_navigator()
    if nav.active_subject is None:
        flash("Pick a subject first.")
        return redirect(url_for("main.index"))
    try:
        record_solve(_active_account(), nav.active_subject)
    except SignInRequiredError as exc:
        flash(exc.message)
        return redirect(url_for("main.index"))
    get_directory().persist()
    flash("Nice work! Marked as solved.")
    return redirect(url_for("main.index"))


@main_bp.post("/next")
def next_question():
    nav = get_navigator()
    nav.next_question()
    save_navigator(nav)
    return redirect(url_for("main.index"))


@main_bp.route("/api/progress")
def api_progress():
    account = _active_account()
    payload = scoreboard(account)
    payload["account"] = account.name if account else None
    payload["subjects"] = subject_stats(account, current_app.extensions["questlab_catalog"])
    return payload
