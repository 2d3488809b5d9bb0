from flask import Blueprint, current_app, render_template, request

from ..errors import AccessDeniedError
from .viewer import dump_store

admin_bp = Blueprint("admin", __name__, url_prefix="/admin")


@admin_bp.route("/", methods=["GET", "POST"])
def viewer():
    if request.method == "POST":
        store = current_app.extensions["questlab_store"]
        try:
            data = dump_store(
                store,
                request.form.get("passphrase", ""),
                current_app.config["QUESTLAB_ADMIN_PASSPHRASE"],
            )
        except AccessDeniedError as exc:
            return render_template("admin.html", data=None, error=exc.message), 403
        return render_template("admin.html", data=data, error=None)
    return render_template("admin.html", data=None, error=None)
