from flask import Flask
from config import Config
from flask_login import LoginManager
from flask_wtf import CSRFProtect
from .catalog import DEFAULT_CATALOG
from .logging_config import init_logging
from .models import db
from .storage import SqlStorage, Store
import os

login_manager = LoginManager()
csrf = CSRFProtect()


def create_app(test_config=None):
    app = Flask(__name__, template_folder="templates")
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    # ensure instance folder exists
    os.makedirs(os.path.join(app.instance_path), exist_ok=True)

    init_logging(app)

    # initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    csrf.init_app(app)

    app.extensions["questlab_catalog"] = DEFAULT_CATALOG
    app.extensions["questlab_store"] = Store(
        SqlStorage(),
        key=app.config["QUESTLAB_STORAGE_KEY"],
        strict=app.config["QUESTLAB_STRICT_LOAD"],
    )

    from .auth.routes import auth_bp
    from .main.routes import main_bp
    from .admin.routes import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(main_bp)
    app.register_blueprint(admin_bp)

    # The signed-in account is whatever the stored document marks as active.
    @login_manager.request_loader
    def load_active_account(request):
        from .utils import get_directory
        return get_directory().get_active()

    @app.context_processor
    def inject_status():
        from flask_login import current_user
        if current_user.is_authenticated:
            status = f"{current_user.name} · Level {current_user.level}"
        else:
            status = "Not signed in"
        return {"account_status": status}

    with app.app_context():
        db.create_all()

    return app
