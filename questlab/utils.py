from flask import current_app, g, session

from .accounts import AccountDirectory
from .navigation import Navigator

NAV_SESSION_KEY = "nav"


def get_directory() -> AccountDirectory:
    """Load the stored state once per request and wrap it in a directory."""
    if "directory" not in g:
        store = current_app.extensions["questlab_store"]
        g.directory = AccountDirectory(store.load(), store, current_app.extensions["questlab_catalog"])
    return g.directory


def get_navigator() -> Navigator:
    return Navigator.from_dict(session.get(NAV_SESSION_KEY), current_app.extensions["questlab_catalog"])


def save_navigator(nav: Navigator):
    session[NAV_SESSION_KEY] = nav.to_dict()
