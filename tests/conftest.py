import pytest

from questlab import create_app
from questlab.models import db


@pytest.fixture
def app_instance(tmp_path):
    # Use a file-based sqlite DB to keep data across request contexts.
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret-key",
        "WTF_CSRF_ENABLED": False,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test.db'}",
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app_instance):
    return app_instance.test_client()


@pytest.fixture
def store(app_instance):
    return app_instance.extensions["questlab_store"]


@pytest.fixture
def stored_document(app_instance, store):
    """Read the persisted document as the admin viewer would."""
    def _read():
        with app_instance.app_context():
            return store.raw()
    return _read
