from datetime import datetime, timezone

from questlab import create_app
from questlab.accounts import AccountDirectory
from questlab.catalog import DEFAULT_CATALOG
from questlab.errors import DuplicateAccountError
from questlab.ledger import record_attempt, record_solve

app = create_app()

with app.app_context():
    store = app.extensions["questlab_store"]
    directory = AccountDirectory(store.load(), store, DEFAULT_CATALOG)
    try:
        demo = directory.create_account("demo", "demo@example.com", "demo123")
    except DuplicateAccountError:
        print("Demo account already present; nothing to do.")
    else:
        now = datetime.now(timezone.utc)
        record_solve(demo, "Arrays", now=now)
        record_solve(demo, "Strings", now=now)
        record_attempt(demo, "Logic")
        directory.logout()
        print(f"Seeded demo account: {demo.points} points, level {demo.level}.")
