import logging

from .catalog import DEFAULT_CATALOG
from .errors import DuplicateAccountError, InvalidCredentialsError, ValidationError
from .ledger import ensure_progress
from .models import Account

logger = logging.getLogger(__name__)


class AccountDirectory:
    """Sign-up, sign-in and sign-out against a loaded ``AppState``.

    Every successful operation flushes the full state to the store.
    """

    def __init__(self, state, store, catalog=DEFAULT_CATALOG):
        self.state = state
        self.store = store
        self.catalog = catalog

    def persist(self):
        self.store.save(self.state)

    def get_active(self):
        name = self.state.active_account
        if not name:
            return None
        account = self.state.accounts.get(name)
        if account is not None:
            ensure_progress(account, self.catalog)
        return account

    def create_account(self, name, email, password):
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email or not (password or "").strip():
            raise ValidationError()
        if name in self.state.accounts:
            raise DuplicateAccountError()

        account = Account(name=name, email=email, password=password)
        self.state.accounts[name] = account
        self.state.active_account = name
        ensure_progress(account, self.catalog)
        self.persist()
        logger.info("Account created: %s", name)
        return account

    def authenticate(self, name, password):
        name = (name or "").strip()
        account = self.state.accounts.get(name)
        if account is None or account.password != password:
            logger.info("Failed sign-in for %r", name)
            raise InvalidCredentialsError()
        self.state.active_account = name
        ensure_progress(account, self.catalog)
        self.persist()
        logger.info("Signed in: %s", name)
        return account

    def logout(self):
        previous = self.state.active_account
        self.state.active_account = None
        self.persist()
        if previous:
            logger.info("Signed out: %s", previous)
