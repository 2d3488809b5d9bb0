from flask_sqlalchemy import SQLAlchemy
from flask_login import UserMixin
from datetime import datetime, timezone
import logging

db = SQLAlchemy()
logger = logging.getLogger(__name__)


class StorageEntry(db.Model):
    """One key of the local key-value storage; the tracker only uses one."""
    __tablename__ = "storage"
    key = db.Column(db.String(120), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc),
                           onupdate=lambda: datetime.now(timezone.utc))


class SubjectProgress:
    def __init__(self, solved=0, attempts=0, last_solved=None):
        self.solved = solved
        self.attempts = attempts
        self.last_solved = last_solved  # ISO-8601 string or None

    @classmethod
    def from_dict(cls, data):
        # A malformed entry restarts that subject from zero.
        if not isinstance(data, dict):
            return cls()
        try:
            solved = int(data.get("solved") or 0)
            attempts = int(data.get("attempts") or 0)
        except (TypeError, ValueError):
            return cls()
        return cls(solved=solved, attempts=attempts, last_solved=data.get("lastSolved"))

    def to_dict(self):
        return {"solved": self.solved, "attempts": self.attempts, "lastSolved": self.last_solved}

    def __repr__(self):
        return f"<SubjectProgress solved={self.solved} attempts={self.attempts}>"


class Account(UserMixin):
    """A tracker profile. Level is derived from points and never stored."""

    def __init__(self, name, email, password, points=0, streak=0, progress=None):
        self.name = name
        self.email = email
        self.password = password  # cleartext, as the stored document expects
        self.points = points
        self.streak = streak
        self.progress = progress if progress is not None else {}

    def get_id(self):
        return self.name

    @property
    def level(self):
        from .ledger import level_for
        return level_for(self.points)

    @property
    def progress_fraction(self):
        from .ledger import progress_fraction
        return progress_fraction(self.points)

    @classmethod
    def from_dict(cls, name, data):
        # "level" may be present in older documents; it is recomputed instead.
        progress = data.get("progress")
        if not isinstance(progress, dict):
            progress = {}
        return cls(
            name=name,
            email=data.get("email", ""),
            password=data.get("password", ""),
            points=int(data.get("points") or 0),
            streak=int(data.get("streak") or 0),
            progress={subject: SubjectProgress.from_dict(p) for subject, p in progress.items()},
        )

    def to_dict(self):
        return {
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "points": self.points,
            "streak": self.streak,
            "progress": {subject: p.to_dict() for subject, p in self.progress.items()},
        }

    def __repr__(self):
        return f"<Account {self.name!r} points={self.points} streak={self.streak}>"


class AppState:
    """Root of the persisted document: every account plus the active pointer."""

    def __init__(self, accounts=None, active_account=None):
        self.accounts = accounts if accounts is not None else {}
        self.active_account = active_account

    @classmethod
    def from_dict(cls, data):
        records = data.get("accounts") or {}
        if not isinstance(records, dict):
            logger.warning("Ignoring accounts of type %s", type(records).__name__)
            records = {}
        accounts = {}
        for name, record in records.items():
            try:
                accounts[name] = Account.from_dict(name, record)
            except (AttributeError, TypeError, ValueError) as exc:
                logger.warning("Dropping unreadable account record %r: %s", name, exc)
        active = data.get("activeAccount")
        return cls(accounts=accounts, active_account=active if isinstance(active, str) else None)

    def to_dict(self):
        return {
            "accounts": {name: acc.to_dict() for name, acc in self.accounts.items()},
            "activeAccount": self.active_account,
        }
