from datetime import datetime, timezone

from .errors import SignInRequiredError
from .models import SubjectProgress

LEVEL_STEP = 120
SOLVE_POINTS = 40
ATTEMPT_POINTS = 10


def level_for(points: int) -> int:
    return max(1, points // LEVEL_STEP + 1)


def progress_fraction(points: int) -> float:
    """Share of the current level already earned, in [0, 1)."""
    return (points % LEVEL_STEP) / LEVEL_STEP


def ensure_progress(account, catalog):
    """Give the account a zeroed entry for every catalog subject it lacks."""
    if account.progress is None:
        account.progress = {}
    for name in catalog.names():
        if name not in account.progress:
            account.progress[name] = SubjectProgress()
    return account.progress


def _entry(account, subject):
    entry = account.progress.get(subject)
    if entry is None:
        entry = account.progress[subject] = SubjectProgress()
    return entry


def record_solve(account, subject: str, now: datetime = None):
    if account is None:
        raise SignInRequiredError()
    entry = _entry(account, subject)
    entry.attempts += 1
    entry.solved += 1
    entry.last_solved = (now or datetime.now(timezone.utc)).isoformat()
    account.points += SOLVE_POINTS
    account.streak += 1
    return entry


def record_attempt(account, subject: str):
    # Without an account a hint is just a hint; nothing is recorded.
    if account is None:
        return None
    entry = _entry(account, subject)
    entry.attempts += 1
    account.points += ATTEMPT_POINTS
    account.streak = max(0, account.streak - 1)
    return entry


def subject_stats(account, catalog):
    """Per-subject solved/attempts/mastery rows for the stats panel."""
    rows = []
    for subject in catalog:
        entry = account.progress.get(subject.name) if account else None
        solved = entry.solved if entry else 0
        attempts = entry.attempts if entry else 0
        total = subject.question_count
        rows.append({
            "subject": subject.name,
            "solved": solved,
            "attempts": attempts,
            "total": total,
            "mastery": round(solved / total * 100),
            "last_solved": entry.last_solved if entry else None,
        })
    return rows


def scoreboard(account):
    points = account.points if account else 0
    return {
        "level": level_for(points),
        "points": points,
        "streak": account.streak if account else 0,
        "progress": round(progress_fraction(points) * 100, 1),
    }
