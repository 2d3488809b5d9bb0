from .catalog import DEFAULT_CATALOG


class Navigator:
    """Which subject and question the visitor is looking at, and whether the
    hint is open. Lives in the browser session only; never persisted."""

    def __init__(self, catalog=DEFAULT_CATALOG, active_subject=None, question_index=0, hint_visible=False):
        self.catalog = catalog
        self.active_subject = active_subject
        self.question_index = question_index
        self.hint_visible = hint_visible

    @property
    def subject(self):
        if self.active_subject is None:
            return None
        return self.catalog.get(self.active_subject)

    @property
    def controls_enabled(self):
        return self.active_subject is not None

    def select_subject(self, name):
        self.catalog.get(name)  # raises UnknownSubjectError
        self.active_subject = name
        self.question_index = 0
        self.hint_visible = False

    def next_question(self):
        subject = self.subject
        if subject is None:
            return None
        self.question_index = (self.question_index + 1) % subject.question_count
        self.hint_visible = False
        return self.question_index

    def toggle_hint(self):
        if self.subject is None:
            return False
        self.hint_visible = not self.hint_visible
        return self.hint_visible

    def current_question(self):
        subject = self.subject
        if subject is None:
            return None
        return subject.questions[self.question_index]

    def title(self):
        if self.active_subject is None:
            return "Pick a subject"
        return f"{self.active_subject} · Question {self.question_index + 1}"

    def to_dict(self):
        return {
            "subject": self.active_subject,
            "index": self.question_index,
            "hint": self.hint_visible,
        }

    @classmethod
    def from_dict(cls, data, catalog=DEFAULT_CATALOG):
        """Rebuild from session data, falling back to defaults on stale values."""
        data = data or {}
        nav = cls(catalog)
        name = data.get("subject")
        if name not in catalog:
            return nav
        index = data.get("index")
        if not isinstance(index, int) or not 0 <= index < catalog.get(name).question_count:
            index = 0
        nav.active_subject = name
        nav.question_index = index
        nav.hint_visible = bool(data.get("hint"))
        return nav
