"""Read-only registry of practice subjects and their prompt/hint pairs."""

from types import MappingProxyType
from typing import NamedTuple

from .errors import UnknownSubjectError
from .subjects.data import SUBJECTS


class Question(NamedTuple):
    prompt: str
    hint: str


class Subject(NamedTuple):
    name: str
    description: str
    questions: tuple

    @property
    def question_count(self) -> int:
        return len(self.questions)


class Catalog:
    """Fixed, ordered set of subjects. Built once and never mutated."""

    def __init__(self, subjects):
        registry = {}
        for subject in subjects:
            if not subject.questions:
                raise ValueError(f"Subject {subject.name!r} has no questions.")
            if subject.name in registry:
                raise ValueError(f"Duplicate subject {subject.name!r}.")
            registry[subject.name] = subject
        if not registry:
            raise ValueError("A catalog needs at least one subject.")
        self._subjects = MappingProxyType(registry)

    @classmethod
    def from_records(cls, records):
        return cls(
            Subject(
                name=rec["name"],
                description=rec.get("description", ""),
                questions=tuple(Question(q["prompt"], q["hint"]) for q in rec["questions"]),
            )
            for rec in records
        )

    def __contains__(self, name):
        return name in self._subjects

    def __iter__(self):
        return iter(self._subjects.values())

    def __len__(self):
        return len(self._subjects)

    def names(self):
        return list(self._subjects)

    def get(self, name) -> Subject:
        try:
            return self._subjects[name]
        except KeyError:
            raise UnknownSubjectError(f"Unknown subject: {name}") from None


DEFAULT_CATALOG = Catalog.from_records(SUBJECTS)
