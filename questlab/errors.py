"""Exceptions raised by the tracker core and turned into notices by the views."""


class QuestLabError(Exception):
    """Base class; ``message`` is safe to show to the user."""

    default_message = "Something went wrong."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(QuestLabError):
    default_message = "Name, email and password are required."


class DuplicateAccountError(QuestLabError):
    default_message = "Account already exists. Please sign in instead."


class InvalidCredentialsError(QuestLabError):
    default_message = "Invalid credentials."


class SignInRequiredError(QuestLabError):
    default_message = "Sign in or create an account to track progress."


class UnknownSubjectError(QuestLabError, KeyError):
    default_message = "Unknown subject."

    def __str__(self):
        return self.message


class AccessDeniedError(QuestLabError):
    default_message = "Access denied. Check the passphrase."


class CorruptStoreError(QuestLabError):
    default_message = "Stored progress data could not be read."
