from __future__ import annotations

from typing import Iterable


class UserDirectoryError(Exception):
    detail = "user_directory_error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.detail)


class NotFound(UserDirectoryError):
    detail = "user_not_found"

    def __init__(self, key: int | str | None = None):
        self.key = key
        msg = self.detail if key is None else f"{self.detail}: {key!r}"
        super().__init__(msg)


class ConstraintViolation(UserDirectoryError):
    detail = "constraint_violation"

    def __init__(self, fields: Iterable[str] = (), message: str | None = None):
        self.fields = tuple(fields)
        if message is None:
            message = self.detail
            if self.fields:
                message = f"{self.detail}: {', '.join(self.fields)}"
        super().__init__(message)


class UniquenessViolation(UserDirectoryError):
    detail = "user_exists"

    def __init__(self, username: str | None = None):
        self.username = username
        msg = self.detail if username is None else f"{self.detail}: {username!r}"
        super().__init__(msg)


class ResetNotConfirmed(UserDirectoryError):
    detail = "reset_not_confirmed"
