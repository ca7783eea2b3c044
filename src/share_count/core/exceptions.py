"""Exceptions raised by the share count package."""


class ShareCountError(Exception):
    """Base class for share count errors."""


class SubjectNotFoundError(ShareCountError, LookupError):
    """Raised when a subject identifier cannot be resolved."""

    def __init__(self, subject_id: str) -> None:
        self.subject_id = subject_id
        super().__init__(f"Unknown subject: {subject_id!r}")
