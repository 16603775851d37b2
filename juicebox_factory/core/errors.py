"""
Error taxonomy for JuiceBox Factory.

Every failure the service raises on purpose derives from ``JuiceBoxError``.
Each subclass carries the HTTP status the server maps it to, so the exception
handlers stay free of per-type branching.
"""

from typing import Any, Optional


class JuiceBoxError(Exception):
    """Base exception for all JuiceBox Factory errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(JuiceBoxError):
    """A referenced entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, identifier: Any) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")


class ValidationFailedError(JuiceBoxError):
    """Input failed a domain rule not expressible in the request schema."""

    status_code = 400


class DuplicateSubmissionError(JuiceBoxError):
    """The entity (or the user's submission for it) already exists."""

    status_code = 409


class UpstreamError(JuiceBoxError):
    """An external API or the persistence layer failed."""

    def __init__(self, source: str, message: str, *, external: bool = True, cause: Optional[BaseException] = None) -> None:
        self.source = source
        self.external = external
        self.cause = cause
        self.status_code = 502 if external else 500
        super().__init__(f"{source} failed: {message}")
