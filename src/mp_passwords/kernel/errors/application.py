"""Application-layer errors."""

from __future__ import annotations

from mp_passwords.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Failure raised while wiring or running a use case (e.g. bad configuration)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
