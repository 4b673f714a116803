"""Kernel – framework-agnostic building blocks."""

from mp_passwords.kernel.errors import ApplicationError, BaseError
from mp_passwords.kernel.types import Err, Ok, Result

__all__ = ["ApplicationError", "BaseError", "Err", "Ok", "Result"]
