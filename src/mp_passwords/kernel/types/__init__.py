"""Kernel value types.

Modules:
  result.py — Ok, Err, Result
"""

from mp_passwords.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
