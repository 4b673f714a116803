"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError                 (application.py)
        └── ConfigError                  (mp_passwords.config.validation)
            ├── MissingRequiredSettingError
            ├── InvalidSettingValueError
            ├── UnknownAlgorithmError    (mp_passwords.security.encoding.errors)
            └── MalformedSaltSourceError (mp_passwords.security.encoding.errors)
"""

from mp_passwords.kernel.errors.application import ApplicationError
from mp_passwords.kernel.errors.base import BaseError

__all__ = ["ApplicationError", "BaseError"]
