"""Fatal password-encoder configuration errors."""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from mp_passwords.config.validation import ConfigError


class UnknownAlgorithmError(ConfigError):
    """The configured hash algorithm is not in the encoder catalog."""
    default_code = "unknown_algorithm"

    def __init__(self, algorithm: str | None, supported: Iterable[str] = ()) -> None:
        supported = tuple(supported)
        if algorithm is None:
            message = "No password encoder algorithm or reference configured"
        else:
            message = f"Unknown password encoder algorithm {algorithm!r}"
        if supported:
            message += f" (expected one of: {', '.join(supported)})"
        super().__init__(message, detail={"algorithm": algorithm, "supported": list(supported)})
        self.algorithm = algorithm
        self.supported = supported


class MalformedSaltSourceError(ConfigError):
    """A salt-source fragment names no usable strategy."""
    default_code = "malformed_salt_source"

    def __init__(self, reason: str, attributes: Mapping[str, str | None] | None = None) -> None:
        super().__init__(
            f"Malformed salt-source configuration: {reason}",
            detail={"attributes": sorted(k for k, v in (attributes or {}).items() if v)},
        )
        self.reason = reason


__all__ = ["MalformedSaltSourceError", "UnknownAlgorithmError"]
