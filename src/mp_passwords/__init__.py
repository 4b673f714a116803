"""
mp_passwords – password-encoder configuration resolution.

Import path convention::

    from mp_passwords.security.encoding import EncoderResolver, RawEncoderConfig
    from mp_passwords.config.validation import ConfigError
    from mp_passwords.observability.diagnostics import CollectingDiagnosticSink
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
