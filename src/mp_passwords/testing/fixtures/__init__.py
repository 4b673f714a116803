"""Testing fixtures – pytest fixtures for the resolver fakes.

Import them into a test module (or a conftest) so pytest picks them up.
"""
from mp_passwords.testing.fixtures.resolver import diagnostic_sink, encoder_resolver, salt_resolver

__all__ = ["diagnostic_sink", "encoder_resolver", "salt_resolver"]
