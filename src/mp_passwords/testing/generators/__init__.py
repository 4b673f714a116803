"""Testing generators – Hypothesis strategies."""
from mp_passwords.testing.generators.strategies import (
    algorithm_id_strategy,
    raw_encoder_config_strategy,
    salt_fragment_strategy,
    unknown_algorithm_strategy,
)

__all__ = [
    "algorithm_id_strategy",
    "raw_encoder_config_strategy",
    "salt_fragment_strategy",
    "unknown_algorithm_strategy",
]
