from .id_strategies import (
    IdStrategy,
    MaxPlusOneIdStrategy,
    TimestampRandomIdStrategy,
    strategy_for,
)

__all__ = [
    "IdStrategy",
    "MaxPlusOneIdStrategy",
    "TimestampRandomIdStrategy",
    "strategy_for",
]
