"""Configuration module using Pydantic Settings.

Usage:
    from ecsbench.config import BenchSettings, HarnessSettings

    settings = BenchSettings(entities_count=100)
    harness = HarnessSettings(rounds=20)
"""

from ecsbench.config.settings import BenchSettings, HarnessSettings

__all__ = [
    "BenchSettings",
    "HarnessSettings",
]
