from . import names
from .base import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook, timed

__all__ = [
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
    "timed",
]
