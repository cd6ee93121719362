from collections import defaultdict
from collections.abc import Iterator
from contextlib import contextmanager
from time import monotonic
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for the counters and latencies emitted by the extractor.

    Implementations must be cheap and must not raise.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass


class InMemoryMetricsHook:
    """Totals per metric name, labels ignored.

    Used by the command line to report a summary at the end of a batch.
    """

    def __init__(self) -> None:
        self.counters: dict[str, int] = defaultdict(int)
        self.latencies_ms: dict[str, list[float]] = defaultdict(list)

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies_ms[name].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[name] += value

    def count(self, name: str) -> int:
        return self.counters.get(name, 0)

    def total_ms(self, name: str) -> float:
        return sum(self.latencies_ms.get(name, ()))


@contextmanager
def timed(
    metrics_hook: MetricsHook,
    name: str,
    labels: dict[str, str] | None = None,
) -> Iterator[None]:
    """Record the wall time of the enclosed block as a latency in ms.

    The latency is recorded even when the block raises.
    """
    start = monotonic()
    try:
        yield
    finally:
        metrics_hook.record_latency(name, 1000 * (monotonic() - start), labels)
