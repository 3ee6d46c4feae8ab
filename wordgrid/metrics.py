import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass

logger = logging.getLogger("wordgrid")


@dataclass
class Stage:
    name: str
    elapsed_ms: float = 0.0
    items: int | None = None  # words loaded, words found, paths traced...


class StageTimer:
    """Times the load/grid/solve/trace steps of one run.

    Each stage can report how many items it produced, so a slow solve can be
    told apart from a large one.
    """

    def __init__(self):
        self.stages: list[Stage] = []
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        record = Stage(name)
        t0 = time.perf_counter()
        try:
            yield record
        finally:
            record.elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)
            self.stages.append(record)
            logger.debug("stage=%s elapsed=%.1fms items=%s", name, record.elapsed_ms, record.items)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict[str, float]:
        return {**{s.name: s.elapsed_ms for s in self.stages}, "total": self.total_ms}

    def counts(self) -> dict[str, int]:
        return {s.name: s.items for s in self.stages if s.items is not None}
