from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass

logger = logging.getLogger("wordgrid")


@dataclass
class Stage:
    """One timed step of a run and how many things it handled."""

    name: str
    unit: str = ""
    count: int | None = None
    elapsed_ms: float = 0.0

    def __str__(self) -> str:
        text = f"{self.name}={self.elapsed_ms:.1f}ms"
        if self.count is not None:
            text += f" ({self.count} {self.unit})" if self.unit else f" ({self.count})"
        return text


class StageTimer:
    """Collects per-stage timing and item counts for a single solve run.

    Usage::

        with timer.stage("load_words", "words") as st:
            dictionary = load_word_list(path)
            st.count = len(dictionary)
    """

    def __init__(self):
        self.stages: dict[str, Stage] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str, unit: str = ""):
        record = Stage(name, unit)
        self.stages[name] = record
        t0 = time.perf_counter()
        try:
            yield record
        finally:
            record.elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)
            logger.info("stage=%s", record)

    @property
    def timings(self) -> dict[str, float]:
        return {name: st.elapsed_ms for name, st in self.stages.items()}

    @property
    def counts(self) -> dict[str, int]:
        return {name: st.count for name, st in self.stages.items() if st.count is not None}

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}

    def report(self) -> str:
        """One line per stage, then the total."""
        lines = [f"  {st}" for st in self.stages.values()]
        lines.append(f"  total={self.total_ms:.1f}ms")
        return "\n".join(lines)
