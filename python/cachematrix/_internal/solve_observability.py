from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Tuple


@dataclass
class SolveRecord:
    op: str
    outcome: str
    trace_tag: str
    shape: Tuple[int, ...] | None
    dtype: str | None
    solver: str | None
    elapsed: float | None
    timestamp: float


def _shape_label(obj: Any) -> Tuple[int, ...] | None:
    # Attribute lookup only; cached values are never converted to arrays.
    shape = getattr(obj, "shape", None)
    if not isinstance(shape, tuple):
        return None
    try:
        return tuple(int(n) for n in shape)
    except (TypeError, ValueError):
        return None


def _dtype_label(obj: Any) -> str | None:
    if obj is None:
        return None
    dtype_attr = getattr(obj, "dtype", None)
    if dtype_attr is not None and not callable(dtype_attr):
        return str(dtype_attr)
    return type(obj).__name__


def _solver_label(solver: Any) -> str | None:
    if solver is None:
        return None
    name = getattr(solver, "__qualname__", None) or getattr(solver, "__name__", None)
    if name is None:
        name = type(solver).__name__
    return str(name)


class SolveObservability:
    """Keeps the latest cache_solve record overall and per outcome."""

    def __init__(self) -> None:
        self._counter = 0
        self._last: dict[str, dict[str, Any]] = {}

    def clear(self) -> None:
        self._last.clear()

    def _record(self, record: SolveRecord) -> dict[str, Any]:
        payload = asdict(record)
        self._last["__latest__"] = payload
        self._last[record.outcome] = payload
        return payload

    def record(
        self,
        op: str,
        outcome: str,
        *,
        result: Any,
        solver: Any = None,
        elapsed: float | None = None,
    ) -> dict[str, Any]:
        self._counter += 1
        return self._record(
            SolveRecord(
                op=op,
                outcome=outcome,
                trace_tag=f"{op}:{self._counter}",
                shape=_shape_label(result),
                dtype=_dtype_label(result),
                solver=_solver_label(solver),
                elapsed=elapsed,
                timestamp=time.time(),
            )
        )

    def last(self, outcome: str | None = None) -> dict[str, Any] | None:
        key = outcome or "__latest__"
        payload = self._last.get(key)
        if payload is None:
            return None
        return dict(payload)


_default_observability = SolveObservability()


def default_instance() -> SolveObservability:
    return _default_observability
