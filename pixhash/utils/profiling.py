from __future__ import annotations

import functools
import json
import logging
import threading
import time
from typing import Callable, Dict, List, ParamSpec, TypeVar

from pixhash.core.config import settings

P = ParamSpec("P")
R = TypeVar("R")

_logger = logging.getLogger(__name__)


def _now_ms() -> float:
    return time.perf_counter() * 1000.0


# -------- Aggregator ----------
class _Stats:
    __slots__ = ("count", "sum_ms", "max_ms", "_samples", "_lock")

    def __init__(self) -> None:
        self.count = 0
        self.sum_ms = 0.0
        self.max_ms = 0.0
        self._samples: List[float] = []
        self._lock = threading.Lock()

    def add(self, ms: float) -> None:
        with self._lock:
            self.count += 1
            self.sum_ms += ms
            if ms > self.max_ms:
                self.max_ms = ms
            buf = self._samples
            if len(buf) < 2048:
                buf.append(ms)
            else:
                idx = self.count % 2048
                buf[idx] = ms

    def quantiles(self) -> tuple[float, float]:
        with self._lock:
            s = sorted(self._samples)
        if not s:
            return (0.0, 0.0)

        def _q(p: float) -> float:
            k = max(0, min(len(s) - 1, int(round(p * (len(s) - 1)))))
            return s[k]

        return (_q(0.50), _q(0.95))


_AGG: Dict[str, _Stats] = {}
_AGG_LOCK = threading.Lock()


def _agg_add(label: str, ms: float) -> None:
    with _AGG_LOCK:
        st = _AGG.get(label)
        if st is None:
            st = _Stats()
            _AGG[label] = st
    st.add(ms)


def stats() -> Dict[str, Dict[str, float]]:
    """Snapshot of aggregated timings, keyed by label."""
    with _AGG_LOCK:
        items = list(_AGG.items())
    out: Dict[str, Dict[str, float]] = {}
    for name, st in items:
        p50, p95 = st.quantiles()
        avg = (st.sum_ms / st.count) if st.count else 0.0
        out[name] = {
            "count": st.count,
            "total_ms": round(st.sum_ms, 3),
            "avg_ms": round(avg, 3),
            "p50_ms": round(p50, 3),
            "p95_ms": round(p95, 3),
            "max_ms": round(st.max_ms, 3),
        }
    return out


def reset() -> None:
    with _AGG_LOCK:
        _AGG.clear()


def profiled(name: str | None = None) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator: when settings.PROFILE is on, records wall-time per call into the
    aggregate table and logs it at DEBUG (as JSON when PROFILE_JSON_LOG is set).
    """

    def deco(fn: Callable[P, R]) -> Callable[P, R]:
        label = name or f"{fn.__module__}.{fn.__qualname__}"

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            if not settings.PROFILE:
                return fn(*args, **kwargs)

            t0 = _now_ms()
            try:
                return fn(*args, **kwargs)
            finally:
                ms = round(_now_ms() - t0, 3)
                if settings.PROFILE_JSON_LOG:
                    payload = {
                        "event": "profile",
                        "name": label,
                        "ms": ms,
                        "thread": threading.current_thread().name,
                    }
                    _logger.debug(json.dumps(payload, ensure_ascii=False))
                else:
                    _logger.debug("[PROFILE] %s: %.3f ms", label, ms)
                _agg_add(label, ms)

        return wrapper

    return deco
