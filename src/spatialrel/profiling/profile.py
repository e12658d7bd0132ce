"""
Timing markers for relation queries.

Usage:
    from spatialrel.profiling import profile, perf_marker, enable_profiling

    enable_profiling()

    @profile
    def my_function():
        ...

    with perf_marker("my_section"):
        ...

    get_profile_results()
    # {'my_function': {'count': 1, 'total_ms': 0.01, 'avg_ms': 0.01, 'min_ms': 0.01, 'max_ms': 0.01}}

Zero-overhead mode:
    Markers are compiled out entirely (decorators return the function
    unchanged) when:
    - Environment variable SPATIALREL_NO_PROFILING=1 is set, OR
    - Python is run with optimization (-O flag, which sets __debug__=False)

    Requires process restart to take effect.
"""

import os
import time
import functools
from typing import Dict, Any, Optional, Callable, Union

# =============================================================================
# Configuration
# =============================================================================

_PROFILING_COMPILED_OUT = (
    os.environ.get('SPATIALREL_NO_PROFILING', '').lower() in ('1', 'true', 'yes')
    or not __debug__
)

_perf = time.perf_counter


# =============================================================================
# NoOp Backend
# =============================================================================

class _NoOpMarker:
    __slots__ = ()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


class _NoOpBackend:
    """Backend used when profiling is compiled out."""

    enabled = False

    def __init__(self):
        self._noop_marker = _NoOpMarker()

    def clear(self) -> None:
        pass

    def get_results(self) -> Dict[str, Dict[str, Any]]:
        return {}

    def create_perf_marker(self, name: str):
        return self._noop_marker

    def create_profiled_function(self, func: Callable, name: str) -> Callable:
        return func


# =============================================================================
# Recording Backend
# =============================================================================

class _Stats:
    __slots__ = ('count', 'total', 'min', 'max')

    def __init__(self):
        self.count = 0
        self.total = 0.0
        self.min = float('inf')
        self.max = 0.0

    def add(self, elapsed: float) -> None:
        self.count += 1
        self.total += elapsed
        if elapsed < self.min:
            self.min = elapsed
        if elapsed > self.max:
            self.max = elapsed


class _PerfMarker:
    __slots__ = ('_backend', '_name', '_start')

    def __init__(self, backend: '_RecordingBackend', name: str):
        self._backend = backend
        self._name = name
        self._start = 0.0

    def __enter__(self):
        self._start = _perf()
        return self

    def __exit__(self, *args):
        if self._backend.enabled:
            self._backend.record(self._name, _perf() - self._start)
        return False


class _RecordingBackend:
    """Aggregates elapsed times per marker name while profiling is enabled."""

    def __init__(self):
        self.enabled = False
        self._stats: Dict[str, _Stats] = {}

    def record(self, name: str, elapsed: float) -> None:
        stats = self._stats.get(name)
        if stats is None:
            stats = self._stats[name] = _Stats()
        stats.add(elapsed)

    def clear(self) -> None:
        self._stats.clear()

    def get_results(self) -> Dict[str, Dict[str, Any]]:
        results = {}
        for name, s in self._stats.items():
            total_ms = s.total * 1000
            results[name] = {
                'count': s.count,
                'total_ms': round(total_ms, 3),
                'avg_ms': round(total_ms / s.count, 3) if s.count else 0.0,
                'min_ms': round(s.min * 1000, 3) if s.count else 0.0,
                'max_ms': round(s.max * 1000, 3),
            }
        return results

    def create_perf_marker(self, name: str):
        return _PerfMarker(self, name)

    def create_profiled_function(self, func: Callable, name: str) -> Callable:
        backend = self

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not backend.enabled:
                return func(*args, **kwargs)
            start = _perf()
            try:
                return func(*args, **kwargs)
            finally:
                backend.record(name, _perf() - start)

        return wrapper


_backend = _NoOpBackend() if _PROFILING_COMPILED_OUT else _RecordingBackend()


# =============================================================================
# Public API
# =============================================================================

def enable_profiling(enabled: bool = True) -> None:
    """Start (or stop) recording marker timings. No effect when compiled out."""
    if not _PROFILING_COMPILED_OUT:
        _backend.enabled = enabled


def is_profiling_enabled() -> bool:
    return _backend.enabled


def reset_profile():
    """Reset all collected profile data."""
    _backend.clear()


def get_profile_results() -> Dict[str, Dict[str, Any]]:
    """
    Get marker statistics collected since the last reset.

    Returns:
        Dict mapping marker names to their stats:
        {
            'marker_name': {
                'count': 10,
                'total_ms': 0.052,
                'avg_ms': 0.005,
                'min_ms': 0.004,
                'max_ms': 0.008,
            }
        }
    """
    return _backend.get_results()


def perf_marker(name: Optional[str] = None):
    """
    Create a context manager for performance marking.

    Usage:
        with perf_marker("my_section"):
            # ... do work ...
    """
    return _backend.create_perf_marker(name or "unknown")


def profile(name_or_func: Union[str, Callable, None] = None) -> Callable:
    """
    Decorator for profiling functions.

    Usage:
        @profile
        def my_function():
            ...

        @profile("custom_name")
        def my_function():
            ...
    """
    def decorator(func: Callable) -> Callable:
        marker_name = name_or_func if isinstance(name_or_func, str) else func.__qualname__
        return _backend.create_profiled_function(func, marker_name)

    if callable(name_or_func):
        return decorator(name_or_func)
    else:
        return decorator
