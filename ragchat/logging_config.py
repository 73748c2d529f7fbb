"""Log setup, latency tracking and in-process request counters."""

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Callable, Union


def setup_logging(level: Union[int, str] = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # httpx logs every outbound request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


class LatencyTimer:
    def __init__(self):
        self._start = time.perf_counter()
        self.elapsed_ms = 0.0

    def stop(self) -> float:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
        return self.elapsed_ms


@contextmanager
def track_latency(operation_name: str, logger: logging.Logger):
    """Log ``<op> | latency_ms=... | status=...`` around the block and yield its timer."""
    timer = LatencyTimer()
    try:
        yield timer
    except Exception as e:
        logger.error(f"{operation_name} | latency_ms={timer.stop():.2f} | status=error | error={e}")
        raise
    logger.info(f"{operation_name} | latency_ms={timer.stop():.2f} | status=success")


def log_latency(operation_name: str):
    """Decorator form of :func:`track_latency` for coroutine functions."""

    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        async def wrapper(*args, **kwargs):
            with track_latency(operation_name, logger):
                return await func(*args, **kwargs)

        return wrapper

    return decorator


class RequestMetrics:
    """Counters for answered questions and corpus embedding passes."""

    def __init__(self):
        self.answered = 0
        self.failed = 0
        self.upstream_failures = 0
        self.request_latency_ms = 0.0
        self.cache_fills = 0
        self.cache_fill_latency_ms = 0.0

    def record_request(self, success: bool, latency_ms: float, upstream_failure: bool = False):
        if success:
            self.answered += 1
        else:
            self.failed += 1
            if upstream_failure:
                self.upstream_failures += 1
        self.request_latency_ms += latency_ms

    def record_cache_fill(self, latency_ms: float):
        self.cache_fills += 1
        self.cache_fill_latency_ms += latency_ms

    def get_stats(self) -> dict:
        total = self.answered + self.failed
        return {
            "total_requests": total,
            "successful_requests": self.answered,
            "failed_requests": self.failed,
            "upstream_failures": self.upstream_failures,
            "avg_latency_ms": round(self.request_latency_ms / total, 2) if total else 0.0,
            "cache_fills": self.cache_fills,
            "avg_cache_fill_ms": round(self.cache_fill_latency_ms / self.cache_fills, 2)
            if self.cache_fills
            else 0.0,
        }
