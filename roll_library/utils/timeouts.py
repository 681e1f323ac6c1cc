#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Timeout utilities.

The pipeline itself never bounds a decode; callers that need a deadline wrap
their request with `with_timeout`.
"""

from concurrent.futures import ThreadPoolExecutor, TimeoutError as _FuturesTimeout
from typing import Any, Callable, Optional


def with_timeout(fn: Callable[..., Any], seconds: Optional[float], *args, **kwargs) -> Any:
    """Run `fn` and raise TimeoutError if it has not returned after `seconds`.

    A running decode cannot be interrupted: on timeout the worker thread keeps
    going in the background and still owns whatever it was given, so callers
    must not release resources passed to `fn` after a TimeoutError. The
    interpreter also waits for that worker before exiting.
    """
    if seconds is None or seconds <= 0:
        return fn(*args, **kwargs)
    ex = ThreadPoolExecutor(max_workers=1)
    fut = ex.submit(fn, *args, **kwargs)
    try:
        return fut.result(timeout=seconds)
    except _FuturesTimeout as e:
        raise TimeoutError(f"Operation exceeded {seconds} seconds") from e
    finally:
        ex.shutdown(wait=False)
