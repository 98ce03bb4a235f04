"""Generic helpers (logging setup, profiling, small collection utilities)."""

from __future__ import annotations

import functools
import logging
import re
import time
from typing import Hashable, Iterable, List, Set, TypeVar

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

T = TypeVar("T", bound=Hashable)

_WHITESPACE_RE = re.compile(r"\s{2,}")


def profile_time(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        elapsed = time.time() - start_time
        logging.info("[PROFILE] Function '%s' executed in %.3f seconds", func.__name__, elapsed)
        return result

    return wrapper


def dedupe_preserve(items: Iterable[T]) -> List[T]:
    seen: Set[T] = set()
    output: List[T] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        output.append(item)
    return output


def collapse_whitespace(text: str) -> str:
    text = re.sub(r"[\n\t]", " ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
