"""Identifier and timestamp sources used when a ticket is created."""

from __future__ import annotations

import secrets
import string
import time
from datetime import datetime
from typing import Callable

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


class IdentifierGenerator:
    """Produce opaque ticket ids from a nanosecond clock and a random suffix."""

    def __init__(
        self,
        *,
        prefix: str = "ticket",
        suffix_length: int = 9,
        time_source: Callable[[], int] = time.time_ns,
    ) -> None:
        self._prefix = prefix
        self._suffix_length = max(1, suffix_length)
        self._time_source = time_source

    def next(self) -> str:
        suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(self._suffix_length))
        return f"{self._prefix}_{self._time_source()}_{suffix}"


class Clock:
    """Local wall-clock formatted for display, e.g. ``2025-10-06 09:15``."""

    def __init__(
        self,
        *,
        fmt: str = "%Y-%m-%d %H:%M",
        now_source: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._fmt = fmt
        self._now_source = now_source

    def now(self) -> str:
        return self._now_source().strftime(self._fmt)
