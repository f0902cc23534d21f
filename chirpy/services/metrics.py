"""Hit counter for the static file server."""

import threading


class HitCounter:
    """Thread-safe counter owned by the application (see ``app.state.metrics``)."""

    def __init__(self) -> None:
        self._hits = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Record one hit and return the new total."""
        with self._lock:
            self._hits += 1
            return self._hits

    def reset(self) -> None:
        with self._lock:
            self._hits = 0

    @property
    def hits(self) -> int:
        with self._lock:
            return self._hits
