"""Caller-owned debounce timer for deferred saves, meant for clients that auto-save settings through PUT /v1/settings"""

import threading
from typing import Any, Callable, Optional


class Debouncer:
    """
    Run a callback once the calls to it have stopped for `wait_seconds`.

    Each call() restarts the timer with the latest arguments. Only the last
    call before the quiet period is delivered.
    """

    def __init__(self, wait_seconds: float, callback: Callable[..., Any]):
        self.wait_seconds = wait_seconds
        self.callback = callback
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._args: tuple = ()
        self._kwargs: dict = {}

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def call(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._args, self._kwargs = args, kwargs
            self._timer = threading.Timer(self.wait_seconds, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def flush(self) -> bool:
        """Run the pending call immediately. Returns False if nothing was pending."""
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            self._timer = None
            args, kwargs = self._args, self._kwargs
        self.callback(*args, **kwargs)
        return True

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _fire(self) -> None:
        with self._lock:
            # Superseded by a later call() or cancelled
            if self._timer is None or threading.current_thread() is not self._timer:
                return
            self._timer = None
            args, kwargs = self._args, self._kwargs
        self.callback(*args, **kwargs)
