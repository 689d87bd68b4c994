"""Change notification.

Every successful mutation fires one "something changed" signal. There is no
payload and no diffing; listeners re-read whatever they display.
"""

from contextlib import contextmanager
from typing import Callable, Iterator

import logfire

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class ChangeNotifier:
    """Registry of zero-argument listeners.

    Listeners run synchronously, in registration order. An exception raised
    by a listener propagates to the caller of ``notify``.
    """

    def __init__(self) -> None:
        self._listeners: dict[int, Listener] = {}
        self._next_key = 0
        self._hold_depth = 0
        self._pending = 0

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register a listener.

        Args:
            listener: Callback invoked after every mutation

        Returns:
            Handle that removes the listener when called (safe to call twice)
        """
        key = self._next_key
        self._next_key += 1
        self._listeners[key] = listener

        def unsubscribe() -> None:
            self._listeners.pop(key, None)

        return unsubscribe

    def notify(self) -> None:
        """Invoke every listener, or queue the signal while deferred."""
        if self._hold_depth:
            self._pending += 1
            return
        self._fire()

    @contextmanager
    def deferred(self) -> Iterator[None]:
        """Delay signals raised inside the block until it exits.

        Each queued signal is delivered on exit; none are merged.
        """
        self._hold_depth += 1
        try:
            yield
        finally:
            self._hold_depth -= 1
            if not self._hold_depth:
                pending, self._pending = self._pending, 0
                for _ in range(pending):
                    self._fire()

    def _fire(self) -> None:
        logfire.debug("Notifying listeners", count=len(self._listeners))
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners.values()):
            listener()

    def __len__(self) -> int:
        return len(self._listeners)
