"""Single-slot hand-off between a thread waiting for a decision and the one supplying it."""

import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Rendezvous(Generic[T]):
    """A request is opened by the waiter, filled once by a sender, then closed.

    The engine thread calls ``open()`` then ``receive()``; an input thread
    (console, network, seat replacement) calls ``send()``. Only one request
    can be outstanding at a time.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._pending = False
        self._has_value = False
        self._value: Optional[T] = None

    @property
    def pending(self) -> bool:
        """Whether a request is open and still waiting for a value."""
        with self._condition:
            return self._pending and not self._has_value

    def open(self) -> None:
        with self._condition:
            if self._pending:
                raise RuntimeError("A request is already pending")
            self._pending = True
            self._has_value = False
            self._value = None

    def send(self, value: T) -> None:
        with self._condition:
            if not self._pending:
                raise RuntimeError("No request is pending")
            if self._has_value:
                raise RuntimeError("The pending request already has a value")
            self._value = value
            self._has_value = True
            self._condition.notify()

    def receive(self, timeout: Optional[float] = None) -> Optional[T]:
        """Block until a value is sent; returns None if `timeout` seconds pass first.

        Either way the request is closed on return.
        """
        with self._condition:
            if not self._pending:
                raise RuntimeError("No request is pending")
            self._condition.wait_for(lambda: self._has_value, timeout=timeout)
            value = self._value if self._has_value else None
            self._pending = False
            self._has_value = False
            self._value = None
            return value


    def close(self) -> None:
        """Withdraw the open request without receiving. Only the opener may call this."""
        with self._condition:
            self._pending = False
            self._has_value = False
            self._value = None
