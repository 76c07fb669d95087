from collections.abc import Callable
from inspect import isawaitable
from typing import Any
from typing import Protocol
from typing import Self
from typing import runtime_checkable


@runtime_checkable
class Deferred[T](Protocol):
    """A computation that settles later and reports through a callback.

    This is the shape of ``concurrent.futures.Future``, but any object with
    the same two methods qualifies. The callback is called once, with the
    settled deferred, after which ``result`` either returns the value or
    raises the failure.
    """

    def add_done_callback(self, fn: Callable[[Self], Any], /) -> Any: ...

    def result(self) -> T: ...


def is_awaitable(value: object) -> bool:
    return isawaitable(value)


def is_future(value: object) -> bool:
    # A class carries its instances' methods, but is not itself deferred.
    return not isinstance(value, type) and isinstance(value, Deferred)


def is_deferred(value: object) -> bool:
    """Whether the value settles later instead of being a plain value."""
    return is_awaitable(value) or is_future(value)
