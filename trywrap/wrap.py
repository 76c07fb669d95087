import logging
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Coroutine
from concurrent.futures import Future
from typing import Any
from typing import cast
from typing import overload

from .deferred import Deferred
from .deferred import is_awaitable
from .deferred import is_deferred
from .outcome import Outcome

logger = logging.getLogger(__name__)

type Settling[T] = Coroutine[Any, Any, Outcome[T]]


def captured[E: Exception](exception: E) -> E:
    logger.debug("Captured %s: %s", type(exception).__qualname__, exception)
    return exception


async def settle_awaitable[T](awaitable: Awaitable[T]) -> Outcome[T]:
    try:
        return await awaitable
    except Exception as exception:
        return captured(exception)


def settle_future[T](deferred: Deferred[T]) -> Future[Outcome[T]]:
    settled = Future[Outcome[T]]()
    # Nothing can abort the deferred, so the outcome cannot be cancelled either.
    settled.set_running_or_notify_cancel()

    def on_done(done: Deferred[T]):
        try:
            value = done.result()
        except Exception as exception:
            settled.set_result(captured(exception))
        except BaseException as exception:
            settled.set_exception(exception)
        else:
            settled.set_result(value)

    deferred.add_done_callback(on_done)
    return settled


def settle(deferred: Awaitable[Any] | Deferred[Any]) -> Settling[Any] | Future[Any]:
    if is_awaitable(deferred):
        return settle_awaitable(cast(Awaitable[Any], deferred))
    return settle_future(cast(Deferred[Any], deferred))


@overload
def try_wrap[T](deferred: Awaitable[T], /) -> Settling[T]: ...
@overload
def try_wrap[T](deferred: Deferred[T], /) -> Future[Outcome[T]]: ...
@overload
def try_wrap[T](block: Callable[[], Awaitable[T]], /) -> Settling[T]: ...
@overload
def try_wrap[T](block: Callable[[], Deferred[T]], /) -> Future[Outcome[T]]: ...
@overload
def try_wrap[T](block: Callable[[], T], /) -> Outcome[T]: ...


def try_wrap(source: Any, /) -> Any:
    """Run some work and return its exception instead of raising it.

    The source is either a deferred computation or a function taking no
    arguments. Functions are called immediately. If the function raises,
    the exception is returned. If it returns a deferred computation, that
    is settled like one passed in directly. Otherwise its value is returned.

    Deferred computations are settled without ever failing:

    - Awaitables give a coroutine that returns the value or the exception.
    - Futures give a new ``concurrent.futures.Future`` whose result is the
      value or the exception.

    Only ``Exception`` subclasses are captured. Signals like
    ``KeyboardInterrupt`` and ``asyncio.CancelledError`` propagate.
    An exception returned as an ordinary value is indistinguishable from
    one that was raised.
    """
    if is_deferred(source):
        return settle(source)

    try:
        value = source()
    except Exception as exception:
        return captured(exception)

    if is_deferred(value):
        return settle(value)
    return value
