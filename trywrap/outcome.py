from dataclasses import dataclass
from typing import TypeGuard
from typing import cast

# A value, or the exception raised while producing it.
type Outcome[T, E: BaseException = Exception] = T | E


def is_failure(value: object) -> TypeGuard[BaseException]:
    """Whether the value is an exception instance.

    This is a nominal check. Objects that merely look like exceptions,
    and exception classes themselves, are not failures.
    """
    return isinstance(value, BaseException)


@dataclass(frozen=True)
class Ok[T]:
    value: T


@dataclass(frozen=True)
class Err[E: BaseException]:
    error: E


type Result[T, E: BaseException = Exception] = Ok[T] | Err[E]


def tag[T, E: BaseException](outcome: Outcome[T, E], /) -> Result[T, E]:
    """Make the variant of an outcome explicit.

    Any exception instance becomes an ``Err``, even one that was produced
    as an ordinary value rather than raised.
    """
    if is_failure(outcome):
        return Err(cast(E, outcome))
    return Ok(cast(T, outcome))


def untag[T, E: BaseException](result: Result[T, E], /) -> Outcome[T, E]:
    match result:
        case Ok(value=value):
            return value
        case Err(error=error):
            return error
        case _:
            raise TypeError(f"Expected Ok or Err, got: {result!r}")
