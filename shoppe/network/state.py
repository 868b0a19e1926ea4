"""
Load state of a single remote call, for consumers that render it.

``capture`` awaits one call and folds its outcome into ``Success`` or
``Failure``. Only ``NetworkFailure`` is folded; cancellation and
programming errors propagate.
"""

from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

from ..exceptions import NetworkFailure

T = TypeVar("T")


@dataclass(frozen=True)
class Idle:
    """No call has been made yet."""


@dataclass(frozen=True)
class Loading:
    """A call is in flight."""


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T


@dataclass(frozen=True)
class Failure:
    error: NetworkFailure

    @property
    def message(self) -> str:
        return self.error.message


NetworkState = Union[Idle, Loading, Success[T], Failure]


async def capture(call: Awaitable[T]) -> Union[Success[T], Failure]:
    """
    Await one repository call and wrap its outcome.

    Args:
        call: Awaitable returned by a repository method

    Returns:
        Success holding the value, or Failure holding the error
    """
    try:
        return Success(await call)
    except NetworkFailure as error:
        return Failure(error)
