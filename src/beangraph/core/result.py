"""
Load results.

Report loading hands back Ok(value) or Err(error) instead of raising, so
a session can reject a bad report and keep showing the previous graph.
The error carried by Err is always a BeanGraphError.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from .exceptions import BeanGraphError

T = TypeVar("T")
E = TypeVar("E", bound=BeanGraphError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """An accepted report, or the graph built from it."""
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A rejected report and the reason it was rejected."""
    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the rejection, for callers that want exceptions."""
        raise self.error


Result = Union[Ok[T], Err[E]]
