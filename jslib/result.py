"""Result type for flat error handling (like Rust's Result<T, E>)."""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from jslib.errors import Error

T = TypeVar("T")


@dataclass
class Ok(Generic[T]):
    """Success result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value


@dataclass
class Err:
    """Error result."""

    error: Error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the original library exception carried by the error."""
        raise self.error.inner


Result = Ok[T] | Err
