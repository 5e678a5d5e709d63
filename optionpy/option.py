from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .option_e import OptionE

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")

_MISSING: Any = object()


class Option(Generic[T]):
    # Subclasses implement is_some and match; the rest goes through match
    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    @property
    def has_value(self) -> bool:
        return self.is_some()

    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        raise NotImplementedError

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        return self.match(lambda v: Some(f(v)), lambda: NONE)

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        return self.match(f, lambda: NONE)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self.match(lambda v: self if predicate(v) else NONE, lambda: NONE)

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        return self.match(lambda v: bool(predicate(v)), lambda: False)

    def contains(self, value: Any) -> bool:
        return self.match(lambda v: v == value, lambda: False)

    def value_or(self, default: U) -> T | U:
        return self.match(lambda v: v, lambda: default)

    def value_or_else(self, factory: Callable[[], U]) -> T | U:
        return self.match(lambda v: v, factory)

    # kept for callers used to the Scala-style name
    get_or_else = value_or

    def or_(self, alternative: T) -> "Option[T]":
        return self.match(lambda _: self, lambda: Some(alternative))

    def or_else(self, factory: Callable[[], T]) -> "Option[T]":
        return self.match(lambda _: self, lambda: Some(factory()))

    def else_(self, alternative: "Option[T]") -> "Option[T]":
        return self.match(lambda _: self, lambda: alternative)

    def with_exception(self, cause: E) -> "OptionE[T, E]":
        from .option_e import SomeE, NoneE
        return self.match(lambda v: SomeE(v), lambda: NoneE(cause))


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True

    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        return on_some(self.value)


class _None(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def is_some(self) -> bool: return False

    def match(self, on_some: Callable[[Any], R], on_none: Callable[[], R]) -> R:
        return on_none()

    # copy, deepcopy and pickle all hand back the singleton
    def __reduce__(self) -> str:
        return "NONE"


NONE: Option[Any] = _None()


def some(value: T) -> Option[T]:
    return Some(value)


def none(cause: Any = _MISSING) -> Any:
    """Build an absent container.

    ``none()`` returns the ``NONE`` singleton. ``none(cause)`` returns
    ``NoneE(cause)``; the cause is not inspected, so ``none(None)`` is an
    exceptional option whose cause is ``None``.
    """
    if cause is _MISSING:
        return NONE
    from .option_e import NoneE
    return NoneE(cause)


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE
