from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .option import NONE, Option, Some

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")


class OptionE(Generic[T, E]):
    """An option whose absent state carries a cause of type ``E``."""
    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    @property
    def has_value(self) -> bool:
        return self.is_some()

    def match(self, on_some: Callable[[T], R], on_none: Callable[[E], R]) -> R:
        raise NotImplementedError

    def map(self, f: Callable[[T], U]) -> "OptionE[U, E]":
        return self.match(lambda v: SomeE(f(v)), lambda _: self)  # type: ignore[arg-type,return-value]

    def flat_map(self, f: Callable[[T], "OptionE[U, E]"]) -> "OptionE[U, E]":
        return self.match(f, lambda _: self)  # type: ignore[arg-type,return-value]

    def map_exception(self, f: Callable[[E], F]) -> "OptionE[T, F]":
        return self.match(lambda _: self, lambda c: NoneE(f(c)))  # type: ignore[arg-type,return-value]

    def filter(self, predicate: Callable[[T], bool], cause: E) -> "OptionE[T, E]":
        return self.match(lambda v: self if predicate(v) else NoneE(cause), lambda _: self)

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        return self.match(lambda v: bool(predicate(v)), lambda _: False)

    def contains(self, value: Any) -> bool:
        return self.match(lambda v: v == value, lambda _: False)

    def value_or(self, default: U) -> T | U:
        return self.match(lambda v: v, lambda _: default)

    def value_or_else(self, factory: Callable[[E], U]) -> T | U:
        return self.match(lambda v: v, factory)

    def cause_or(self, default: U) -> E | U:
        return self.match(lambda _: default, lambda c: c)

    def or_(self, alternative: T) -> "OptionE[T, E]":
        return self.match(lambda _: self, lambda _c: SomeE(alternative))

    def or_else(self, factory: Callable[[E], T]) -> "OptionE[T, E]":
        return self.match(lambda _: self, lambda c: SomeE(factory(c)))

    def else_(self, alternative: "OptionE[T, E]") -> "OptionE[T, E]":
        return self.match(lambda _: self, lambda _c: alternative)

    def without_exception(self) -> Option[T]:
        return self.match(lambda v: Some(v), lambda _: NONE)


@dataclass(frozen=True)
class SomeE(OptionE[T, E]):
    value: T
    def is_some(self) -> bool: return True

    def match(self, on_some: Callable[[T], R], on_none: Callable[[E], R]) -> R:
        return on_some(self.value)


@dataclass(frozen=True)
class NoneE(OptionE[T, E]):
    cause: E
    def is_some(self) -> bool: return False

    def match(self, on_some: Callable[[T], R], on_none: Callable[[E], R]) -> R:
        return on_none(self.cause)


def some_e(value: T) -> OptionE[T, Any]:
    return SomeE(value)
