from __future__ import annotations
from typing import Any, Callable, Optional, TypeVar

from .config import ExceptionTypes, get_config, get_logger
from .errors import ArgumentError, require_callable, require_exception_type
from .option import _MISSING, NONE, Option, none, some
from .option_e import OptionE, some_e

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")


def _absent_cause(cause: Any, cause_factory: Any) -> Optional[Callable[[], Any]]:
    # None means "plain Option"; otherwise a thunk producing the NoneE cause
    if cause_factory is not _MISSING:
        if cause is not _MISSING:
            raise ArgumentError("cause_factory", "pass either cause or cause_factory, not both")
        require_callable("cause_factory", cause_factory)
        return cause_factory
    if cause is _MISSING:
        return None
    return lambda: cause


def some_when(value: T, predicate: Callable[[T], bool], cause: Any = _MISSING, *, cause_factory: Any = _MISSING) -> Any:
    """Wrap ``value`` when ``predicate(value)`` holds; a cause makes it an ``OptionE``."""
    require_callable("predicate", predicate)
    absent = _absent_cause(cause, cause_factory)
    if absent is None:
        return some(value) if predicate(value) else none()
    return some_e(value) if predicate(value) else none(absent())


def none_when(value: T, predicate: Callable[[T], bool], cause: Any = _MISSING, *, cause_factory: Any = _MISSING) -> Any:
    require_callable("predicate", predicate)
    return some_when(value, lambda v: not predicate(v), cause, cause_factory=cause_factory)


def some_not_null(value: Optional[T], cause: Any = _MISSING, *, cause_factory: Any = _MISSING) -> Any:
    return some_when(value, lambda v: v is not None, cause, cause_factory=cause_factory)


def to_option(nullable: Optional[T], cause: Any = _MISSING, *, cause_factory: Any = _MISSING) -> Any:
    """Convert an ``Optional[T]`` into an option; ``None`` becomes absent."""
    absent = _absent_cause(cause, cause_factory)
    if absent is None:
        return some(nullable) if nullable is not None else none()
    return some_e(nullable) if nullable is not None else none(absent())


def _log_capture(ex: BaseException, factory: Callable[[], Any]) -> None:
    logger = get_logger()
    if logger.is_enabled_for("DEBUG"):
        logger.debug(
            "captured exception",
            exc_type=type(ex).__name__,
            factory=getattr(factory, "__qualname__", repr(factory)),
        )


def _capture_types(exc_type: Any) -> ExceptionTypes:
    if exc_type is _MISSING:
        return get_config().capture
    require_exception_type("exc_type", exc_type)
    return exc_type


def some_or_exception(factory: Callable[[], T], exc_type: Any = _MISSING) -> OptionE[T, BaseException]:
    """Run ``factory`` once, turning an ``exc_type`` exception into ``NoneE``."""
    require_callable("factory", factory)
    types = _capture_types(exc_type)
    try:
        value = factory()
    except types as ex:
        _log_capture(ex, factory)
        return none(ex)
    return some_e(value)


def some_not_null_or_exception(factory: Callable[[], Optional[T]], exc_type: Any = _MISSING) -> OptionE[T, Option[BaseException]]:
    # cause is NONE for a None result, Some(exc) for a captured exception
    require_callable("factory", factory)
    types = _capture_types(exc_type)
    try:
        value = factory()
    except types as ex:
        _log_capture(ex, factory)
        return none(some(ex))
    return some_not_null(value, NONE)


def flatten(nested: Any) -> Any:
    # an absent outer layer keeps its cause, otherwise the inner one wins
    return nested.flat_map(lambda inner: inner)


def value_or_exception(option: OptionE[T, T]) -> T:
    return option.match(lambda v: v, lambda c: c)


def match_cause(
    option: OptionE[T, Option[E]],
    on_some: Callable[[T], R],
    on_cause: Callable[[E], R],
    on_none: Callable[[], R],
) -> R:
    return option.match(on_some, lambda cause: cause.match(on_cause, on_none))


def match(option: Any, on_some: Callable[..., R], on_none: Callable[..., R], on_none_without_cause: Any = _MISSING) -> R:
    """Free-function ``match``; a third handler dispatches on ``OptionE[T, Option[E]]``."""
    if on_none_without_cause is _MISSING:
        return option.match(on_some, on_none)
    return match_cause(option, on_some, on_none, on_none_without_cause)


def map(option: Any, f: Callable[[T], U]) -> Any:
    return option.map(f)


def flat_map(option: Any, f: Callable[[T], Any]) -> Any:
    return option.flat_map(f)
