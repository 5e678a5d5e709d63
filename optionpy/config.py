from __future__ import annotations
import contextvars
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterator, Tuple, Type, Union

from .errors import ArgumentError, require_exception_type
from .logger import ConsoleLogger, _LEVELS

ExceptionTypes = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


@dataclass(frozen=True)
class OptionConfig:
    # capture: exception type(s) used when some_or_exception gets no exc_type
    log_level: str = "INFO"
    json_logs: bool = False
    capture: ExceptionTypes = Exception


# Inherited by child tasks and copied contexts, like any ContextVar
_config: contextvars.ContextVar[OptionConfig] = contextvars.ContextVar(
    "optionpy_config", default=OptionConfig()
)


def _updated(changes: Dict[str, Any]) -> OptionConfig:
    unknown = sorted(set(changes) - {f.name for f in fields(OptionConfig)})
    if unknown:
        raise ArgumentError(unknown[0], f"unknown config option {unknown[0]!r}")
    cfg = replace(_config.get(), **changes)
    if not isinstance(cfg.log_level, str):
        raise ArgumentError("log_level", f"log_level must be a str, got {type(cfg.log_level).__name__}")
    if cfg.log_level.upper() not in _LEVELS:
        raise ArgumentError("log_level", f"unknown log level {cfg.log_level!r}")
    require_exception_type("capture", cfg.capture)
    return cfg


def get_config() -> OptionConfig:
    return _config.get()


def configure(**changes: Any) -> OptionConfig:
    cfg = _updated(changes)
    _config.set(cfg)
    return cfg


@contextmanager
def use_config(**changes: Any) -> Iterator[OptionConfig]:
    cfg = _updated(changes)
    token = _config.set(cfg)
    try:
        yield cfg
    finally:
        _config.reset(token)


def get_logger() -> ConsoleLogger:
    cfg = _config.get()
    return ConsoleLogger(level=cfg.log_level, json_output=cfg.json_logs)
