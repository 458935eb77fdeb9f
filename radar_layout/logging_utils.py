from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 6
_repr.maxtuple = 6
_repr.maxdict = 6
_repr.maxstring = 60


def _summarize_array(value: np.ndarray) -> str:
    parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
    if value.size and np.issubdtype(value.dtype, np.number):
        parts.append(f"min={float(value.min()):.6g}")
        parts.append(f"max={float(value.max()):.6g}")
    return ", ".join(parts)


def _summarize_entry(value: Any) -> Optional[str]:
    label = getattr(value, "label", None)
    if not isinstance(label, str) or not hasattr(value, "quadrant"):
        return None
    ident = getattr(value, "id", None)
    return f"<entry id={ident} {label!r} q={value.quadrant} r={value.ring} at ({value.x:.2f}, {value.y:.2f})>"


def _safe_repr(value: Any, *, max_items: int = 4) -> str:
    if isinstance(value, np.ndarray):
        return _summarize_array(value)

    entry = _summarize_entry(value)
    if entry is not None:
        return entry

    if isinstance(value, (list, tuple)):
        if len(value) > max_items:
            head = ", ".join(_safe_repr(item) for item in value[:max_items])
            return f"[{head}, ... ({len(value)} items)]"
        return "[" + ", ".join(_safe_repr(item) for item in value) + "]"

    try:
        return _repr.repr(value)
    except Exception as exc:  # pragma: no cover - repr of foreign objects
        return f"<repr-error {exc!r}>"


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_safe_repr(arg) for arg in args]
    parts.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG traces on entry and exit of a callable."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            result = func(*args, **kwargs)
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _wrap_class_methods(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr_name, attr_value in list(cls.__dict__.items()):
        if attr_name.startswith("__"):
            continue
        qualified = f"{cls.__name__}.{attr_name}"
        if attr_name in skip or qualified in skip:
            continue
        if inspect.isfunction(attr_value) and attr_value.__module__ == cls.__module__:
            setattr(cls, attr_name, debug_log_call(logger, name=qualified)(attr_value))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
    wrap_methods: bool = True,
) -> None:
    """Wrap the public callables of a module namespace with DEBUG call tracing."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif wrap_methods and inspect.isclass(value) and value.__module__ == module_name:
            _wrap_class_methods(value, logger, skip_set)


__all__ = ["apply_debug_logging", "debug_log_call"]
