from inspect import getfile, getfullargspec, getsourcelines, unwrap
from os.path import basename
from re import IGNORECASE, compile
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'

# Matches "password='x'", "salt=b'...'" and similar fragments in reprs
_SENSITIVE_PATTERN = compile(
    rf"({'|'.join(sorted(SENSITIVE_KEYWORDS))})=(b?'[^']*'|\"[^\"]*\"|[^,)\s]+)",
    IGNORECASE,
)


def get_chain_start_time() -> float:
    """Start time of the outermost decorated call in the current context"""
    start_time = chain_start_time_var.get()
    if not start_time:
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def enter_call() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def leave_call() -> None:
    depth = call_depth_var.get() - 1
    call_depth_var.set(depth)
    if depth <= 0:
        chain_start_time_var.set(0)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    return f'{basename(getfile(target))}::{func.__qualname__}:{getsourcelines(target)[1]}'


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[str, Any]]:
    """
    Drop arguments the undecorated function cannot accept.

    dependency-injector and FastAPI may hand a wrapper more than the wrapped
    signature declares; anything beyond it is discarded instead of raising.
    """
    spec = getfullargspec(unwrap(func))

    if not spec.varkw:
        accepted = {*spec.args, *spec.kwonlyargs}
        kwargs = {name: value for name, value in kwargs.items() if name in accepted}

    if not spec.varargs:
        positional_slots = [name for name in spec.args if name not in kwargs]
        args = args[: len(positional_slots)]

    return args, kwargs


def mask_sensitive(data: Any) -> Any:
    text = str(data)
    masked = _SENSITIVE_PATTERN.sub(rf"\1='{MASK}'", text)
    return data if masked == text else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any, max_length: int = 500) -> Any:
    if isinstance(data, str) and len(data) > max_length:
        return f'{data[:max_length]}... (truncated {len(data) - max_length} chars)'
    return data
