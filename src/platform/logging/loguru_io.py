from functools import wraps
from inspect import iscoroutinefunction
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import ExtraField, custom_logger
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    enter_call,
    get_chain_start_time,
    leave_call,
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])

# Frames between the log call and the decorated function's caller
_CALLER_DEPTH = 2


class LoguruIO:
    """
    Logs a call's inputs and output at DEBUG and its failure once at ERROR.

    Arguments named in SENSITIVE_KEYWORDS are masked before formatting. An exception is
    marked after its first log line so outer decorated frames do not repeat it.
    """

    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content

    def _bind(self, call_target: str) -> 'LoguruLogger':
        return self._custom_logger.bind(
            **{
                ExtraField.CALL_TARGET: call_target,
                ExtraField.CHAIN_START_TIME: get_chain_start_time(),
            }
        )

    def _open(self, bound: 'LoguruLogger', args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if settings.DEBUG:
            bound.opt(depth=_CALLER_DEPTH).debug(
                f'args: {self.scrub(args)}, kwargs: {self.scrub(kwargs)}'
            )

    def _close(self, bound: 'LoguruLogger', return_value: Any) -> Any:
        if settings.DEBUG:
            bound.opt(depth=_CALLER_DEPTH).debug(f'return: {self.scrub(return_value)}')
        return return_value

    def _fail(self, bound: 'LoguruLogger', e: Exception) -> None:
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        located = bound.opt(depth=_CALLER_DEPTH)
        if isinstance(e, CustomBaseError):
            # Domain outcomes; the handler turns them into 4xx/503 responses
            located.error(f'{type(e).__name__}: {e}')
        else:
            located.exception(f'{type(e).__name__}: {e}')

    def scrub(self, data: Any) -> Any:
        if isinstance(data, dict):
            cleaned: Any = {
                key: self.scrub(should_mask_keyword(key, value)) for key, value in data.items()
            }
        elif type(data) in (list, tuple):
            # NamedTuples and other subclasses fall through to the string masking below
            cleaned = type(data)(self.scrub(item) for item in data)
        else:
            cleaned = mask_sensitive(data)
        return truncate_content(cleaned) if self.truncate_content else cleaned

    def __call__(self, func: _F) -> _F:
        call_target = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                enter_call()
                bound = self._bind(call_target)
                try:
                    self._open(bound, args, kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    return self._close(bound, await func(*args, **kwargs))
                except Exception as e:
                    self._fail(bound, e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    leave_call()

            return cast(_F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            enter_call()
            bound = self._bind(call_target)
            try:
                self._open(bound, args, kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return self._close(bound, func(*args, **kwargs))
            except Exception as e:
                self._fail(bound, e)
                if self.reraise:
                    raise
                return None
            finally:
                leave_call()

        return cast(_F, sync_wrapper)


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return decorator(func) if func else decorator
