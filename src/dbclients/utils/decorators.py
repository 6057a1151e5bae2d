import asyncio
import functools
import inspect
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

from opentelemetry.trace import SpanKind, Status, StatusCode

from dbclients.telemetry import get_tracer
from dbclients.types.result import is_failure


F = TypeVar('F', bound=Callable[..., Any])
T = TypeVar('T')

logger = None


def _get_logger():
    """Get logger instance lazily."""
    global logger
    if logger is None:
        from dbclients.logging import get_logger
        logger = get_logger(__name__)
    return logger


def traced(
    span_name: Optional[str] = None,
    *,
    kind: SpanKind = SpanKind.INTERNAL,
    attributes: Optional[Dict[str, Any]] = None,
) -> Callable[[F], F]:
    """Instrument an async stage with an OpenTelemetry span.

    When the wrapped coroutine returns a Result, the variant is recorded
    as the ``dbclients.result`` attribute and a failure marks the span
    status as ERROR.

    Args:
        span_name: Optional explicit span name. Defaults to module-qualified function name.
        kind: Span kind, defaults to INTERNAL.
        attributes: Static span attributes to attach.
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"traced() requires a coroutine function, got {func.__qualname__}")

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            tracer = get_tracer(func.__module__)
            name = span_name or f"{func.__module__}.{func.__qualname__}"

            with tracer.start_as_current_span(name, kind=kind) as span:
                for key, value in (attributes or {}).items():
                    if value is not None:
                        span.set_attribute(key, value)

                try:
                    result = await func(*args, **kwargs)
                except Exception as exc:
                    span.record_exception(exc)
                    span.set_status(Status(StatusCode.ERROR, str(exc)))
                    raise

                if is_failure(result):
                    span.set_attribute("dbclients.result", "failure")
                    span.set_attribute("dbclients.failure_count", len(result.messages))
                    span.set_status(Status(StatusCode.ERROR, "; ".join(result.messages)))
                else:
                    span.set_attribute("dbclients.result", "success")

                return result

        return async_wrapper  # type: ignore[return-value]

    return decorator


async def with_timeout(
    awaitable: Awaitable[T],
    timeout_seconds: Optional[float],
    *,
    operation: str,
) -> T:
    """Await ``awaitable``, bounding it by ``timeout_seconds`` when set.

    Args:
        awaitable: The operation to await
        timeout_seconds: Time budget in seconds; None disables the bound
        operation: Human-readable operation name used in the timeout message

    Returns:
        The awaited value

    Raises:
        ClientInitError: With TIMEOUT_ERROR code when the budget is exceeded
    """
    if timeout_seconds is None:
        return await awaitable

    from dbclients.common.exceptions import timeout_error

    try:
        return await asyncio.wait_for(awaitable, timeout=timeout_seconds)
    except asyncio.TimeoutError as e:
        _get_logger().debug("%s exceeded %s seconds", operation, timeout_seconds)
        raise timeout_error(operation, timeout_seconds, cause=e) from e
