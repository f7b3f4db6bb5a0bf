"""Logfire tracing for Open Library tool calls."""

import functools
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

import logfire

from .config import ServerConfig, get_config

logger = logging.getLogger(__name__)


def initialize_observability(config: ServerConfig | None = None) -> bool:
    """Configure logfire when tracing is enabled.

    Spans are only exported when a logfire token is present in the
    environment; otherwise they stay local.
    """
    config = config or get_config()
    if not config.enable_tracing:
        logger.debug("Tracing disabled via configuration")
        return False

    logfire.configure(
        service_name=config.server_name,
        service_version=config.server_version,
        send_to_logfire="if-token-present",
        console=False,
    )
    logger.info("Logfire tracing enabled")
    return True


def trace_tool(tool_name: str):
    """Decorator to trace MCP tool execution."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            with logfire.span(f"tool.execution.{tool_name}", tool_name=tool_name) as span:
                start_time = datetime.now()
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_attribute("tool.success", False)
                    span.set_attribute("tool.error", str(e))
                    raise

                span.set_attribute("tool.success", not _is_error_payload(result))
                span.set_attribute(
                    "tool.duration_ms", (datetime.now() - start_time).total_seconds() * 1000
                )
                return result

        return wrapper

    return decorator


def _is_error_payload(result: Any) -> bool:
    return isinstance(result, dict) and result.get("isError") is True
