"""Decorators for MCP tool handlers.

``handle_errors`` turns exceptions raised while serving a tool call into the
JSON-RPC faults the MCP host expects, so handlers only deal with the happy
path and with "not found" results.
"""

import logging
from functools import wraps
from typing import Awaitable, Callable, ParamSpec, TypeVar

import httpx
from mcp.shared.exceptions import McpError
from mcp.types import ErrorData
from pydantic import ValidationError

from .constants import ErrorCode, ErrorMessage

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def fault(code: ErrorCode, message: str) -> McpError:
    """Build an :class:`McpError` carrying a JSON-RPC error code."""
    return McpError(ErrorData(code=int(code), message=message))


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic error into ``field: problem; ...``."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()) if part != "tool")
        problems.append(f"{location}: {item['msg']}" if location else item["msg"])
    return f"{ErrorMessage.INVALID_PARAMS}: " + "; ".join(problems)


def handle_errors(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
    """Map handler exceptions onto protocol faults.

    - ``McpError`` (including invalid cursors) passes through unchanged
    - pydantic ``ValidationError`` and other ``ValueError`` -> invalid params
    - ``httpx.HTTPError`` -> internal error
    - anything else -> internal error, logged with traceback
    """
    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except McpError as e:
            logger.warning(f"{func.__name__} rejected request: {e.error.message}")
            raise
        except ValidationError as e:
            message = describe_validation_error(e)
            logger.warning(f"Invalid parameters for {func.__name__}: {message}")
            raise fault(ErrorCode.INVALID_PARAMS, message) from e
        except ValueError as e:
            logger.warning(f"Invalid input in {func.__name__}: {e}")
            raise fault(ErrorCode.INVALID_PARAMS, f"{ErrorMessage.INVALID_PARAMS}: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Catalog request failed in {func.__name__}: {e}")
            raise fault(ErrorCode.INTERNAL_ERROR, f"{ErrorMessage.CATALOG_UNAVAILABLE}: {e}") from e
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            raise fault(ErrorCode.INTERNAL_ERROR, f"{ErrorMessage.UNEXPECTED_ERROR}: {e}") from e

    return wrapper
