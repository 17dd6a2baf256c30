"""Catalog context binding for structured logging.

Binds the catalog being parsed to every log entry emitted while that parse
runs, so the decode pass and the comment scan pass of one file can be
correlated.

Usage:
    from infrastructure.logging import bind_catalog_context

    with bind_catalog_context(path="Localizable.strings"):
        logger.info("catalog_decoded")

Dependencies:
    - structlog.contextvars
"""

from contextlib import contextmanager
from os import PathLike
from typing import Any, Generator, Optional, Union

import structlog


@contextmanager
def bind_catalog_context(
    path: Union[str, PathLike],
    table: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind catalog-scoped context to all logs within the context manager.

    Args:
        path: Filesystem path of the catalog being parsed.
        table: Table name of the catalog (defaults to the file stem).
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars for the block.
    """
    context: dict[str, Any] = {"catalog_path": str(path)}
    if table is not None:
        context["catalog_table"] = table
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
