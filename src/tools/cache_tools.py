"""MCP tools that read and write the server's aged cache.

Registers 'cache_put', 'cache_get', 'cache_size' and 'cache_is_empty'.
All of them go through the same AgedCache instance, so every call also
purges entries whose retention has elapsed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from config import DEFAULT_RETENTION_MILLIS
from core.cache import AgedCache
from core.errors import ValidationError

logger = logging.getLogger(__name__)

_MISSING = object()


def register(
    mcp: FastMCP,
    *,
    cache: AgedCache,
    default_retention_millis: int = DEFAULT_RETENTION_MILLIS,
) -> None:
    @mcp.tool(name="cache_put")
    async def cache_put(
        key: str = "",
        value: Any = None,
        retention_millis: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Store a value under a key for a limited time.

        Parameters:
          - key: non-empty cache key (required).
          - value: any JSON value. null is stored as a real value.
          - retention_millis: how long the entry stays visible, in
            milliseconds. Defaults to the server's configured retention.
            Putting an existing key restarts its window from now.

        Returns:
          {"key", "retention_millis", "size"} where size is the number of
          live entries after the put.

        Raises:
          ValidationError for a blank key or a negative retention.
        """
        if not key or not key.strip():
            raise ValidationError("Missing cache key")

        retention = default_retention_millis if retention_millis is None else retention_millis
        cache.put(key, value, retention)
        logger.debug("cache_put key=%s retention_millis=%s", key, retention)

        return {"key": key, "retention_millis": retention, "size": cache.size()}

    @mcp.tool(name="cache_get")
    async def cache_get(key: str = "") -> Dict[str, Any]:
        """Look up a key.

        Returns {"key", "present", "value"}. A key that was never stored and
        one that has expired both come back with present=false, value=null.
        """
        if not key or not key.strip():
            raise ValidationError("Missing cache key")

        value = cache.get(key, _MISSING)
        if value is _MISSING:
            return {"key": key, "present": False, "value": None}
        return {"key": key, "present": True, "value": value}

    @mcp.tool(name="cache_size")
    async def cache_size() -> int:
        """Number of live (non-expired) entries."""
        return cache.size()

    @mcp.tool(name="cache_is_empty")
    async def cache_is_empty() -> bool:
        """True when no live entries remain."""
        return cache.is_empty()
