import json

from mcp.server.fastmcp import FastMCP

from core.cache import AgedCache


def register_resources(mcp: FastMCP, *, cache: AgedCache) -> None:
    """
    Register cache status resources for the MCP server.
    """

    @mcp.resource(
        "cache://status",
        mime_type="application/json",
        description="Live entry count of the aged cache"
    )
    def cache_status() -> str:
        size = cache.size()
        return json.dumps({"size": size, "is_empty": size == 0})
