"""Server bootstrap for the aged cache MCP service.

Creates the FastMCP instance and the process-wide cache, registers tools
and resources, and starts the MCP server (stdio transport).
"""

from mcp.server.fastmcp import FastMCP

from config import DEFAULT_RETENTION_MILLIS, LOG_LEVEL
from core.cache import AgedCache
from core.log import get_logger, setup_logging

from tools.cache_tools import register as register_cache_tools

from resources.cache_status import register_resources

logger = get_logger(__name__)

mcp = FastMCP("aged-cache-mcp")

cache = AgedCache()


def register_all() -> None:
    register_cache_tools(mcp, cache=cache, default_retention_millis=DEFAULT_RETENTION_MILLIS)
    register_resources(mcp, cache=cache)


register_all()


def main() -> None:
    setup_logging(LOG_LEVEL)
    logger.info("Starting aged-cache-mcp (default retention %d ms)", DEFAULT_RETENTION_MILLIS)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
