import logging
import sys

from mcp.server.fastmcp import FastMCP

from barnsworthburning.configuration import Configuration
from barnsworthburning.formatting import format_search_results
from barnsworthburning.schemas import SearchQuery
from barnsworthburning.search_client import SearchClient

logger = logging.getLogger(__name__)

SERVER_NAME = "barnsworthburning-search"
SEARCH_TOOL_DESCRIPTION = "Search barnsworthburning.net for the given query"


def build_server(
    config: Configuration | None = None,
    client: SearchClient | None = None,
) -> FastMCP:
    """Construct the MCP server with its single ``search`` tool."""
    config = config or Configuration()
    client = client or SearchClient(config.api_base, config.user_agent)
    max_results = config.max_results

    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="search", description=SEARCH_TOOL_DESCRIPTION)
    async def search(query: SearchQuery) -> str:
        """
        Search barnsworthburning.net.

        Args:
            query: The search query, at least 2 characters.

        Returns:
            Markdown text with up to the configured number of results.
        """
        items = await client.search(query)
        return format_search_results(query, items, max_results)

    return mcp


def main() -> None:
    try:
        config = Configuration()
        logging.basicConfig(
            level=config.log_level, format="%(asctime)s - %(levelname)s - %(message)s"
        )
        mcp = build_server(config)
        logger.info("Barnsworthburning Search MCP Server running on stdio")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
