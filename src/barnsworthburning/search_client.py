import logging
from typing import List

import httpx
from pydantic import ValidationError

from barnsworthburning.configuration import DEFAULT_API_BASE, DEFAULT_USER_AGENT
from barnsworthburning.schemas import SearchResultItem, SearchResults

logger = logging.getLogger(__name__)


class SearchClient:
    """Fetches and validates results from the barnsworthburning.net search API."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
        self.transport = transport

    async def search(self, query: str) -> List[SearchResultItem] | None:
        """
        Run one search against the API.

        Args:
            query: The free-text search query. It is sent as the ``q`` parameter.

        Returns:
            The validated results, or None if the request, decoding or
            validation failed for any reason.
        """
        async with httpx.AsyncClient(
            transport=self.transport, timeout=None, follow_redirects=True
        ) as client:
            try:
                logger.info(f"Making search request with query: {query}")
                resp = await client.get(self.base_url, params={"q": query}, headers=self.headers)
                resp.raise_for_status()
                parsed = SearchResults.model_validate(resp.json())
                return parsed.results
            except httpx.HTTPStatusError as e:
                logger.error(f"HTTP error occurred: {e.response.status_code} - {e.response.text}")
                return None
            except httpx.HTTPError as e:
                logger.error(f"Request error occurred: {str(e)}")
                return None
            except ValidationError as e:
                logger.error(f"Search response failed validation: {e}")
                return None
            except ValueError as e:
                logger.error(f"Search response is not valid JSON: {str(e)}")
                return None
            except Exception as e:
                logger.error(f"Unexpected error: {str(e)}")
                return None
