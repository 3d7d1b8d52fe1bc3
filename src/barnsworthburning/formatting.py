from datetime import datetime
from typing import Sequence

from barnsworthburning.configuration import DEFAULT_MAX_RESULTS
from barnsworthburning.schemas import SearchResultItem

FAILURE_MESSAGE = "Failed to retrieve search results"
RESULT_SEPARATOR = "\n---\n\n"


def format_date(value: datetime) -> str:
    """Render a date the way an en-US locale short date looks (M/D/YYYY)."""
    return f"{value.month}/{value.day}/{value.year}"


def format_result_item(item: SearchResultItem) -> str:
    """
    Render one search result as a markdown block.

    Args:
        item: A validated search result.

    Returns:
        The display text for the result, sections in a fixed order.
    """
    content = f"## {item.title if item.title is not None else item.id}\n\n"

    if item.format:
        content += f"**Format:** {item.format}\n"
    # An empty creators list still prints the line; the lists below do not.
    if item.creators is not None:
        content += f"**By:** {', '.join(c.name for c in item.creators)}\n"
    if item.source:
        content += f"**Source:** {item.source}\n"
    content += f"**Created:** {format_date(item.extracted_on)}\n"
    content += f"**Updated:** {format_date(item.last_updated)}\n"

    if item.extract:
        content += f"\n{item.extract}\n"
    if item.notes:
        content += f"\n*Curator's Note:*\n\n{item.notes}\n"
    content += "\n"

    if item.parent is not None:
        content += f"**Parent Record:** {item.parent.name}\n"
    if item.children:
        children = "\n".join(f"- {c.name}" for c in item.children)
        content += f"**Child Records:**\n{children}\n\n"
    if item.connections:
        connections = "\n".join(f"- {c.name}" for c in item.connections)
        content += f"**See also:**\n{connections}\n\n"
    if item.spaces:
        content += f"**Tagged:** {', '.join(f'#{s.name}' for s in item.spaces)}\n"

    return content


def format_search_results(
    query: str,
    items: Sequence[SearchResultItem] | None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> str:
    """
    Build the text returned by the search tool.

    Args:
        query: The query as the user sent it.
        items: Results from the search client, or None if the search failed.
        max_results: How many results to render at most, in API order.

    Returns:
        The failure message, the empty-result message, or the formatted results.
    """
    if items is None:
        return FAILURE_MESSAGE
    if not items:
        return f'No results found for "{query}"'

    formatted = RESULT_SEPARATOR.join(
        format_result_item(item) for item in items[:max_results]
    )
    return f'Search results for "{query}":\n\n{formatted}'
