import os

from dotenv import load_dotenv

DEFAULT_API_BASE = "https://barnsworthburning.net/api/search"
DEFAULT_USER_AGENT = "barnsworthburning-mcp/1.0"
DEFAULT_MAX_RESULTS = 25


class Configuration:
    """Manages configuration and environment variables for the search server."""

    def __init__(self) -> None:
        """Initialize configuration with environment variables."""
        self.load_env()
        self.api_base = os.getenv("BARNSWORTHBURNING_API_BASE", DEFAULT_API_BASE)
        self.user_agent = os.getenv("BARNSWORTHBURNING_USER_AGENT", DEFAULT_USER_AGENT)
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self._max_results = os.getenv("BARNSWORTHBURNING_MAX_RESULTS")

    @staticmethod
    def load_env() -> None:
        """Load environment variables from .env file."""
        load_dotenv()

    @property
    def max_results(self) -> int:
        """Get the maximum number of results rendered per query.

        Returns:
            The cap as a positive integer.

        Raises:
            ValueError: If BARNSWORTHBURNING_MAX_RESULTS is not a positive integer.
        """
        if self._max_results is None:
            return DEFAULT_MAX_RESULTS
        try:
            value = int(self._max_results)
        except ValueError:
            raise ValueError(
                f"BARNSWORTHBURNING_MAX_RESULTS must be an integer, got {self._max_results!r}"
            )
        if value < 1:
            raise ValueError("BARNSWORTHBURNING_MAX_RESULTS must be at least 1")
        return value
