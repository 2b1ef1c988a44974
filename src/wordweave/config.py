"""Word Weaver configuration."""

from dotenv import find_dotenv
from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class WeaverConfig(BaseSettings):
    """Configuration settings for the word ladder search."""

    word_length: int = 4
    """Number of letters in every word. Default: 4."""

    alphabet: str = "abcdefghijklmnopqrstuvwxyz"
    """Letters a word may contain, in encoding order. Default: lowercase a-z."""

    word_list_path: str | None = None
    """Dictionary file to load. If None (default), uses the bundled word list."""

    max_expansions: int | None = None
    """Maximum number of frontier expansions per search. If None (default), no limit."""

    max_table_entries: int = 50_000_000
    """Largest lookup table the graph builder may allocate (len(alphabet) ** word_length).

    The table grows exponentially with the word length.  Default: 50,000,000.
    """

    report_interval: PositiveInt = 10_000
    """Interval (in expanded nodes) at which to report search progress. Default: 10,000."""

    verbose: bool = False
    """Whether to print search progress updates. Default: False."""

    model_config = SettingsConfigDict(
        env_prefix="WORDWEAVE_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = WeaverConfig()
