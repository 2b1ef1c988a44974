"""Module for loading and validating the dictionary of candidate words."""

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from wordweave.codec import EncodedWord, InvalidWord, WordCodec, default_codec
from wordweave.config import config as weaver_config

DEFAULT_WORD_LIST = Path(__file__).parent / "data" / "words.txt"
"""The word list bundled with the package."""


class InvalidWordList(ValueError):
    """Raised when one or more dictionary entries cannot be encoded.

    Every bad entry is reported, not just the first one.
    """

    def __init__(self, errors: list[InvalidWord]) -> None:
        lines = "\n".join(f"  {e}" for e in errors)
        super().__init__(f"{len(errors)} invalid word(s) in word list:\n{lines}")
        self.errors = errors
        """One `InvalidWord` per rejected entry, in input order."""


def load_word_list(path: str | PathLike | None = None) -> list[str]:
    """Load whitespace-separated words from a file.

    Args:
        path: The file to read.  If None, uses the configured `word_list_path`, falling back
            to the bundled word list.

    Returns:
        The words in file order.  No validation is done here; see `encode_words`.
    """
    if path is None:
        path = weaver_config.word_list_path or DEFAULT_WORD_LIST
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        return f.read().split()


def encode_words(words: Iterable[str], codec: WordCodec | None = None) -> list[EncodedWord]:
    """Encode every word, collecting all failures.

    Raises:
        InvalidWordList: If any word is malformed.  Nothing is returned in that case.
    """
    codec = codec or default_codec
    encoded: list[EncodedWord] = []
    errors: list[InvalidWord] = []
    for word in words:
        try:
            encoded.append(codec.encode(word))
        except InvalidWord as e:
            errors.append(e)
    if errors:
        raise InvalidWordList(errors)
    return encoded
