"""Encoding of fixed-length words as dense integers.

A word of length `L` over an alphabet of `R` letters is stored as the mixed-radix value
`sum(letter_i * R ** (L - 1 - i))`, so the first letter is the most significant digit.
Every valid encoded word lies in `[0, R ** L)`.  Equality, ordering and hashing are those
of the underlying integer.
"""

from typing import TypeAlias

from wordweave.config import config as weaver_config

EncodedWord: TypeAlias = int
"""A word encoded by `WordCodec.encode`."""


class InvalidWord(ValueError):
    """Raised when a string cannot be encoded as a word."""

    def __init__(self, word: str, reason: str) -> None:
        super().__init__(f"Invalid word {word!r}: {reason}")
        self.word = word
        """The offending input string."""
        self.reason = reason
        """Why the word was rejected."""


class WordCodec:
    """Encode, decode and compare words of a fixed length over a fixed alphabet."""

    def __init__(self, length: int = 4, alphabet: str = "abcdefghijklmnopqrstuvwxyz") -> None:
        if length <= 0:
            raise ValueError("Word length must be positive.")
        if len(alphabet) < 2:
            raise ValueError("Alphabet must contain at least two letters.")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("Alphabet contains repeated letters.")

        self.length: int = length
        """Number of letters in each word."""

        self.alphabet: str = alphabet
        """Letters in encoding order; letter value `i` is `alphabet[i]`."""

        self.radix: int = len(alphabet)
        """Number of distinct letters."""

        self.size: int = self.radix**length
        """Number of encodable words; all encoded values lie in `[0, size)`."""

        self._letter_values = {ch: i for i, ch in enumerate(alphabet)}
        # _powers[i] == radix ** i, for i in [0, length]
        self._powers = tuple(self.radix**i for i in range(length + 1))

    def __repr__(self) -> str:
        return f"WordCodec(length={self.length}, alphabet={self.alphabet!r})"

    def place_value(self, position: int) -> int:
        """Return the weight of the letter at `position` (0 is the most significant)."""
        self._check_position(position)
        return self._powers[self.length - 1 - position]

    def encode(self, s: str) -> EncodedWord:
        """Encode a word.

        Raises:
            InvalidWord: If `s` has the wrong length or contains a letter outside the alphabet.
        """
        if len(s) != self.length:
            raise InvalidWord(s, f"expected {self.length} letters, got {len(s)}")

        value = 0
        for ch in s:
            letter = self._letter_values.get(ch)
            if letter is None:
                raise InvalidWord(s, f"character {ch!r} is not in the alphabet")
            value = value * self.radix + letter
        return value

    def decode(self, word: EncodedWord) -> str:
        """Decode an encoded word back to its string form."""
        if not 0 <= word < self.size:
            raise ValueError(f"Encoded word {word} is outside [0, {self.size}).")
        letters = []
        for _ in range(self.length):
            word, letter = divmod(word, self.radix)
            letters.append(self.alphabet[letter])
        return "".join(reversed(letters))

    def letter_at(self, word: EncodedWord, position: int) -> int:
        """Return the letter value at `position` of an encoded word."""
        self._check_position(position)
        return (word % self._powers[self.length - position]) // self._powers[
            self.length - 1 - position
        ]

    def distance(self, a: EncodedWord, b: EncodedWord) -> int:
        """Return the number of positions at which two encoded words differ."""
        d = 0
        for _ in range(self.length):
            a, letter_a = divmod(a, self.radix)
            b, letter_b = divmod(b, self.radix)
            if letter_a != letter_b:
                d += 1
        return d

    def _check_position(self, position: int) -> None:
        if not 0 <= position < self.length:
            raise IndexError(f"Letter position {position} is outside [0, {self.length}).")


default_codec = WordCodec(weaver_config.word_length, weaver_config.alphabet)
"""Codec built from the configured word length and alphabet."""


def encode(s: str) -> EncodedWord:
    """Encode `s` with the default codec."""
    return default_codec.encode(s)


def decode(word: EncodedWord) -> str:
    """Decode `word` with the default codec."""
    return default_codec.decode(word)


def letter_at(word: EncodedWord, position: int) -> int:
    """Return the letter value at `position` using the default codec."""
    return default_codec.letter_at(word, position)


def distance(a: EncodedWord, b: EncodedWord) -> int:
    """Return the letter distance between two words using the default codec."""
    return default_codec.distance(a, b)
