"""Profanity filter for chirp bodies."""

from collections.abc import Iterable

DEFAULT_BAD_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"
STRIP_CHARS = ".,!?"


class ProfanityFilter:
    """Mask blacklisted words in text.

    Text is split on single spaces, so runs of spaces survive the round trip.
    A token matches when, with leading/trailing ``.,!?`` removed and lower-cased,
    it equals a blacklisted word. The whole original token, punctuation
    included, is replaced by the mask:

    - "I had a kerfuffle" -> "I had a ****"
    - "Kerfuffle!" -> "****"
    - "Kerfuffles" -> "Kerfuffles" (no partial matches)
    """

    def __init__(self, bad_words: Iterable[str] = DEFAULT_BAD_WORDS, mask: str = MASK):
        self.bad_words = frozenset(word.lower() for word in bad_words)
        self.mask = mask

    def is_profane(self, token: str) -> bool:
        """Check whether a single token is a blacklisted word."""
        return token.strip(STRIP_CHARS).lower() in self.bad_words

    def sanitize(self, text: str) -> str:
        """Return text with every blacklisted token replaced by the mask."""
        return " ".join(
            self.mask if self.is_profane(token) else token for token in text.split(" ")
        )


_default_filter = ProfanityFilter()


def sanitize(text: str) -> str:
    """Sanitize text with the default blacklist."""
    return _default_filter.sanitize(text)
