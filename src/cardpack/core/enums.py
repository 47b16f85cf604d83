from typing import Optional
from enum import Enum

class Rank(Enum):
    """Card ranks with their conventional values."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        """Display name, e.g. "Ace" or "7"."""
        if self in _NAMED_RANKS:
            return self.name.capitalize()
        return str(self.value)

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @classmethod
    def from_text(cls, text: str) -> 'Rank':
        """Parse a rank name or number (2-10), ignoring case."""
        if isinstance(text, str):
            lowered = text.lower()
            for rank in _NAMED_RANKS:
                if rank.name.lower() == lowered:
                    return rank
            number = parse_int(text)
            if number is not None and 2 <= number <= 10:
                return cls(number)
        raise ValueError(f"Invalid rank: {text!r}")

class Suit(Enum):
    """Card suits."""
    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    @property
    def label(self) -> str:
        """Display name, e.g. "Hearts"."""
        return self.name.capitalize()

    @classmethod
    def from_text(cls, text: str) -> 'Suit':
        """Parse a suit name, ignoring case."""
        if isinstance(text, str):
            lowered = text.lower()
            for suit in cls:
                if suit.name.lower() == lowered:
                    return suit
        raise ValueError(f"Invalid suit: {text!r}")

_NAMED_RANKS = (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING)

def parse_int(text: str) -> Optional[int]:
    """Parse integer text: optional sign, then decimal digits of any script.

    Returns None instead of raising. Whitespace and underscores are
    rejected, unlike int()."""
    if not isinstance(text, str):
        return None
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not digits.isdecimal():
        return None
    return int(text)
