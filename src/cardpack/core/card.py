from typing import Optional
from .enums import Rank, Suit

DEFAULT_SUIT = Suit.SPADES.label
DEFAULT_RANK = Rank.ACE.label

_FACE_NAMES = ("jack", "queen", "king")

def derive_value(rank) -> int:
    """Map rank text to its conventional value.

    Ace=1, 2-10 face value, Jack=11, Queen=12, King=13, ignoring case.
    Anything unrecognized (None, bad text, numbers outside 2-10) maps to 0.
    """
    try:
        return Rank.from_text(rank).value
    except ValueError:
        return 0

def is_valid_suit(suit) -> bool:
    """Check if suit text names one of the four suits."""
    try:
        Suit.from_text(suit)
    except ValueError:
        return False
    return True

def is_valid_rank(rank) -> bool:
    """Check if rank text is Ace/Jack/Queen/King or a number 2-10."""
    return derive_value(rank) != 0

class Card:
    """
    A playing card held as plain text fields.
    Responsible for:
    - Storing suit, rank, value and picture as given
    - Deriving value from rank
    - Classifying and validating the card

    Construction never rejects input; use is_valid() to check it.
    Equality and hashing only consider suit and rank.
    """

    def __init__(self, suit: Optional[str] = DEFAULT_SUIT,
                 rank: Optional[str] = DEFAULT_RANK,
                 value: Optional[int] = None,
                 picture: Optional[str] = None):
        """Create a card, Ace of Spades by default.

        When value is omitted it is derived from rank, otherwise the
        caller's value is kept even if it disagrees with rank."""
        self.suit = suit
        self._rank = rank
        self.value = derive_value(rank) if value is None else value
        self.picture = picture

    @property
    def rank(self) -> Optional[str]:
        return self._rank

    @rank.setter
    def rank(self, rank: Optional[str]) -> None:
        # Replaces any explicitly set value
        self._rank = rank
        self.value = derive_value(rank)

    def set_rank_and_value(self, rank: Optional[str], value: int) -> None:
        """Set rank and value together, trusting the given value."""
        self._rank = rank
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self.suit == other.suit and self.rank == other.rank

    def __hash__(self):
        suit_hash = hash(self.suit) if self.suit is not None else 0
        rank_hash = hash(self.rank) if self.rank is not None else 0
        return 31 * suit_hash + rank_hash

    def __str__(self):
        return f"{self.rank} of {self.suit} (Value: {self.value})"

    def __repr__(self):
        return (f"Card(suit={self.suit!r}, rank={self.rank!r}, "
                f"value={self.value!r}, picture={self.picture!r})")

    def to_short_string(self) -> str:
        """Render as "<rank> of <suit>" without the value."""
        return f"{self.rank} of {self.suit}"

    def is_face_card(self) -> bool:
        """Check if the card is a Jack, Queen or King."""
        return isinstance(self.rank, str) and self.rank.lower() in _FACE_NAMES

    def is_ace(self) -> bool:
        """Check if the card is an ace."""
        return isinstance(self.rank, str) and self.rank.lower() == "ace"

    def is_valid(self) -> bool:
        """Check if both suit and rank are recognized."""
        return is_valid_suit(self.suit) and is_valid_rank(self.rank)
