from dataclasses import dataclass
from typing import Optional
from .card import Card
from .enums import Rank, Suit

@dataclass(frozen=True)
class PlayingCard:
    """Immutable, validated playing card.

    Unlike Card, the value is always derived from the rank."""
    rank: Rank
    suit: Suit

    def __post_init__(self):
        """Reject anything that is not a Rank/Suit member."""
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {self.suit!r}")

    def __str__(self):
        return f"{self.rank.label} of {self.suit.label}"

    @property
    def value(self) -> int:
        """Ace=1, number cards face value, Jack=11, Queen=12, King=13."""
        return self.rank.value

    def is_ace(self) -> bool:
        return self.rank == Rank.ACE

    def is_face_card(self) -> bool:
        return self.rank.is_face

    @classmethod
    def from_text(cls, suit: str, rank: str) -> 'PlayingCard':
        """Parse suit and rank text, ignoring case."""
        return cls(Rank.from_text(rank), Suit.from_text(suit))

    @classmethod
    def from_card(cls, card: Card) -> 'PlayingCard':
        """Convert a text card; raises ValueError if it is not valid."""
        return cls.from_text(card.suit, card.rank)

    def to_card(self, picture: Optional[str] = None) -> Card:
        """Convert to a text card with canonical names."""
        return Card(self.suit.label, self.rank.label, self.value, picture)
