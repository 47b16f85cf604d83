from .core.card import Card, derive_value
from .core.enums import Rank, Suit
from .core.playing_card import PlayingCard

__version__ = "0.1.0"

__all__ = ["Card", "PlayingCard", "Rank", "Suit", "derive_value"]
