from typing import Iterable, Union
import numpy as np
from .card import Card
from .enums import Rank, Suit
from .playing_card import PlayingCard

NUM_CARDS = len(Rank) * len(Suit)  # 13 ranks * 4 suits

AnyCard = Union[Card, PlayingCard]

def _as_playing_card(card: AnyCard) -> PlayingCard:
    if isinstance(card, PlayingCard):
        return card
    if isinstance(card, Card):
        return PlayingCard.from_card(card)
    raise TypeError(f"Expected a card, got {card!r}")

def encode_card(card: AnyCard) -> int:
    """Convert card to one-hot index."""
    card = _as_playing_card(card)
    return (card.rank.value - 1) * len(Suit) + card.suit.value

def decode_card_index(index: int) -> PlayingCard:
    """Convert one-hot index back to a card."""
    if not 0 <= index < NUM_CARDS:
        raise ValueError(f"Card index out of range: {index}")
    rank_value = (index // len(Suit)) + 1
    suit_value = index % len(Suit)
    return PlayingCard(Rank(rank_value), Suit(suit_value))

def one_hot(card: AnyCard) -> np.ndarray:
    """One-hot encode the card for neural network input."""
    vector = np.zeros(NUM_CARDS, dtype=np.float32)
    vector[encode_card(card)] = 1.0
    return vector

def encode_cards(cards: Iterable[AnyCard]) -> np.ndarray:
    """Count how many times each of the 52 cards appears."""
    counts = np.zeros(NUM_CARDS, dtype=np.int64)
    for card in cards:
        counts[encode_card(card)] += 1
    return counts
