import pytest
from cardpack.core.card import Card
from cardpack.core.enums import Rank, Suit
from cardpack.core.playing_card import PlayingCard

@pytest.fixture
def queen_of_clubs():
    """Create a Queen of Clubs."""
    return PlayingCard(Rank.QUEEN, Suit.CLUBS)

def test_playing_card_fields(queen_of_clubs):
    """Test value is derived from rank."""
    assert queen_of_clubs.value == 12
    assert queen_of_clubs.is_face_card() is True
    assert queen_of_clubs.is_ace() is False
    assert str(queen_of_clubs) == "Queen of Clubs"

def test_playing_card_is_immutable(queen_of_clubs):
    """Test fields cannot be reassigned."""
    with pytest.raises(AttributeError):
        queen_of_clubs.rank = Rank.KING

def test_playing_card_rejects_text():
    """Test construction requires enum members."""
    with pytest.raises(TypeError):
        PlayingCard("Queen", Suit.CLUBS)
    with pytest.raises(TypeError):
        PlayingCard(Rank.QUEEN, "Clubs")

def test_playing_card_equality_and_hash():
    """Test equal cards hash identically."""
    a = PlayingCard(Rank.ACE, Suit.SPADES)
    b = PlayingCard.from_text("spades", "ACE")
    assert a == b
    assert hash(a) == hash(b)
    assert a.is_ace() is True

def test_from_card_valid_cards():
    """Test every valid text card converts."""
    for suit in Suit:
        for rank in Rank:
            card = Card(suit.label.lower(), rank.label.upper())
            assert card.is_valid()
            assert PlayingCard.from_card(card) == PlayingCard(rank, suit)

def test_from_card_invalid_card():
    """Test invalid text cards are rejected."""
    with pytest.raises(ValueError, match="Invalid rank"):
        PlayingCard.from_card(Card("Hearts", "Joker"))
    with pytest.raises(ValueError, match="Invalid suit"):
        PlayingCard.from_card(Card("Stars", "Ace"))

def test_to_card(queen_of_clubs):
    """Test conversion to a text card with canonical names."""
    card = queen_of_clubs.to_card(picture="qc.png")
    assert card == Card("Clubs", "Queen")
    assert card.value == 12
    assert card.picture == "qc.png"
    assert PlayingCard.from_card(card) == queen_of_clubs
