from dungeonarcade.cards import Card, Hand

ACE = Card("♠", "A", 11)
KING = Card("♥", "K", 10)
QUEEN = Card("♦", "Q", 10)
NINE = Card("♣", "9", 9)
FIVE = Card("♣", "5", 5)


def hand_of(*cards):
    hand = Hand()
    for card in cards:
        hand.add(card)
    return hand


def test_card_text_is_mark_then_rank():
    assert str(ACE) == "♠ A"


def test_ace_and_king_make_blackjack():
    assert hand_of(ACE, KING).score() == 21


def test_aces_drop_to_one_when_needed():
    hand = hand_of(ACE, ACE, NINE)
    assert hand.score() == 21
    assert not hand.is_bust()


def test_bust_over_twenty_one():
    hand = hand_of(KING, QUEEN, FIVE)
    assert hand.is_bust()
    assert hand.score() > 21


def test_score_never_above_21_while_aces_can_shrink():
    hand = hand_of(ACE, ACE, ACE, ACE, KING)
    assert hand.score() <= 21


def test_clear_empties_hand():
    hand = hand_of(ACE, KING)
    hand.clear()
    assert len(hand) == 0
    assert hand.score() == 0


def test_render_shows_cards_and_score():
    text = hand_of(ACE, KING).render()
    assert text.splitlines() == [str(ACE), str(KING), "Score : 21"]


def test_render_hidden_masks_first_card_and_score():
    lines = hand_of(ACE, KING).render(hide=True).splitlines()
    assert lines == ["[Card]", str(KING)]
    assert not any(line.startswith("Score") for line in lines)