import pytest

from dungeonarcade.profile import InsufficientCoins, PlayerProfile


def test_defaults_match_starting_stats():
    profile = PlayerProfile()
    assert (profile.coins, profile.attack, profile.hp, profile.pets) == (0, 1, 100, 0)


def test_earn_then_spend_round_trip():
    profile = PlayerProfile()
    profile.earn(7)
    profile.spend(7)
    assert profile.coins == 0


def test_spend_more_than_held_raises_and_keeps_coins():
    profile = PlayerProfile(coins=1)
    with pytest.raises(InsufficientCoins) as info:
        profile.spend(2)
    assert profile.coins == 1
    assert info.value.needed == 2
    assert info.value.available == 1


def test_spend_exact_amount_allowed():
    profile = PlayerProfile(coins=2)
    profile.spend(2)
    assert profile.coins == 0


@pytest.mark.parametrize("method", ["spend", "earn"])
def test_negative_amount_rejected(method):
    profile = PlayerProfile(coins=5)
    with pytest.raises(ValueError):
        getattr(profile, method)(-1)
    assert profile.coins == 5