import random

from participants.models import Participant
from participants.presentation import (
    ACTIONS,
    AVATAR_COLORS,
    DECIDED,
    LOADER_COLORS,
    LOADING,
    action_area_state,
    avatar_color,
    pick_loader_color,
)


def test_avatar_color_is_stable_for_a_name():
    assert avatar_color("JANE DOE") == avatar_color("JANE DOE")


def test_avatar_color_uses_code_sum_modulo_palette():
    name = "JANE DOE"
    expected = AVATAR_COLORS[sum(ord(c) for c in name) % 5]
    assert avatar_color(name) == expected


def test_avatar_colors_collide_only_on_equal_remainders():
    names = ["JANE DOE", "MARCO SANTOS", "LIZA REYES", "PAOLO CRUZ", "A", "B", "F", ""]
    for a in names:
        for b in names:
            same_bucket = sum(map(ord, a)) % 5 == sum(map(ord, b)) % 5
            assert (avatar_color(a) == avatar_color(b)) == same_bucket


def test_avatar_color_handles_missing_name():
    assert avatar_color(None) == AVATAR_COLORS[0]


def test_loader_color_comes_from_palette():
    rng = random.Random(7)
    picks = {pick_loader_color(rng) for _ in range(50)}
    assert picks <= set(LOADER_COLORS)


def test_undecided_idle_participant_offers_actions():
    assert action_area_state(Participant(email="a@x.com")) == ACTIONS
    assert action_area_state(Participant(email="a@x.com", approved=False, rejected=False)) == ACTIONS


def test_in_flight_mutation_shows_loader():
    p = Participant(email="a@x.com")
    assert action_area_state(p, approving=True) == LOADING
    assert action_area_state(p, rejecting=True) == LOADING


def test_decided_participant_offers_nothing():
    for p in [
        Participant(email="a@x.com", approved=True),
        Participant(email="a@x.com", rejected=True),
        Participant(email="a@x.com", approved=True, rejected=True),
    ]:
        assert action_area_state(p) == DECIDED
        assert action_area_state(p, approving=True) == DECIDED
