from __future__ import annotations

import random
from typing import Optional

from participants.models import Participant

AVATAR_COLORS = [
    "bg-[#00072C]",
    "bg-[#0035E6]",
    "bg-[#3EAD35]",
    "bg-[#FEC205]",
    "bg-[#EF1748]",
]

LOADER_COLORS = [
    "loader-blue",
    "loader-green",
    "loader-yellow",
    "loader-red",
]

ACTIONS = "actions"
LOADING = "loading"
DECIDED = "decided"


def avatar_color(name: Optional[str]) -> str:
    """Same name, same colour: character-code sum modulo the palette size."""
    total = sum(ord(ch) for ch in (name or ""))
    return AVATAR_COLORS[total % len(AVATAR_COLORS)]


def pick_loader_color(rng: Optional[random.Random] = None) -> str:
    # Cosmetic only, picked once per rendered panel
    return (rng or random).choice(LOADER_COLORS)


def action_area_state(participant: Participant, approving: bool = False, rejecting: bool = False) -> str:
    if participant.is_decided:
        return DECIDED
    if approving or rejecting:
        return LOADING
    return ACTIONS
