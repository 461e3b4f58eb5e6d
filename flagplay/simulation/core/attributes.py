"""Roster ability lookup.

Abilities live in three maps on a roster player (universal, offense,
defense), all on a 1-10 scale. Lookups search them in that order and
fall back to an average rating, so missing roster data degrades a player
to average ability rather than failing the play.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .entities import RosterPlayer


DEFAULT_ATTRIBUTE = 5


class AttributeSource(str, Enum):
    """Which ability map a value came from."""
    UNIVERSAL = "universal"
    OFFENSE = "offense"
    DEFENSE = "defense"


@dataclass(frozen=True)
class AttributeLookup:
    """Result of an ability lookup.

    Attributes:
        key: Ability name that was requested
        value: Resolved value (or the fallback)
        source: Map the value was found in, None when the fallback was used
    """
    key: str
    value: float
    source: Optional[AttributeSource] = None

    @property
    def used_default(self) -> bool:
        return self.source is None


def resolve(
    player: Optional[RosterPlayer],
    key: str,
    fallback: float = DEFAULT_ATTRIBUTE,
) -> AttributeLookup:
    """Look up an ability: universal, then offense, then defense, then fallback."""
    if player is None:
        return AttributeLookup(key=key, value=fallback)

    for source, values in (
        (AttributeSource.UNIVERSAL, player.universal),
        (AttributeSource.OFFENSE, player.offense),
        (AttributeSource.DEFENSE, player.defense),
    ):
        if values and key in values and values[key] is not None:
            return AttributeLookup(key=key, value=values[key], source=source)

    return AttributeLookup(key=key, value=fallback)


def attr(
    player: Optional[RosterPlayer],
    key: str,
    fallback: float = DEFAULT_ATTRIBUTE,
) -> float:
    """Ability value for a roster player (see resolve)."""
    return resolve(player, key, fallback).value
