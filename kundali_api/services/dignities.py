from types import MappingProxyType
from typing import NamedTuple

# Sign (1..12) -> ruling planet
RULERS = MappingProxyType({
    1: "Mars",
    2: "Venus",
    3: "Mercury",
    4: "Moon",
    5: "Sun",
    6: "Mercury",
    7: "Venus",
    8: "Mars",
    9: "Jupiter",
    10: "Saturn",
    11: "Saturn",
    12: "Jupiter",
})
EXALT = MappingProxyType({
    "Sun": 1,
    "Moon": 2,
    "Mars": 10,
    "Mercury": 6,
    "Jupiter": 4,
    "Venus": 12,
    "Saturn": 7,
    "Rahu": 2,
    "Ketu": 8,
})
# Always the sign opposite the exaltation sign
DEBILITATION = MappingProxyType({p: (s + 5) % 12 + 1 for p, s in EXALT.items()})


class Relationship(NamedTuple):
    friends: frozenset
    enemies: frozenset


def _rel(friends, enemies) -> Relationship:
    return Relationship(frozenset(friends), frozenset(enemies))


# Not symmetric: the Moon counts nobody as an enemy
RELATIONSHIPS = MappingProxyType({
    "Sun": _rel(["Moon", "Mars", "Jupiter"], ["Venus", "Saturn"]),
    "Moon": _rel(["Sun", "Mercury"], []),
    "Mars": _rel(["Sun", "Moon", "Jupiter"], ["Mercury"]),
    "Mercury": _rel(["Sun", "Venus"], ["Moon"]),
    "Jupiter": _rel(["Sun", "Moon", "Mars"], ["Mercury", "Venus"]),
    "Venus": _rel(["Mercury", "Saturn"], ["Sun", "Moon"]),
    "Saturn": _rel(["Mercury", "Venus"], ["Sun", "Moon", "Mars"]),
    "Rahu": _rel(["Venus", "Saturn"], ["Sun", "Moon"]),
    "Ketu": _rel(["Mars", "Venus"], ["Sun", "Moon"]),
})

DIGNITIES = ("Exalted", "Own Sign", "Friendly", "Neutral", "Enemy", "Debilitated")


def sign_lord(sign: int) -> str:
    return RULERS[(sign - 1) % 12 + 1]


def dignity_for(planet: str, sign: int) -> str:
    if sign == EXALT.get(planet):
        return "Exalted"
    if sign == DEBILITATION.get(planet):
        return "Debilitated"
    lord = sign_lord(sign)
    if lord == planet:
        return "Own Sign"
    rel = RELATIONSHIPS.get(planet)
    if rel is not None:
        if lord in rel.friends:
            return "Friendly"
        if lord in rel.enemies:
            return "Enemy"
    return "Neutral"
