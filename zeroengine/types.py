"""Identifier types, limits and game enumerations."""

from __future__ import annotations

from enum import IntEnum

EntityID = int
ComponentID = int
# A signature is a bit mask of component ids.
Signature = int

MAX_ENTITIES = 1_000_000
MAX_COMPONENTS = 100_000


class Team(IntEnum):
    NONE = -1
    TEAM_1 = 0
    TEAM_2 = 1


class UnitType(IntEnum):
    NONE = -1
    SWORD = 0
    BOW = 1
    SHIELD = 2
    SLAVE = 3
    MONKS = 4
    BUTCHRE = 5
    CLOWN = 6
    GISAENG = 7


class BulletType(IntEnum):
    KNIFE = 0
    ARROW = 1
    HEAL = 2
    BUFF = 3