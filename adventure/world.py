import copy
import logging
import random
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

# Listing order of get_exits().
DIRECTIONS = ("north", "south", "west", "east", "up", "down")

DIRECTION_ALIASES = {
    "n": "north",
    "s": "south",
    "w": "west",
    "e": "east",
    "u": "up",
    "d": "down",
}

OPPOSITES = {
    "north": "south",
    "south": "north",
    "west": "east",
    "east": "west",
    "up": "down",
    "down": "up",
}

# (dx, dy, dz); y is the vertical axis.
OFFSETS = {
    "north": (0, 0, 1),
    "south": (0, 0, -1),
    "west": (-1, 0, 0),
    "east": (1, 0, 0),
    "up": (0, 1, 0),
    "down": (0, -1, 0),
}

GROUND_LEVEL = 0


def normalize_direction(name):
    """Returns the full direction name for `name` or its alias, else None."""
    name = name.strip().lower()
    name = DIRECTION_ALIASES.get(name, name)
    return name if name in OFFSETS else None


def step(position, direction):
    x, y, z = position
    dx, dy, dz = OFFSETS[direction]
    return (x + dx, y + dy, z + dz)


class Biome(Enum):
    NONE = ""
    FOREST = "in a forest"
    PINE_FOREST = "in a pine forest"
    SWAMP = "knee deep in a swamp"
    MOUNTAIN = "in a mountain range"
    DESERT = "in a desert"
    PLAIN = "in a grassy plain"
    TUNDRA = "in a frozen tundra"

    @property
    def description(self):
        return self.value

    def has_trees(self):
        return self in (Biome.FOREST, Biome.PINE_FOREST, Biome.SWAMP)


# Candidates for a new ground-level room, each equally likely.
BIOMES = [b for b in Biome if b is not Biome.NONE]


def random_biome(rng):
    return rng.choice(BIOMES)


class ToolType(Enum):
    NONE = "none"
    PICK = "pick"
    SWORD = "sword"
    SHOVEL = "shovel"


@dataclass
class Item:
    id: str
    description: str = ""
    droppable: bool = True
    heavy: bool = False
    creature: bool = False
    monster: bool = False
    nocturnal: bool = False
    drops: List[str] = field(default_factory=list)
    hit_drops: List[str] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)
    material: bool = False
    tool: bool = False
    tool_level: Optional[int] = None
    tool_type: Optional[ToolType] = None
    ore: bool = False
    infinite: bool = False
    food: bool = False

    @property
    def name(self):
        return self.id

    def match_name(self, name):
        name = name.lower()
        if self.id.lower() == name:
            return True
        return any(alias.lower() == name for alias in self.aliases)


@dataclass
class Exits:
    north: bool = False
    south: bool = False
    east: bool = False
    west: bool = False
    down: bool = False
    up: bool = False

    def get_exit(self, name):
        if name not in OFFSETS:
            return False
        return getattr(self, name)

    def set_exit(self, name, value):
        if name in OFFSETS:
            setattr(self, name, bool(value))


@dataclass
class Room:
    biome: Biome = Biome.NONE
    trees: bool = False
    items: List[Item] = field(default_factory=list)
    exits: Exits = field(default_factory=Exits)
    dark: bool = False
    monsters: int = 0
    valid: bool = False

    def get_exits(self):
        return [d for d in DIRECTIONS if self.exits.get_exit(d)]

    def find_item(self, name):
        for item in self.items:
            if item.match_name(name):
                return item
        return None


class RoomGrid:
    """
    Sparse room storage keyed x -> y -> z.

    Rooms come out of the grid as copies. A caller that changes a room must
    hand it back through update() or the change is lost.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self._rooms: Dict[int, Dict[int, Dict[int, Room]]] = {}

    def get_room(self, x, y, z, allow_create):
        # Intermediate levels are created even when the room itself is not.
        column = self._rooms.setdefault(x, {}).setdefault(y, {})

        room = column.get(z)
        if room is not None:
            return copy.deepcopy(room)

        if not allow_create:
            return Room()

        room = self._generate(y)
        column[z] = room
        logger.debug("Created room at (%d, %d, %d): %s", x, y, z, room.biome.name)
        return copy.deepcopy(room)

    def get(self, x, y, z):
        return self.get_room(x, y, z, False)

    def get_or_create(self, x, y, z):
        return self.get_room(x, y, z, True)

    def update(self, x, y, z, room):
        if not room.valid:
            raise ValueError(f"Refusing to store an invalid room at ({x}, {y}, {z})")
        self._rooms.setdefault(x, {}).setdefault(y, {})[z] = copy.deepcopy(room)

    def _generate(self, y):
        room = Room(valid=True)
        if y == GROUND_LEVEL:
            room.biome = random_biome(self.rng)
            room.trees = room.biome.has_trees()
            # The overworld is open in every horizontal direction.
            for direction in ("north", "south", "west", "east"):
                room.exits.set_exit(direction, True)
        return room

    def __contains__(self, position):
        x, y, z = position
        return z in self._rooms.get(x, {}).get(y, {})

    def __len__(self):
        return sum(len(col) for plane in self._rooms.values() for col in plane.values())


ITEM_FIELDS = {f.name for f in fields(Item)}
