import logging
import random

from adventure.gameio import GameIO
from adventure.items import ItemCatalog
from adventure.patterns import PatternTable
from adventure.world import RoomGrid

logger = logging.getLogger(__name__)


class Session:
    """
    Everything a game in progress owns: the room grid, where the player
    stands, what they carry, what they typed, and whether the game is still
    running. Passed explicitly to the dispatcher, the handlers, and the loop.
    """

    def __init__(self, io=None, grid=None, catalog=None, table=None,
                 start=(0, 0, 0), inventory=None, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.io = io or GameIO()
        # The world gets its own stream so flavour text never shifts it.
        self.grid = grid if grid is not None else RoomGrid(random.Random(self.rng.random()))
        self.catalog = catalog if catalog is not None else ItemCatalog()
        self.table = table if table is not None else PatternTable()
        self.position = tuple(start)
        self.inventory = list(inventory or [])
        self.command_history = []
        self.running = True
        self.turn = 0

    # --- Rooms ---
    def current_room(self):
        return self.grid.get_or_create(*self.position)

    def update_room(self, room, position=None):
        self.grid.update(*(position or self.position), room)

    def move_to(self, position):
        logger.debug("Player moves %s -> %s", self.position, position)
        self.position = tuple(position)
        return self.current_room()

    # --- Inventory ---
    def find_carried(self, name):
        for item in self.inventory:
            if item.match_name(name):
                return item
        return None

    def record(self, line):
        self.command_history.append(line)

    def stop(self):
        self.running = False
