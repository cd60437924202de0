import logging
from types import MappingProxyType

from adventure.patterns import BAD_INPUT, NO_INPUT
from adventure.world import GROUND_LEVEL, OPPOSITES, normalize_direction, step

logger = logging.getLogger(__name__)

BAD_INPUT_RESPONSES = [
    "I don't understand.",
    "I don't understand you.",
    "You can't do that.",
    "Nope.",
    "Huh?",
    "Say again?",
    "That's crazy talk.",
    "Speak clearly.",
    "I'll think about it.",
    "Let me get back to you on that one.",
    "That doesn't make any sense.",
    "What?",
]

NO_INPUT_RESPONSES = [
    "Speak up.",
    "Enunciate.",
    "Project your voice.",
    "Don't be shy.",
    "Use your words.",
]

ARTICLES = ("the ", "a ", "an ", "some ")

# Commands whose targets are acknowledged but not yet acted on.
INERT_VERBS = {
    "place": "Place",
    "cbreak": "Break",
    "mine": "Mine",
    "attack": "Attack",
    "craft": "Craft",
    "build": "Build",
}


def clean_name(text):
    """Lower-cases a captured name and drops a leading article."""
    name = " ".join(text.lower().split())
    for article in ARTICLES:
        if name.startswith(article):
            return name[len(article):]
    return name


def arguments(args):
    """The captured groups of a dispatch, without the whole-match slot."""
    names = [clean_name(a) for a in args[1:]]
    # A blank first capture ("take  ") counts as no argument at all.
    if not names or not names[0]:
        return []
    return names


def join_names(items):
    return ", ".join(item.name for item in items)


class Handlers:
    """
    The game's verbs. Each `do_<command>` method takes the session and the
    capture list and writes its output through `session.io`.
    """

    # ==========================================================
    # 1. CONVERSATION
    # ==========================================================
    def do_badinput(self, session, args):
        session.io.write(session.rng.choice(BAD_INPUT_RESPONSES))

    def do_noinput(self, session, args):
        session.io.write(session.rng.choice(NO_INPUT_RESPONSES))

    def do_exit(self, session, args):
        session.stop()
        session.io.write("Farewell.")

    def do_wait(self, session, args):
        session.io.write("Time passes.")

    def do_help(self, session, args):
        verbs = [INERT_VERBS.get(name, name).lower() for name in session.table.commands]
        session.io.write("You can: " + ", ".join(verbs) + ".")
        session.io.write("Try 'look', 'go north', 'take the stick' or 'quit'.", style="dim")

    # ==========================================================
    # 2. LOOKING AROUND
    # ==========================================================
    def do_look(self, session, args):
        targets = arguments(args)
        if not targets:
            self.describe_room(session)
            return

        name = targets[0]
        item = session.current_room().find_item(name) or session.find_carried(name)
        if item is None:
            session.io.write(f"You don't see any {name} here.")
            return
        session.io.write(item.description or f"It's a {item.name}.")

    def describe_room(self, session):
        room = session.current_room()
        y = session.position[1]

        if room.biome.description:
            where = room.biome.description
        elif y < GROUND_LEVEL:
            where = "underground"
        else:
            where = "high above the ground"
        session.io.write(f"You are {where}.", style="info")

        if room.trees:
            session.io.write("Trees grow all around you.")
        if room.items:
            session.io.write(f"You see: {join_names(room.items)}.")

        exits = room.get_exits()
        if exits:
            session.io.write(f"You can go {', '.join(exits)}.", style="exit")
        else:
            session.io.write("There is no way out.", style="exit")

    def do_inventory(self, session, args):
        if not session.inventory:
            session.io.write("You are carrying nothing.")
            return
        session.io.write(f"You are carrying: {join_names(session.inventory)}.")

    # ==========================================================
    # 3. MOVEMENT
    # ==========================================================
    def do_go(self, session, args):
        targets = arguments(args)
        if not targets:
            session.io.write("Go where?")
            return

        direction = normalize_direction(targets[0])
        if direction is None:
            session.io.write(f"'{targets[0]}' is not a direction.")
            return

        if not session.current_room().exits.get_exit(direction):
            session.io.write("You can't go that way.")
            return

        session.move_to(step(session.position, direction))
        self.describe_room(session)

    def do_dig(self, session, args):
        targets = arguments(args)
        if not targets:
            session.io.write("Dig where?")
            return

        direction = normalize_direction(targets[0])
        if direction is None:
            session.io.write(f"'{targets[0]}' is not a direction.")
            return

        if len(targets) > 1 and session.find_carried(targets[1]) is None:
            session.io.write(f"You don't have a {targets[1]}.")
            return

        room = session.current_room()
        if room.exits.get_exit(direction):
            session.io.write(f"There is already a way {direction}.")
            return

        # Both sides of the new passage are written back to the grid.
        room.exits.set_exit(direction, True)
        session.update_room(room)

        neighbour_pos = step(session.position, direction)
        neighbour = session.grid.get_or_create(*neighbour_pos)
        neighbour.exits.set_exit(OPPOSITES[direction], True)
        session.update_room(neighbour, neighbour_pos)

        logger.info("Dug %s from %s", direction, session.position)
        session.io.write(f"You dig a passage {direction}.")

    # ==========================================================
    # 4. ITEMS
    # ==========================================================
    def do_take(self, session, args):
        targets = arguments(args)
        if not targets:
            session.io.write("Take what?")
            return

        name = targets[0]
        room = session.current_room()
        item = room.find_item(name)
        if item is None:
            if session.find_carried(name):
                session.io.write("You already have that.")
            else:
                session.io.write(f"You don't see any {name} here.")
            return
        if not item.droppable:
            session.io.write(f"You can't pick up the {item.name}.")
            return

        room.items.remove(item)
        session.update_room(room)
        session.inventory.append(item)
        session.io.write("Taken.", style="success")

    def do_drop(self, session, args):
        targets = arguments(args)
        if not targets:
            session.io.write("Drop what?")
            return

        item = session.find_carried(targets[0])
        if item is None:
            session.io.write("You aren't carrying that.")
            return
        if not item.droppable:
            session.io.write(f"You can't let go of the {item.name}.")
            return

        room = session.current_room()
        session.inventory.remove(item)
        room.items.append(item)
        session.update_room(room)
        session.io.write("Dropped.", style="success")

    def do_eat(self, session, args):
        targets = arguments(args)
        if not targets:
            session.io.write("Eat what?")
            return

        item = session.find_carried(targets[0])
        if item is None:
            session.io.write("You aren't holding that.")
            return
        if not item.food:
            session.io.write("That's not edible.")
            return

        session.inventory.remove(item)
        session.io.write(f"You eat the {item.name}.")

    # ==========================================================
    # 5. NOT YET WIRED
    # ==========================================================
    def acknowledge(self, verb, session, args):
        targets = arguments(args)
        if not targets:
            session.io.write(f"{verb} what?")
            return

        name = targets[0]
        if session.current_room().find_item(name) is None and session.find_carried(name) is None:
            session.io.write(f"You don't see any {name} here.")
            return
        session.io.write("Nothing happens.")

    def do_place(self, session, args):
        self.acknowledge(INERT_VERBS["place"], session, args)

    def do_cbreak(self, session, args):
        self.acknowledge(INERT_VERBS["cbreak"], session, args)

    def do_mine(self, session, args):
        self.acknowledge(INERT_VERBS["mine"], session, args)

    def do_attack(self, session, args):
        self.acknowledge(INERT_VERBS["attack"], session, args)

    def do_craft(self, session, args):
        self.acknowledge(INERT_VERBS["craft"], session, args)

    def do_build(self, session, args):
        self.acknowledge(INERT_VERBS["build"], session, args)


def make_handler(method):
    """Wraps a `do_` method so it returns the lines it printed."""

    def handler(session, args):
        session.io.begin_turn()
        method(session, args)
        return session.io.turn_output()

    handler.__name__ = method.__name__
    return handler


def build_registry(table, handlers=None):
    """
    Maps every command in the pattern table, plus the no-input and bad-input
    responses, to its handler. Commands without a `do_` method are left out,
    and the dispatcher reports them when they are reached.
    """
    handlers = handlers or Handlers()
    registry = {}
    for name in list(table.commands) + [NO_INPUT, BAD_INPUT]:
        method = getattr(handlers, f"do_{name}", None)
        if method is None:
            logger.warning("No handler for command '%s'", name)
            continue
        registry[name] = make_handler(method)
    return MappingProxyType(registry)
