import logging
from enum import Enum

from adventure.dispatcher import Dispatcher
from adventure.handlers import build_registry
from adventure.patterns import check_ambiguity

logger = logging.getLogger(__name__)


class State(Enum):
    STARTING = "starting"
    AWAITING_INPUT = "awaiting_input"
    DISPATCHING = "dispatching"
    TERMINATED = "terminated"


class Game:
    """
    The turn loop. Describes the starting room, then reads, records, and
    dispatches one line per turn until a handler clears the running flag.
    """

    def __init__(self, session, dispatcher=None, read_line=None, prompt="? "):
        self.session = session
        if dispatcher is None:
            check_ambiguity(session.table)
            dispatcher = Dispatcher(session, session.table, build_registry(session.table))
        self.dispatcher = dispatcher
        self.read_line = read_line or session.io.read_line
        self.prompt = prompt
        self.state = State.STARTING

    def run(self):
        """Plays until the session stops. Dispatch errors propagate to the caller."""
        logger.info("Game starting at %s", self.session.position)
        self.dispatcher.dispatch("look")
        self.simulate()
        self.state = State.AWAITING_INPUT

        while self.session.running:
            try:
                line = self.read_line(self.prompt)
            except (EOFError, KeyboardInterrupt):
                logger.info("Input closed; ending the game")
                self.session.stop()
                break
            self.session.record(line)

            self.state = State.DISPATCHING
            self.dispatcher.dispatch(line)
            self.simulate()
            self.state = State.AWAITING_INPUT

        self.state = State.TERMINATED
        logger.info("Game over after %d turns", self.session.turn)

    def simulate(self):
        # Per-turn world update. Nothing in the world moves on its own yet.
        self.session.turn += 1
        logger.debug("Turn %d at %s", self.session.turn, self.session.position)
