import io
import random

from rich.console import Console

from adventure.dispatcher import Dispatcher
from adventure.gameio import GameIO
from adventure.handlers import build_registry
from adventure.items import load_items
from adventure.patterns import BAD_INPUT, NO_INPUT
from adventure.session import Session


def quiet_io():
    return GameIO(Console(file=io.StringIO(), width=120))


def make_session(seed=7, start=(0, 0, 0), inventory=(), table=None):
    catalog = load_items()
    return Session(
        io=quiet_io(),
        catalog=catalog,
        table=table,
        start=start,
        inventory=catalog.make(inventory),
        rng=random.Random(seed),
    )


def make_dispatcher(session):
    return Dispatcher(session, session.table, build_registry(session.table))


def screen(session):
    return session.io.console.file.getvalue()


class Recorder:
    """A registry whose handlers only remember how they were called."""

    def __init__(self, table, missing=()):
        self.calls = []
        self.registry = {}
        for name in list(table.commands) + [NO_INPUT, BAD_INPUT]:
            if name not in missing:
                self.registry[name] = self._make(name)

    def _make(self, name):
        def handler(session, args):
            self.calls.append((name, args))
            return [name]
        return handler

    @property
    def last(self):
        return self.calls[-1]
