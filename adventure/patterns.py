import re

from adventure.errors import ConfigurationError, PatternError

# Registry-only commands. They are reached by the dispatcher directly and never
# through a phrasing.
NO_INPUT = "noinput"
BAD_INPUT = "badinput"

PROBE_WORD = "thing"
_GROUP = re.compile(r"\((?!\?)[^()]*\)")

# Declaration order is dispatch order: earlier phrasings win, across commands too.
DEFAULT_PATTERNS = {
    "wait": ["wait"],
    "look": [
        "look at the ([a-zA-Z ]+)",
        "look at ([a-zA-Z ]+)",
        "look",
        "inspect ([a-zA-Z ]+)",
        "inspect the ([a-zA-Z ]+)",
        "inspect",
    ],
    "inventory": [
        "check self",
        "check inventory",
        "inventory",
        "i",
    ],
    "go": [
        "go ([a-zA-Z]+)",
        "travel ([a-zA-Z]+)",
        "walk ([a-zA-Z]+)",
        "run ([a-zA-Z]+)",
        "go",
    ],
    "dig": [
        "dig ([a-zA-Z]+) using ([a-zA-Z ]+)",
        "dig ([a-zA-Z]+) with ([a-zA-Z ]+)",
        "dig ([a-zA-Z]+)",
        "dig",
    ],
    "take": [
        "pick up the ([a-zA-Z ]+)",
        "pick up ([a-zA-Z ]+)",
        "pickup ([a-zA-Z ]+)",
        "take the ([a-zA-Z ]+)",
        "take ([a-zA-Z ]+)",
        "take",
    ],
    "drop": [
        "put down the ([a-zA-Z ]+)",
        "put down ([a-zA-Z ]+)",
        "drop the ([a-zA-Z ]+)",
        "drop ([a-zA-Z ]+)",
        "drop",
    ],
    "place": [
        "place the ([a-zA-Z ]+)",
        "place ([a-zA-Z ]+)",
        "place",
    ],
    "cbreak": [
        "punch the ([a-zA-Z ]+)",
        "punch ([a-zA-Z ]+)",
        "punch",
        "break the ([a-zA-Z ]+) with the ([a-zA-Z ]+)",
        "break ([a-zA-Z ]+) with ([a-zA-Z ]+)",
        "break the ([a-zA-Z ]+)",
        "break ([a-zA-Z ]+)",
        "break",
    ],
    "mine": [
        "mine the ([a-zA-Z ]+) with the ([a-zA-Z ]+)",
        "mine ([a-zA-Z ]+) with ([a-zA-Z ]+)",
        "mine ([a-zA-Z ]+)",
        "mine",
    ],
    "attack": [
        "attack the ([a-zA-Z ]+) with the ([a-zA-Z ]+)",
        "attack ([a-zA-Z ]+) with ([a-zA-Z ]+)",
        "attack ([a-zA-Z ]+)",
        "attack",
        "kill the ([a-zA-Z ]+) with the ([a-zA-Z ]+)",
        "kill ([a-zA-Z ]+)",
        "kill",
        "hit the ([a-zA-Z ]+) with the ([a-zA-Z ]+)",
        "hit ([a-zA-Z ]+) with ([a-zA-Z ]+)",
        "hit ([a-zA-Z ]+)",
        "hit",
    ],
    "craft": [
        "craft a ([a-zA-Z ]+)",
        "craft some ([a-zA-Z ]+)",
        "craft ([a-zA-Z ]+)",
        "craft",
        "make a ([a-zA-Z ]+)",
        "make some ([a-zA-Z ]+)",
        "make ([a-zA-Z ]+)",
        "make",
    ],
    "build": [
        "build ([a-zA-Z ]+) out of ([a-zA-Z ]+)",
        "build ([a-zA-Z ]+) from ([a-zA-Z ]+)",
        "build ([a-zA-Z ]+)",
        "build",
    ],
    "eat": [
        "eat a ([a-zA-Z ]+)",
        "eat the ([a-zA-Z ]+)",
        "eat ([a-zA-Z ]+)",
        "eat",
    ],
    "help": [
        "help me",
        "help",
    ],
    "exit": [
        "exit",
        "quit",
        "goodbye",
        "good bye",
        "bye",
        "farewell",
    ],
}


class PatternTable:
    """
    Ordered (command, phrasing) pairs.
    Built from a mapping of command -> phrasings; the mapping's order is kept.
    """

    def __init__(self, patterns=None):
        source = DEFAULT_PATTERNS if patterns is None else patterns
        for reserved in (NO_INPUT, BAD_INPUT):
            if reserved in source:
                raise ConfigurationError(f"'{reserved}' cannot have phrasings")
        self._patterns = {name: tuple(phrasings) for name, phrasings in source.items()}
        self._pairs = tuple(
            (name, phrasing)
            for name, phrasings in self._patterns.items()
            for phrasing in phrasings
        )

    def __iter__(self):
        return iter(self._pairs)

    def __len__(self):
        return len(self._pairs)

    def __contains__(self, command):
        return command in self._patterns

    @property
    def commands(self):
        return list(self._patterns)

    def phrasings(self, command):
        return list(self._patterns.get(command, ()))


def compile_phrasing(phrasing):
    """Compiles a phrasing anchored at both ends of the input line."""
    try:
        return re.compile(f"^{phrasing}$")
    except re.error as e:
        raise PatternError(phrasing, str(e)) from e


def sample_phrasing(phrasing):
    """Builds a probe line for a phrasing by filling every capture group with a sample word."""
    return _GROUP.sub(PROBE_WORD, phrasing)


def check_ambiguity(table):
    """
    Fails if the probe line of any phrasing is also recognized by a
    different command. Phrasings of the same command may overlap; their
    order settles which one captures.
    Only flat capturing groups can be filled in, so phrasings with nested
    or `(?...)` groups are rejected.
    """
    compiled = [(name, compile_phrasing(phrasing)) for name, phrasing in table]

    for name, phrasing in table:
        probe = sample_phrasing(phrasing)
        if "(" in probe:
            raise ConfigurationError(f"Cannot build a sample line for {phrasing!r}")
        for other, regex in compiled:
            if other != name and regex.match(probe):
                raise ConfigurationError(
                    f"'{probe}' is recognized by both '{name}' and '{other}'"
                )
