import logging

from adventure.errors import CaptureError, ConfigurationError
from adventure.patterns import BAD_INPUT, NO_INPUT, compile_phrasing

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Turns a line of player input into a handler call.

    Phrasings are tried in pattern table order and the first one that
    matches the whole line wins. Empty input goes to the no-input handler
    and anything unrecognized to the bad-input handler.
    """

    def __init__(self, session, table, registry):
        self.session = session
        self.table = table
        self.registry = registry
        self._compiled = {}

    def dispatch(self, text):
        if text == "":
            return self._invoke(NO_INPUT, [])

        for command, phrasing in self.table:
            match = self._regex(phrasing).match(text)
            if match is None:
                continue

            handler = self._handler(command)

            if match.re.groups == 0:
                # A group-less phrasing only counts when it is the literal text.
                if match.group(0) != phrasing:
                    continue
                logger.debug("'%s' -> %s (%r)", text, command, phrasing)
                return handler(self.session, [])

            args = []
            for group in range(match.re.groups + 1):
                value = match.group(group)
                if value is None:
                    raise CaptureError(phrasing, group)
                args.append(value)

            logger.debug("'%s' -> %s (%r) args=%s", text, command, phrasing, args)
            return handler(self.session, args)

        logger.debug("'%s' -> %s", text, BAD_INPUT)
        return self._invoke(BAD_INPUT, [])

    def _invoke(self, command, args):
        return self._handler(command)(self.session, args)

    def _handler(self, command):
        handler = self.registry.get(command)
        if handler is None:
            raise ConfigurationError(f"{command} command not found")
        return handler

    def _regex(self, phrasing):
        regex = self._compiled.get(phrasing)
        if regex is None:
            regex = compile_phrasing(phrasing)
            self._compiled[phrasing] = regex
        return regex
