import unittest

from adventure.dispatcher import Dispatcher
from adventure.errors import ConfigurationError
from adventure.game import Game, State
from adventure.patterns import PatternTable

from helpers import make_session, screen


class ScriptedInput:
    """Feeds lines to the game loop; runs dry with EOFError like a closed console."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class TestGameLoop(unittest.TestCase):
    def setUp(self):
        self.session = make_session()

    def test_starts_by_looking(self):
        game = Game(self.session, read_line=ScriptedInput(["quit"]))
        game.run()
        self.assertIn("You are ", screen(self.session).splitlines()[0])

    def test_exit_stops_without_another_prompt(self):
        reader = ScriptedInput(["look", "exit", "look"])
        game = Game(self.session, read_line=reader)
        game.run()

        self.assertEqual(self.session.command_history, ["look", "exit"])
        self.assertEqual(len(reader.prompts), 2)
        self.assertEqual(reader.lines, ["look"])
        self.assertEqual(game.state, State.TERMINATED)
        self.assertFalse(self.session.running)

    def test_history_is_verbatim(self):
        lines = ["", "  Look ", "xyzzy qwerty", "go north", "bye"]
        Game(self.session, read_line=ScriptedInput(lines)).run()
        self.assertEqual(self.session.command_history, lines)
        self.assertEqual(self.session.position, (0, 0, 1))

    def test_simulate_runs_every_turn(self):
        Game(self.session, read_line=ScriptedInput(["wait", "wait", "quit"])).run()
        # One tick for the opening look, one per line read.
        self.assertEqual(self.session.turn, 4)

    def test_end_of_input_terminates(self):
        game = Game(self.session, read_line=ScriptedInput(["wait"]))
        game.run()
        self.assertEqual(game.state, State.TERMINATED)
        self.assertFalse(self.session.running)
        self.assertEqual(self.session.command_history, ["wait"])

    def test_prompt_is_passed_to_reader(self):
        reader = ScriptedInput(["quit"])
        Game(self.session, read_line=reader, prompt="> ").run()
        self.assertEqual(reader.prompts, ["> "])

    def test_dispatch_errors_end_the_session(self):
        table = PatternTable()
        game = Game(
            self.session,
            dispatcher=Dispatcher(self.session, table, {}),
            read_line=ScriptedInput(["quit"]),
        )
        with self.assertRaises(ConfigurationError):
            game.run()
        self.assertEqual(self.session.command_history, [])

    def test_ambiguous_table_is_rejected_at_startup(self):
        session = make_session(table=PatternTable({
            "take": ["take ([a-z ]+)"],
            "grab": ["take all"],
        }))
        with self.assertRaises(ConfigurationError):
            Game(session, read_line=ScriptedInput([]))


if __name__ == '__main__':
    unittest.main()
