import unittest

from adventure.errors import ConfigurationError, PatternError
from adventure.patterns import (
    DEFAULT_PATTERNS,
    PatternTable,
    check_ambiguity,
    compile_phrasing,
    sample_phrasing,
)


class TestPatternTable(unittest.TestCase):
    def test_default_table_keeps_declaration_order(self):
        table = PatternTable()
        self.assertEqual(table.commands, list(DEFAULT_PATTERNS))
        self.assertEqual(list(table)[0], ("wait", "wait"))
        self.assertEqual(table.phrasings("exit")[-1], "farewell")
        self.assertEqual(len(table), sum(len(p) for p in DEFAULT_PATTERNS.values()))

    def test_reserved_names_are_rejected(self):
        with self.assertRaises(ConfigurationError):
            PatternTable({"noinput": [""]})
        with self.assertRaises(ConfigurationError):
            PatternTable({"badinput": ["what"]})

    def test_table_is_a_snapshot(self):
        source = {"wait": ["wait"]}
        table = PatternTable(source)
        source["wait"].append("rest")
        self.assertEqual(table.phrasings("wait"), ["wait"])

    def test_unknown_command_has_no_phrasings(self):
        self.assertEqual(PatternTable().phrasings("fly"), [])
        self.assertNotIn("fly", PatternTable())


class TestPhrasings(unittest.TestCase):
    def test_sample_fills_groups(self):
        self.assertEqual(sample_phrasing("take ([a-zA-Z ]+)"), "take thing")
        self.assertEqual(
            sample_phrasing("dig ([a-zA-Z]+) using ([a-zA-Z ]+)"),
            "dig thing using thing",
        )
        self.assertEqual(sample_phrasing("look"), "look")

    def test_compile_is_anchored(self):
        regex = compile_phrasing("look")
        self.assertIsNotNone(regex.match("look"))
        self.assertIsNone(regex.match("look around"))

    def test_compile_failure(self):
        with self.assertRaises(PatternError):
            compile_phrasing("look (")


class TestAmbiguity(unittest.TestCase):
    def test_default_table_is_unambiguous(self):
        check_ambiguity(PatternTable())

    def test_overlap_between_commands(self):
        table = PatternTable({
            "take": ["take ([a-z ]+)"],
            "grab": ["take all"],
        })
        with self.assertRaises(ConfigurationError):
            check_ambiguity(table)

    def test_groups_that_cannot_be_filled(self):
        for phrasing in ("go (?:to )?([a-z]+)", "take ((the )?[a-z]+)"):
            with self.assertRaises(ConfigurationError):
                check_ambiguity(PatternTable({"go": [phrasing]}))

    def test_overlap_within_a_command_is_allowed(self):
        table = PatternTable({"take": ["take the ([a-z ]+)", "take ([a-z ]+)"]})
        check_ambiguity(table)


if __name__ == '__main__':
    unittest.main()
