import json
import tempfile
import unittest
from pathlib import Path

from chss.build_position_dictionary__dictionary import build_position_dictionary
from chss.errors import ChssError
from chss.infra import PythonChessRulesEngine
from chss.position_dictionary import PositionDictionary
from tests.codec_helpers import AFTER_E4, AFTER_E4_E5_NF3


class PositionDictionaryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.rules = PythonChessRulesEngine()

    def test_packaged_table(self) -> None:
        dictionary = build_position_dictionary(self.rules)

        self.assertEqual(len(dictionary), 14)
        self.assertEqual(dictionary.lookup_by_key("a"), AFTER_E4)
        self.assertEqual(dictionary.lookup_by_board(AFTER_E4), "a")
        self.assertEqual(dictionary.lookup_by_board(AFTER_E4_E5_NF3), "j")
        self.assertEqual(dictionary.line_for_key("j"), "e2e4e7e5g1f3")
        self.assertIsNone(dictionary.lookup_by_key("zz"))
        self.assertIsNone(dictionary.lookup_by_board("missing"))

    def test_invalid_entries_are_skipped(self) -> None:
        dictionary = PositionDictionary.from_lines(
            {"x": "e2e5", "y!": "e2e4", "w": "e2e", "z": "d2d4"},
            self.rules,
        )

        self.assertEqual(list(dictionary), ["z"])

    def test_first_key_keeps_shared_board(self) -> None:
        dictionary = PositionDictionary.from_lines({"p": "g1f3", "q": "g1f3"}, self.rules)

        self.assertEqual(dictionary.lookup_by_board(dictionary.lookup_by_key("q")), "p")

    def test_tables_are_read_only(self) -> None:
        dictionary = PositionDictionary.from_lines({"a": "e2e4"}, self.rules)

        with self.assertRaises(TypeError):
            dictionary.boards_by_key["b"] = AFTER_E4

    def test_build_from_custom_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "keys.json"
            path.write_text(json.dumps({"r": "e2e4e7e5g1f3"}), encoding="utf-8")

            dictionary = build_position_dictionary(self.rules, path)

        self.assertEqual(dictionary.lookup_by_board(AFTER_E4_E5_NF3), "r")

    def test_build_rejects_non_object_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "keys.json"
            path.write_text(json.dumps(["e2e4"]), encoding="utf-8")

            with self.assertRaises(ChssError):
                build_position_dictionary(self.rules, path)


if __name__ == "__main__":
    unittest.main()
