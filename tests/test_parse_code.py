import base64
import unittest

from chss.define_codec_constants__const import STARTING_BOARD
from chss.encode_board__codec import encode_board
from chss.models import Position
from tests.codec_helpers import AFTER_E4, AFTER_E4_E5_NF3, build_test_codec


def _b64(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


class ParseCodeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.codec = build_test_codec()

    def assertStarting(self, position: Position) -> None:
        self.assertEqual(position, Position.starting())

    def test_empty_code_is_starting_position(self) -> None:
        for token in ("", None, "   "):
            with self.subTest(token=token):
                position = self.codec.parse(token)
                self.assertStarting(position)
                self.assertIsNone(position.short_key)
                self.assertIsNone(position.move_history)

    def test_raw_moves_after_short_key_prefix(self) -> None:
        position = self.codec.parse("u-e2e4e7e5g1f3")

        self.assertEqual(position.board, AFTER_E4_E5_NF3)
        self.assertEqual(position.side_to_move, "b")
        self.assertEqual(position.move_history, "e2e4e7e5g1f3")
        self.assertEqual(position.short_key, "j")

    def test_dictionary_key_resolves_without_replay(self) -> None:
        position = self.codec.parse("u-j")

        self.assertEqual(position.board, AFTER_E4_E5_NF3)
        self.assertEqual(position.short_key, "j")
        self.assertEqual(position.move_history, "e2e4e7e5g1f3")

    def test_unprefixed_code_is_replayed(self) -> None:
        position = self.codec.parse("e2e4")

        self.assertEqual(position.board, AFTER_E4)
        self.assertEqual(position.short_key, "a")

    def test_replayed_line_is_discovered(self) -> None:
        position = self.codec.parse("u-e2e4e7e6")

        self.assertEqual(position.short_key, "e2e4e7e6")
        self.assertEqual(self.codec.engine.cache.get(position.board), "e2e4e7e6")

    def test_full_board_code(self) -> None:
        position = self.codec.parse("f-" + _b64(AFTER_E4_E5_NF3))

        self.assertEqual(position.board, AFTER_E4_E5_NF3)
        self.assertEqual(position.side_to_move, "b")
        self.assertIsNone(position.move_history)

    def test_full_board_code_of_starting_position(self) -> None:
        position = self.codec.parse("f-" + encode_board(STARTING_BOARD))

        self.assertStarting(position)
        self.assertEqual(self.codec.generate(position), "")

    def test_full_board_code_is_normalized(self) -> None:
        with_ep = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"

        position = self.codec.parse("f-" + _b64(with_ep))

        self.assertEqual(position.board, AFTER_E4)
        self.assertEqual(self.codec.generate(position), "u-a")

    def test_malformed_codes_fall_back_to_starting_position(self) -> None:
        tokens = [
            "garbage-token",
            "u-zz",
            "u-e2e4e7e5e4e5",
            "u-e2e",
            "f-",
            "f-!!!!",
            "f-" + _b64("no-separator"),
            "f-" + _b64("two fields"),
            "f-" + _b64("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b"),
            "f-" + _b64("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq -"),
            "f-" + _b64("8/8/8/8/8/8/8/8 w - - 0 1"),
            "f-" + base64.b64encode(b"\xff\xfe bad").decode("ascii"),
            "s-r",
            "U-e2e4",
        ]
        for token in tokens:
            with self.subTest(token=token):
                self.assertStarting(self.codec.parse(token))

    def test_partial_replay_is_discarded(self) -> None:
        position = self.codec.parse("u-e2e4e7e5g1f3zzzz")

        self.assertStarting(position)
        self.assertEqual(len(self.codec.engine.cache), 0)


if __name__ == "__main__":
    unittest.main()
