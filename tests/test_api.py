import unittest

from fastapi.testclient import TestClient

from chss.api import app, get_api_settings
from chss.codec import get_codec
from chss.config import Settings
from chss.define_codec_constants__const import STARTING_BOARD
from tests.codec_helpers import AFTER_E4, build_test_codec


class ApiTests(unittest.TestCase):
    def setUp(self) -> None:
        self.codec = build_test_codec()
        app.dependency_overrides[get_codec] = lambda: self.codec
        app.dependency_overrides[get_api_settings] = lambda: Settings(
            public_base_url="https://example.test"
        )
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def test_health(self) -> None:
        response = self.client.get("/api/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_empty_code_is_starting_position(self) -> None:
        payload = self.client.get("/api/positions").json()

        self.assertEqual(payload["position"]["board"], STARTING_BOARD)
        self.assertEqual(payload["code"], "")
        self.assertEqual(payload["url"], "https://example.test/p")
        self.assertEqual(payload["title"], "White to move")
        self.assertEqual(payload["perspective"], "w")
        self.assertFalse(payload["needs_redirect"])
        self.assertEqual(payload["status"]["outcome"], "ongoing")
        self.assertEqual(payload["status"]["legal_move_count"], 20)

    def test_raw_moves_resolve_to_canonical_key(self) -> None:
        payload = self.client.get("/api/positions/u-e2e4").json()

        self.assertEqual(payload["position"]["board"], AFTER_E4)
        self.assertEqual(payload["position"]["side_to_move"], "b")
        self.assertEqual(payload["code"], "u-a")
        self.assertEqual(payload["url"], "https://example.test/p/u-a")
        self.assertTrue(payload["needs_redirect"])
        self.assertEqual(payload["perspective"], "b")

    def test_requested_perspective(self) -> None:
        payload = self.client.get("/api/positions/u-a", params={"p": "w"}).json()

        self.assertEqual(payload["perspective"], "w")
        self.assertFalse(payload["needs_redirect"])

    def test_garbage_code_never_errors(self) -> None:
        response = self.client.get("/api/positions/garbage-token")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["position"]["board"], STARTING_BOARD)

    def test_legal_destinations(self) -> None:
        payload = self.client.get("/api/legal", params={"code": "", "square": "e2"}).json()

        self.assertEqual(payload["destinations"], ["e3", "e4"])

    def test_play_move(self) -> None:
        response = self.client.post(
            "/api/moves",
            json={"code": "", "from_square": "e2", "to_square": "e4"},
        )

        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["code"], "u-a")
        self.assertEqual(payload["move"], "e2e4")
        self.assertEqual(payload["title"], "White moved to e4, Black to move")

    def test_play_move_extends_discovered_line(self) -> None:
        payload = self.client.post(
            "/api/moves",
            json={"code": "u-a", "from_square": "e7", "to_square": "e6"},
        ).json()

        self.assertEqual(payload["code"], "u-e2e4e7e6")

    def test_illegal_move_is_rejected(self) -> None:
        response = self.client.post(
            "/api/moves",
            json={"code": "u-e", "from_square": "e4", "to_square": "e3"},
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("e4e3", response.json()["detail"])


if __name__ == "__main__":
    unittest.main()
