import unittest

from fastapi.testclient import TestClient

from api_app import app


class TestSessionAPI(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def _create(self, **payload):
        res = self.client.post("/sessions", json=payload)
        self.assertEqual(res.status_code, 200, res.text)
        return res.json()

    def test_health(self):
        res = self.client.get("/health")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"ok": True})

    def test_create_session(self):
        data = self._create(width=5, height=4, seed=7)

        self.assertTrue(data["sessionId"])
        self.assertEqual(data["maze"]["width"], 5)
        self.assertEqual(data["maze"]["height"], 4)
        self.assertEqual(len(data["maze"]["walls"]), (4 + 1) * 5 + 4 * (5 + 1))
        self.assertEqual(data["ball"], {"x": 10, "y": 10, "radius": 8})
        self.assertEqual(data["cell"], [0, 0])
        self.assertEqual(data["cellWidth"], 20)
        self.assertEqual(data["wins"], 0)
        self.assertEqual(data["generations"], 1)
        # One line for the top edge plus one per cell-row
        self.assertEqual(len(data["maze"]["text"].splitlines()), 5)

    def test_get_session(self):
        created = self._create(width=3, height=3, seed=1)
        res = self.client.get(f"/sessions/{created['sessionId']}")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["maze"]["text"], created["maze"]["text"])

    def test_unknown_session(self):
        res = self.client.get("/sessions/does-not-exist")
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["detail"]["code"], "SESSION_NOT_FOUND")

        res = self.client.post("/sessions/does-not-exist/moves:apply", json={"dx": 1, "dy": 1})
        self.assertEqual(res.status_code, 404)

    def test_invalid_config(self):
        res = self.client.post("/sessions", json={"ballRadius": 15})
        self.assertEqual(res.status_code, 422)
        self.assertEqual(res.json()["detail"]["code"], "INVALID_CONFIG")

        # Rejected by the request model itself
        res = self.client.post("/sessions", json={"width": 0})
        self.assertEqual(res.status_code, 422)
        res = self.client.post("/sessions", json={"riverFactor": -0.5})
        self.assertEqual(res.status_code, 422)

    def test_move_is_bounded(self):
        created = self._create(width=4, height=4, seed=5)
        sid = created["sessionId"]

        res = self.client.post(f"/sessions/{sid}/moves:apply", json={"dx": 100, "dy": 0})
        self.assertEqual(res.status_code, 200)
        data = res.json()
        self.assertIn(data["ball"]["x"], (12, 16))
        self.assertEqual(data["ball"]["y"], 10)
        self.assertEqual(data["cell"], [0, 0])
        self.assertFalse(data["won"])
        self.assertIsNone(data["maze"])

    def test_win_regenerates_maze(self):
        created = self._create(width=2, height=1, seed=3)
        sid = created["sessionId"]

        first = self.client.post(f"/sessions/{sid}/moves:apply", json={"dx": 6, "dy": 0}).json()
        self.assertFalse(first["won"])

        second = self.client.post(f"/sessions/{sid}/moves:apply", json={"dx": 6, "dy": 0}).json()
        self.assertTrue(second["won"])
        self.assertEqual(second["wins"], 1)
        self.assertIsNotNone(second["maze"])
        # The returned maze is the freshly generated one: a single passage
        self.assertEqual(sum(1 for w in second["maze"]["walls"] if not w["present"]), 1)
        self.assertEqual(second["maze"]["text"], ".__.__.\n|__.__|\n")

        state = self.client.get(f"/sessions/{sid}").json()
        self.assertEqual(state["generations"], 2)
        self.assertEqual(state["ball"]["x"], 10)

    def test_restart(self):
        created = self._create(width=6, height=6, seed=8)
        sid = created["sessionId"]
        self.client.post(f"/sessions/{sid}/moves:apply", json={"dx": 3, "dy": 3})

        res = self.client.post(f"/sessions/{sid}:restart")
        self.assertEqual(res.status_code, 200)
        data = res.json()
        self.assertEqual(data["generations"], 2)
        self.assertEqual(data["cell"], [0, 0])

    def test_maze_text(self):
        created = self._create(width=3, height=2, seed=4)
        res = self.client.get(f"/sessions/{created['sessionId']}/maze.txt")
        self.assertEqual(res.status_code, 200)
        self.assertTrue(res.headers["content-type"].startswith("text/plain"))
        self.assertEqual(res.text, created["maze"]["text"])

    def test_validate(self):
        created = self._create(width=7, height=5, riverFactor=0.3, seed=12)
        res = self.client.post(f"/sessions/{created['sessionId']}:validate")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"ok": True, "errors": []})

    def test_delete(self):
        created = self._create(width=2, height=2)
        sid = created["sessionId"]

        res = self.client.delete(f"/sessions/{sid}")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"ok": True})

        self.assertEqual(self.client.get(f"/sessions/{sid}").status_code, 404)
        self.assertEqual(self.client.delete(f"/sessions/{sid}").status_code, 404)


if __name__ == "__main__":
    unittest.main()
