"""Tests for the tournament hosting routes using mockfirestore."""

from __future__ import annotations

import json
import unittest
from unittest.mock import patch

from google.api_core.exceptions import ServiceUnavailable

from tests.helpers import MOCK_USER_ID, BaseTestCase

TOURNAMENT_FORM = {
    "name": "Friday Hoops",
    "entry_fee": "50",
    "max_participants": "20",
    "submit": "Create Tournament",
}


class TournamentRoutesTestCase(BaseTestCase):
    """Tournament creator."""

    def _open_creator(self, sport: str = "basketball") -> None:
        self.login()
        self.client.post(f"/sports/{sport}")
        self.client.post("/host/new")

    def _select(self, *match_ids: int):
        response = None
        for match_id in match_ids:
            response = self.client.post(
                f"/host/create/matches/{match_id}", follow_redirects=True
            )
        return response

    def test_creator_requires_sport(self) -> None:
        self.login()
        response = self.client.post("/host/new", follow_redirects=True)
        self.assertIn(b"Pick a sport before creating a tournament.", response.data)

    def test_creator_page(self) -> None:
        self._open_creator()
        response = self.client.get("/host/create")
        self.assertEqual(response.status_code, 200)
        self.assertIn(b"Create Basketball Tournament", response.data)
        self.assertIn(b"0/10 matches selected", response.data)
        self.assertIn(b"Select 10 more matches", response.data)

    def test_toggle_adds_and_removes(self) -> None:
        self._open_creator()
        response = self._select(*range(1, 11))
        self.assertIn(b"10/10 matches selected", response.data)

        response = self._select(4)
        self.assertIn(b"9/10 matches selected", response.data)
        with self.client.session_transaction() as sess:
            self.assertNotIn(4, sess["tournament_draft"]["match_ids"])

    def test_create_tournament(self) -> None:
        self._open_creator()
        self._select(*range(1, 11))
        response = self.client.post(
            "/host/create", data=TOURNAMENT_FORM, follow_redirects=True
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn(b"Tournament created successfully!", response.data)
        self.assertIn(b"Basketball Tournaments", response.data)

        tournaments = list(self.mock_db.collection("tournaments").stream())
        self.assertEqual(len(tournaments), 1)
        data = tournaments[0].to_dict()
        self.assertEqual(data["name"], "Friday Hoops")
        self.assertEqual(data["host_id"], MOCK_USER_ID)
        self.assertEqual(data["entry_fee"], 50.0)
        self.assertEqual(data["max_participants"], 20)
        self.assertEqual(len(json.loads(data["selected_matches"])), 10)

        with self.client.session_transaction() as sess:
            self.assertNotIn("tournament_draft", sess)

    def test_create_with_too_few_matches(self) -> None:
        self._open_creator()
        self._select(1, 2, 3)
        response = self.client.post(
            "/host/create", data=TOURNAMENT_FORM, follow_redirects=True
        )
        self.assertIn(b"Select 7 more matches.", response.data)
        self.assertEqual(list(self.mock_db.collection("tournaments").stream()), [])

    def test_create_without_name(self) -> None:
        self._open_creator()
        self._select(*range(1, 11))
        response = self.client.post(
            "/host/create",
            data=dict(TOURNAMENT_FORM, name=""),
            follow_redirects=True,
        )
        self.assertIn(b"Enter tournament name.", response.data)
        self.assertEqual(list(self.mock_db.collection("tournaments").stream()), [])

    def test_create_backend_failure(self) -> None:
        self._open_creator()
        self._select(*range(1, 11))
        with patch.object(
            type(self.mock_db.collection("tournaments")),
            "add",
            side_effect=ServiceUnavailable("firestore down"),
        ):
            response = self.client.post(
                "/host/create", data=TOURNAMENT_FORM, follow_redirects=True
            )
        self.assertIn(
            b"Failed to create tournament. Please try again later.", response.data
        )
        self.assertIn(b"10/10 matches selected", response.data)

    def test_cancel_returns_to_tournaments(self) -> None:
        self._open_creator()
        self._select(1)
        response = self.client.post("/host/cancel", follow_redirects=True)
        self.assertIn(b"Basketball Tournaments", response.data)
        with self.client.session_transaction() as sess:
            self.assertNotIn("tournament_draft", sess)


if __name__ == "__main__":
    unittest.main()
