"""Base test case for route tests backed by mockfirestore."""

from __future__ import annotations

import unittest
from typing import Any
from unittest.mock import MagicMock, patch

from mockfirestore import MockFirestore

from fantasypredictor import create_app
from tests.conftest import MockTransaction, patch_mockfirestore

patch_mockfirestore()

MOCK_USER_ID = "user1"
MOCK_USER_DATA = {
    "username": "predictor",
    "email": "user1@example.com",
    "balance": 10000.0,
}


class BaseTestCase(unittest.TestCase):
    """Flask test client wired to an in-memory Firestore."""

    firestore_targets = (
        "fantasypredictor.firestore",
        "fantasypredictor.wallet.services.firestore",
        "fantasypredictor.tournament.services.firestore",
    )

    def setUp(self) -> None:
        self.mock_db = MockFirestore()
        self.mock_transaction = MockTransaction()
        self.mock_db.transaction = MagicMock(return_value=self.mock_transaction)

        self.mock_firestore_module = MagicMock()
        self.mock_firestore_module.client.return_value = self.mock_db
        self.mock_firestore_module.SERVER_TIMESTAMP = "2023-01-01"
        self.mock_firestore_module.Query.DESCENDING = "DESCENDING"
        self.mock_firestore_module.transactional = lambda f: f

        patchers = [patch("firebase_admin.initialize_app")] + [
            patch(target, new=self.mock_firestore_module)
            for target in self.firestore_targets
        ]
        for p in patchers:
            p.start()
            self.addCleanup(p.stop)

        self.app = create_app(
            {"TESTING": True, "WTF_CSRF_ENABLED": False, "SERVER_NAME": "localhost"}
        )
        self.client = self.app.test_client()
        self.app_context = self.app.app_context()
        self.app_context.push()

        self.mock_db.collection("users").document(MOCK_USER_ID).set(
            dict(MOCK_USER_DATA)
        )

    def tearDown(self) -> None:
        self.mock_db.reset()
        self.app_context.pop()

    def login(self) -> None:
        """Put the mock user in the session."""
        with self.client.session_transaction() as sess:
            sess["user_id"] = MOCK_USER_ID

    def user_data(self) -> dict[str, Any]:
        return self.mock_db.collection("users").document(MOCK_USER_ID).get().to_dict()

    def ledger(self) -> list[dict[str, Any]]:
        ref = self.mock_db.collection("users").document(MOCK_USER_ID)
        return [doc.to_dict() for doc in ref.collection("ledger").stream()]

    def start_game(self, sport: str = "basketball", tier: str = "basic") -> Any:
        """Log in, pick a sport and join a tournament tier."""
        self.login()
        self.client.post(f"/sports/{sport}")
        return self.client.post(
            f"/tournaments/{sport}-{tier}/join", follow_redirects=True
        )
