"""Tests for the game state machine."""

from __future__ import annotations

import unittest

from fantasypredictor.errors import InvalidTransitionError, ValidationError
from fantasypredictor.game.catalog import get_tournament
from fantasypredictor.game.models import GameMode, Outcome, Sport
from fantasypredictor.game.state import GameState


def _joined_state() -> GameState:
    state = GameState()
    state.select_sport(Sport.BASKETBALL)
    state.join_tournament(get_tournament(Sport.BASKETBALL, "basketball-basic"))
    return state


def _predicting_state() -> GameState:
    state = _joined_state()
    state.choose_mode(GameMode.PREDICT)
    return state


class GameStateTransitionsTestCase(unittest.TestCase):
    """Screen transitions."""

    def test_new_state_is_on_sport_picker(self) -> None:
        state = GameState()
        self.assertIs(state.mode, GameMode.SELECT)
        self.assertIsNone(state.sport)
        self.assertEqual(state.matches, ())

    def test_select_sport_moves_to_tournaments(self) -> None:
        state = GameState()
        state.select_sport(Sport.FOOTBALL)
        self.assertIs(state.mode, GameMode.TOURNAMENT)
        self.assertIs(state.sport, Sport.FOOTBALL)
        self.assertEqual(len(state.matches), 10)

    def test_join_tournament_moves_to_mode_selection(self) -> None:
        state = _joined_state()
        self.assertIs(state.mode, GameMode.SELECT)
        self.assertEqual(state.tournament.id, "basketball-basic")

    def test_join_requires_sport(self) -> None:
        state = GameState()
        with self.assertRaises(InvalidTransitionError):
            state.join_tournament(get_tournament(Sport.BASKETBALL, "basketball-basic"))

    def test_choose_mode_requires_tournament(self) -> None:
        state = GameState()
        state.select_sport(Sport.BASKETBALL)
        with self.assertRaises(InvalidTransitionError):
            state.choose_mode(GameMode.PREDICT)

    def test_choose_mode_rejects_screens(self) -> None:
        state = _joined_state()
        with self.assertRaises(InvalidTransitionError):
            state.choose_mode(GameMode.TOURNAMENT)

    def test_results_need_all_predictions_from_predict(self) -> None:
        state = _predicting_state()
        state.set_prediction(1, Outcome.TEAM1)
        with self.assertRaises(InvalidTransitionError) as ctx:
            state.choose_mode(GameMode.RESULTS)
        self.assertIn("9 more predictions", ctx.exception.message)

        for match in state.matches:
            state.set_prediction(match.id, Outcome.TEAM1)
        state.choose_mode(GameMode.RESULTS)
        self.assertIs(state.mode, GameMode.RESULTS)

    def test_results_need_a_prediction_from_select(self) -> None:
        state = _joined_state()
        with self.assertRaises(InvalidTransitionError):
            state.choose_mode(GameMode.RESULTS)

    def test_results_cannot_go_straight_to_predict(self) -> None:
        state = _predicting_state()
        for match in state.matches:
            state.set_prediction(match.id, match.actual_result)
        state.choose_mode(GameMode.RESULTS)
        with self.assertRaises(InvalidTransitionError):
            state.choose_mode(GameMode.PREDICT)
        state.back()
        state.choose_mode(GameMode.PREDICT)
        self.assertIs(state.mode, GameMode.PREDICT)

    def test_back_walks_up_the_screens(self) -> None:
        state = _predicting_state()
        state.back()
        self.assertIs(state.mode, GameMode.SELECT)
        self.assertIsNotNone(state.tournament)

        state.back()
        self.assertIs(state.mode, GameMode.TOURNAMENT)
        self.assertIsNone(state.tournament)

        state.back()
        self.assertIs(state.mode, GameMode.SELECT)
        self.assertIsNone(state.sport)

        state.back()
        self.assertIs(state.mode, GameMode.SELECT)

    def test_creator_opens_and_closes(self) -> None:
        state = GameState()
        with self.assertRaises(InvalidTransitionError):
            state.open_creator()
        state.select_sport(Sport.TENNIS)
        state.open_creator()
        self.assertIs(state.mode, GameMode.CREATE_TOURNAMENT)
        state.back()
        self.assertIs(state.mode, GameMode.TOURNAMENT)
        state.open_creator()
        state.close_creator()
        self.assertIs(state.mode, GameMode.TOURNAMENT)
        self.assertIs(state.sport, Sport.TENNIS)

    def test_reset_is_idempotent(self) -> None:
        state = _predicting_state()
        state.set_prediction(1, Outcome.TEAM1)
        state.set_captain(1)
        state.reset()
        first = state.to_dict()
        state.reset()
        self.assertEqual(state.to_dict(), first)
        self.assertEqual(state, GameState())

    def test_changing_sport_clears_predictions(self) -> None:
        state = _predicting_state()
        state.set_prediction(1, Outcome.TEAM1)
        state.set_captain(1)
        state.back()
        state.back()
        state.select_sport(Sport.FOOTBALL)
        self.assertEqual(state.predictions, {})
        self.assertIsNone(state.captain)
        self.assertIsNone(state.tournament)


class GameStateCaptaincyTestCase(unittest.TestCase):
    """Predictions, captain and vice-captain."""

    def setUp(self) -> None:
        self.state = _predicting_state()
        for match_id in (1, 2, 5):
            self.state.set_prediction(match_id, Outcome.TEAM1)

    def test_prediction_replaces_previous(self) -> None:
        self.state.set_prediction(1, Outcome.DRAW)
        self.assertEqual(self.state.predictions[1], Outcome.DRAW)
        self.assertEqual(len(self.state.predictions), 3)

    def test_captain_requires_prediction(self) -> None:
        with self.assertRaises(ValidationError):
            self.state.set_captain(3)
        with self.assertRaises(ValidationError):
            self.state.set_vice_captain(3)
        self.assertIsNone(self.state.captain)
        self.assertIsNone(self.state.vice_captain)

    def test_setting_captain_twice_clears_it(self) -> None:
        self.state.set_captain(1)
        self.assertEqual(self.state.captain, 1)
        self.state.set_captain(1)
        self.assertIsNone(self.state.captain)

    def test_vice_captain_takes_over_captain_match(self) -> None:
        self.state.set_captain(5)
        self.state.set_vice_captain(5)
        self.assertIsNone(self.state.captain)
        self.assertEqual(self.state.vice_captain, 5)

    def test_captain_takes_over_vice_captain_match(self) -> None:
        self.state.set_vice_captain(2)
        self.state.set_captain(2)
        self.assertEqual(self.state.captain, 2)
        self.assertIsNone(self.state.vice_captain)

    def test_captain_moves_between_matches(self) -> None:
        self.state.set_captain(1)
        self.state.set_vice_captain(2)
        self.state.set_captain(5)
        self.assertEqual(self.state.captain, 5)
        self.assertEqual(self.state.vice_captain, 2)

    def test_round_trips_through_session_form(self) -> None:
        self.state.set_captain(1)
        self.state.set_vice_captain(2)
        data = self.state.to_dict()
        self.assertEqual(set(data["predictions"]), {"1", "2", "5"})
        restored = GameState.from_dict(data)
        self.assertEqual(restored, self.state)
        self.assertEqual(restored.score(), self.state.score())

    def test_from_empty_session(self) -> None:
        self.assertEqual(GameState.from_dict(None), GameState())
        self.assertEqual(GameState.from_dict({}), GameState())


if __name__ == "__main__":
    unittest.main()
