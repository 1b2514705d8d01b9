"""
Tests for the pure state transitions: dealing, drawing, stopping and turn order.
"""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from pocketjack.blackjack.state import GameStage, GameState, PlayerState
from pocketjack.blackjack.transitions import StateTransitionEngine
from pocketjack.common.deck import Deck, create_deck
from pocketjack.events import EventBus, EngineEventType


def with_stopped(state: GameState, *indices: int) -> GameState:
    players = tuple(
        replace(p, stopped=True) if i in indices else p
        for i, p in enumerate(state.players)
    )
    return replace(state, players=players)


class TestDealNewGame:
    def test_each_player_gets_two_cards_from_front(self, make_cards):
        deck = list(make_cards("A", "K", "5", "6", "9"))
        state = StateTransitionEngine.deal_new_game(deck, 2)

        assert state.players[0].hand == tuple(deck[0:2])
        assert state.players[1].hand == tuple(deck[2:4])
        assert state.deck == (deck[4],)
        assert state.current_player_index == 0
        assert state.stage == GameStage.IN_PROGRESS
        assert not state.ended

    def test_does_not_consume_caller_deck(self):
        deck = create_deck()
        StateTransitionEngine.deal_new_game(deck, 6)
        assert len(deck) == 54

    def test_deals_from_deck_instance(self, make_cards):
        deck = Deck(list(make_cards("A", "K", "5", "6", "9", "2")))
        state = StateTransitionEngine.deal_new_game(deck, 2)

        assert state.players[0].hand == tuple(make_cards("A", "K"))
        assert state.players[1].hand == tuple(make_cards("5", "6"))
        assert state.deck == tuple(make_cards("9", "2"))
        # The caller's deck keeps its cards
        assert deck.size == 6

    def test_full_deck_for_six_players(self):
        state = StateTransitionEngine.deal_new_game(create_deck(), 6)
        assert len(state.players) == 6
        assert all(len(p.hand) == 2 and not p.stopped for p in state.players)
        assert len(state.deck) == 54 - 12

    def test_default_and_custom_names(self):
        state = StateTransitionEngine.deal_new_game(create_deck(), 3, ["Ann", "Bo"])
        assert [p.name for p in state.players] == ["Ann", "Bo", "Player 3"]

    def test_not_enough_cards(self, make_cards):
        with pytest.raises(ValueError):
            StateTransitionEngine.deal_new_game(make_cards("A", "K", "2"), 2)

    def test_emits_deal_events(self):
        handler = MagicMock()
        EventBus.get_instance().on_any(handler)

        StateTransitionEngine.deal_new_game(create_deck(), 2)

        types = [args[0][0] for args, _ in handler.call_args_list]
        assert types[0] == "GAME_CREATED"
        assert types.count("CARD_DEALT") == 4
        assert types[-1] == "GAME_STARTED"


class TestAdvanceTurn:
    def test_moves_to_next_player(self, deal_game):
        state = deal_game([("2", "3"), ("4", "5"), ("6", "7")])
        state = StateTransitionEngine.advance_turn(state)
        assert state.current_player_index == 1

    def test_wraps_around(self, deal_game):
        state = deal_game([("2", "3"), ("4", "5"), ("6", "7")])
        state = replace(state, current_player_index=2)
        state = StateTransitionEngine.advance_turn(state)
        assert state.current_player_index == 0

    def test_skips_stopped_players(self, deal_game):
        state = with_stopped(deal_game([("2", "3")] * 4), 1, 2)
        state = StateTransitionEngine.advance_turn(state)
        assert state.current_player_index == 3

    def test_returns_to_sole_active_player(self, deal_game):
        state = with_stopped(deal_game([("2", "3")] * 3), 1, 2)
        state = StateTransitionEngine.advance_turn(state)
        assert state.current_player_index == 0
        assert not state.ended

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 6])
    @pytest.mark.parametrize("current", [0, 1])
    def test_lands_on_active_player(self, deal_game, count, current):
        for mask in range(2**count - 1):
            stopped = [i for i in range(count) if mask & (1 << i)]
            state = with_stopped(deal_game([("2", "3")] * count), *stopped)
            state = replace(state, current_player_index=current)

            state = StateTransitionEngine.advance_turn(state)

            assert not state.ended
            assert not state.players[state.current_player_index].stopped

    def test_all_stopped_ends_game(self, deal_game):
        state = with_stopped(deal_game([("2", "3")] * 3), 0, 1, 2)
        state = replace(state, current_player_index=1)

        state = StateTransitionEngine.advance_turn(state)

        assert state.ended
        assert state.stage == GameStage.ENDED
        assert state.current_player_index == 1

    def test_game_ended_emitted_once(self, deal_game):
        handler = MagicMock()
        EventBus.get_instance().on(EngineEventType.GAME_ENDED, handler)
        state = with_stopped(deal_game([("2", "3")] * 2), 0, 1)

        state = StateTransitionEngine.advance_turn(state)
        state = StateTransitionEngine.advance_turn(state)

        assert state.ended
        handler.assert_called_once()


class TestDrawCard:
    def test_moves_front_card_to_hand(self, deal_game, make_cards):
        state = deal_game([("2", "3"), ("4", "5")], rest=("9", "K"))
        top = state.deck[0]

        new_state = StateTransitionEngine.draw_card(state, 0)

        assert new_state.players[0].hand[-1] == top
        assert len(new_state.players[0].hand) == 3
        assert len(new_state.deck) == len(state.deck) - 1
        assert new_state.current_player_index == 1
        # The original snapshot is untouched
        assert len(state.players[0].hand) == 2

    def test_bust_stops_player(self, deal_game):
        state = deal_game([("10", "9"), ("4", "5")], rest=("5",))

        state = StateTransitionEngine.draw_card(state, 0)

        assert state.players[0].score == 24
        assert state.players[0].stopped
        assert state.current_player_index == 1

    def test_twenty_one_does_not_stop(self, deal_game):
        state = deal_game([("10", "9"), ("4", "5")], rest=("2",))
        state = StateTransitionEngine.draw_card(state, 0)
        assert state.players[0].score == 21
        assert not state.players[0].stopped

    def test_ace_demotion_avoids_bust(self, deal_game):
        state = deal_game([("A", "9"), ("4", "5")], rest=("5",))
        state = StateTransitionEngine.draw_card(state, 0)
        assert state.players[0].score == 15
        assert not state.players[0].stopped

    def test_stopped_player_is_noop(self, deal_game):
        state = with_stopped(deal_game([("2", "3"), ("4", "5")], rest=("9",)), 0)
        assert StateTransitionEngine.draw_card(state, 0) is state

    def test_empty_deck_is_noop(self, deal_game):
        state = deal_game([("2", "3"), ("4", "5")])
        assert state.deck == ()
        assert StateTransitionEngine.draw_card(state, 0) is state

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_unknown_seat_is_noop(self, deal_game, index):
        state = deal_game([("2", "3"), ("4", "5")], rest=("9",))
        assert StateTransitionEngine.draw_card(state, index) is state

    def test_bust_of_last_active_player_ends_game(self, deal_game):
        state = with_stopped(deal_game([("K", "Q"), ("4", "5")], rest=("5",)), 1)
        state = StateTransitionEngine.draw_card(state, 0)
        assert state.ended

    def test_emits_bust_event(self, deal_game):
        handler = MagicMock()
        EventBus.get_instance().on(EngineEventType.HAND_BUSTED, handler)
        state = deal_game([("K", "Q"), ("4", "5")], rest=("5",))

        StateTransitionEngine.draw_card(state, 0)

        handler.assert_called_once()
        data = handler.call_args[0][0]
        assert data["player_index"] == 0
        assert data["score"] == 25


class TestStopPlayer:
    def test_stop_and_advance(self, deal_game):
        state = deal_game([("2", "3"), ("4", "5"), ("6", "7")])
        state = StateTransitionEngine.stop_player(state, 0)
        assert state.players[0].stopped
        assert state.current_player_index == 1

    def test_stop_is_unconditional(self, deal_game):
        state = with_stopped(deal_game([("2", "3"), ("4", "5")]), 0)
        state = StateTransitionEngine.stop_player(state, 0)
        assert state.players[0].stopped
        assert state.current_player_index == 1

    def test_last_stop_ends_game(self, deal_game):
        state = deal_game([("2", "3"), ("4", "5")])
        state = StateTransitionEngine.stop_player(state, 0)
        state = StateTransitionEngine.stop_player(state, 1)
        assert state.ended
        assert state.current_player_index == 1

    def test_unknown_seat_is_noop(self, deal_game):
        state = deal_game([("2", "3"), ("4", "5")])
        assert StateTransitionEngine.stop_player(state, 5) is state

    def test_stop_after_game_ended_is_noop(self, deal_game):
        state = deal_game([("2", "3"), ("4", "5")])
        state = StateTransitionEngine.stop_player(state, 0)
        state = StateTransitionEngine.stop_player(state, 1)
        assert state.ended

        listener = MagicMock()
        EventBus.get_instance().on_any(listener)

        assert StateTransitionEngine.stop_player(state, 0) is state
        listener.assert_not_called()

    def test_stopped_never_reverts(self, deal_game):
        state = deal_game([("2", "3"), ("4", "5")], rest=("6", "7"))
        state = StateTransitionEngine.stop_player(state, 0)
        state = StateTransitionEngine.draw_card(state, 1)
        state = StateTransitionEngine.draw_card(state, 0)
        assert state.players[0].stopped
        assert len(state.players[0].hand) == 2


def test_change_stage_same_stage_returns_state():
    state = GameState(players=(PlayerState(),))
    assert StateTransitionEngine.change_stage(state, GameStage.DEALING) is state
    assert StateTransitionEngine.change_stage(state, GameStage.ENDED).ended
