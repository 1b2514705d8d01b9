"""
Tests for the command-line adapter.
"""

import pytest

from pocketjack.adapters import CLIAdapter, format_result_line
from pocketjack.blackjack.action import Action
from pocketjack.common.io_interface import (
    DummyIOInterface,
    LoggingIOInterface,
    TestIOInterface,
)
from pocketjack.events import EngineEventType


@pytest.fixture
def io_interface():
    return TestIOInterface()


@pytest.fixture
def cli_adapter(io_interface):
    return CLIAdapter(io_interface)


@pytest.mark.asyncio
async def test_render_game_state(cli_adapter, io_interface):
    state = {
        "deck_cards_remaining": 47,
        "players": [
            {"name": "Player 1", "cards": ["♠A", "♥K"], "score": 21, "stopped": True, "is_current": False},
            {"name": "Player 2", "cards": ["♣5", "◆6"], "score": 11, "stopped": False, "is_current": True},
        ],
    }

    await cli_adapter.render_game_state(state)

    messages = io_interface.sent_messages
    assert "  Player 1: ♠A ♥K (21) [stopped]" in messages
    assert "> Player 2: ♣5 ◆6 (11)" in messages
    assert "Cards left: 47" in messages


@pytest.mark.asyncio
async def test_request_player_action_by_number(cli_adapter, io_interface):
    io_interface.input_responses = ["2"]
    action = await cli_adapter.request_player_action(0, "Player 1", [Action.DRAW, Action.STOP])
    assert action == Action.STOP


@pytest.mark.asyncio
async def test_request_player_action_by_name(cli_adapter, io_interface):
    io_interface.input_responses = ["Draw"]
    action = await cli_adapter.request_player_action(0, "Player 1", [Action.DRAW, Action.STOP])
    assert action == Action.DRAW


@pytest.mark.asyncio
async def test_request_player_action_retries(cli_adapter, io_interface):
    io_interface.input_responses = ["hit", "9", "stop"]
    action = await cli_adapter.request_player_action(0, "Player 1", [Action.DRAW, Action.STOP])
    assert action == Action.STOP
    assert io_interface.sent_messages.count("Invalid choice. Please try again.") == 2


@pytest.mark.asyncio
async def test_request_player_action_gives_up(cli_adapter, io_interface):
    io_interface.input_responses = ["x", "y", "z"]
    with pytest.raises(ValueError):
        await cli_adapter.request_player_action(0, "Player 1", [Action.DRAW, Action.STOP])


@pytest.mark.asyncio
async def test_non_interactive_interface_chooses():
    adapter = CLIAdapter(DummyIOInterface())
    action = await adapter.request_player_action(0, "Player 1", [Action.STOP])
    assert action == Action.STOP


@pytest.mark.asyncio
async def test_notify_game_event_messages(cli_adapter, io_interface):
    await cli_adapter.notify_game_event(
        EngineEventType.CARD_DEALT, {"player_name": "Player 1", "card": "♠9", "score": 18}
    )
    await cli_adapter.notify_game_event(
        "HAND_BUSTED", {"player_name": "Player 1", "score": 25}
    )
    await cli_adapter.notify_game_event(
        EngineEventType.PLAYER_STOPPED, {"player_name": "Player 2", "score": 17}
    )
    await cli_adapter.notify_game_event(EngineEventType.GAME_ENDED, {})

    assert io_interface.sent_messages == [
        "Player 1 draws ♠9",
        "Player 1 busts with 25!",
        "Player 2 stops at 17",
        "All players have stopped.",
    ]


@pytest.mark.asyncio
async def test_opening_deal_is_not_announced(cli_adapter, io_interface):
    await cli_adapter.notify_game_event(
        EngineEventType.CARD_DEALT, {"player_name": "Player 1", "card": "♠9"}
    )
    await cli_adapter.notify_game_event(EngineEventType.TURN_CHANGED, {})
    assert io_interface.sent_messages == []


@pytest.mark.asyncio
async def test_render_results(cli_adapter, io_interface):
    await cli_adapter.render_results(
        [
            {"name": "Player 1", "score": 21, "outcome": "blackjack"},
            {"name": "Player 2", "score": 20, "outcome": "none"},
            {"name": "Player 3", "score": 24, "outcome": "bust"},
        ]
    )
    assert io_interface.sent_messages[1:] == [
        "Player 1: 21 points 🂡 Blackjack!",
        "Player 2: 20 points",
        "Player 3: 24 points 💀 Bust!",
    ]


def test_format_result_line_winner():
    assert (
        format_result_line({"name": "Player 2", "score": 19, "outcome": "win"})
        == "Player 2: 19 points 🏆 Winner!"
    )


@pytest.mark.asyncio
async def test_logging_interface_writes_transcript(tmp_path):
    log_file = tmp_path / "game.log"
    adapter = CLIAdapter(LoggingIOInterface(str(log_file)))

    await adapter.render_results([{"name": "Player 1", "score": 20, "outcome": "win"}])
    action = await adapter.request_player_action(0, "Player 1", [Action.DRAW, Action.STOP])

    assert action == Action.DRAW
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert "Player 1: 20 points 🏆 Winner!" in lines
    assert "[ACTION] Player 1: DRAW" in lines


@pytest.mark.asyncio
async def test_non_interactive_choice_uses_rendered_score():
    io_interface = DummyIOInterface()
    adapter = CLIAdapter(io_interface)
    await adapter.render_game_state(
        {
            "players": [
                {"index": 0, "name": "Player 1", "cards": ["♠10", "♥8"], "score": 18},
                {"index": 1, "name": "Player 2", "cards": ["♣5", "◆6"], "score": 11},
            ]
        }
    )

    both = [Action.DRAW, Action.STOP]
    assert await adapter.request_player_action(0, "Player 1", both) == Action.STOP
    assert await adapter.request_player_action(1, "Player 2", both) == Action.DRAW


@pytest.mark.asyncio
async def test_interactive_prompt_shows_menu(cli_adapter, io_interface):
    io_interface.input_responses = ["1"]
    await cli_adapter.request_player_action(0, "Player 1", [Action.STOP])
    assert io_interface.sent_messages == [
        "\nPlayer 1's turn. Valid actions:",
        "1: STOP",
    ]
