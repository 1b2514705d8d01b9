#!/usr/bin/env python3
"""
Example demonstrating the BlackjackEngine driven by a simple strategy.

Four seats share one table; every seat draws below 17 and stops otherwise.
Event listeners on the bus narrate the first game, then a batch of seeded
games is played silently and the wins per seat are tallied.
"""

import asyncio
from collections import Counter

from pocketjack.adapters import DummyAdapter
from pocketjack.blackjack.action import Action
from pocketjack.blackjack.scoring import calc_score
from pocketjack.engine import BlackjackEngine
from pocketjack.events import EventBus, EngineEventType

SEATS = 4
GAMES = 200


def make_strategy(engine):
    def draw_below_17(player_index, valid_actions):
        hand = engine.state.players[player_index].hand
        if Action.DRAW in valid_actions and calc_score(hand) < 17:
            return Action.DRAW
        return Action.STOP

    return draw_below_17


async def play_game(seed, narrate=False):
    adapter = DummyAdapter()
    engine = BlackjackEngine(adapter, {"player_count": SEATS, "seed": seed})
    adapter.strategy_function = make_strategy(engine)

    unsubscribes = []
    if narrate:
        event_bus = EventBus.get_instance()

        def on_card_dealt(data):
            if "score" in data:
                print(f"{data['player_name']} draws {data['card']} ({data['score']})")

        def on_busted(data):
            print(f"{data['player_name']} busts!")

        def on_hand_result(data):
            print(f"{data['name']}: {data['score']} points ({data['outcome']})")

        unsubscribes = [
            event_bus.on(EngineEventType.CARD_DEALT, on_card_dealt),
            event_bus.on(EngineEventType.HAND_BUSTED, on_busted),
            event_bus.on(EngineEventType.HAND_RESULT, on_hand_result),
        ]

    await engine.initialize()
    try:
        return await engine.play()
    finally:
        await engine.shutdown()
        for unsubscribe in unsubscribes:
            unsubscribe()


async def main():
    print("=== Narrated game ===\n")
    await play_game(seed=0, narrate=True)

    wins = Counter()
    for seed in range(1, GAMES + 1):
        for result in await play_game(seed):
            if result.is_winner:
                wins[result.name] += 1

    print(f"\n=== Wins over {GAMES} games ===\n")
    for name, count in sorted(wins.items()):
        print(f"{name}: {count}")


if __name__ == "__main__":
    asyncio.run(main())
