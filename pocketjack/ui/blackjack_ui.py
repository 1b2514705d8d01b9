"""
Streamlit UI for pocketjack.

Run with ``streamlit run pocketjack/ui/blackjack_ui.py``. The app has a setup
screen for choosing the number of players and a game screen where players
take turns on one device. The UI holds a GameSession in ``st.session_state``
and re-reads it on every rerun; button callbacks call the session's actions.
"""

from typing import List

import pandas as pd
import streamlit as st

from pocketjack.adapters import OUTCOME_LABELS
from pocketjack.blackjack.constants import (
    DEFAULT_PLAYERS,
    MAX_PLAYERS,
    MIN_PLAYERS,
    clamp_player_count,
)
from pocketjack.blackjack.ranking import PlayerResult
from pocketjack.blackjack.session import GameSession


def results_frame(results: List[PlayerResult]) -> pd.DataFrame:
    """Tabulate final results for display."""
    return pd.DataFrame(
        [
            {
                "Player": result.name,
                "Score": result.score,
                "Result": OUTCOME_LABELS[result.outcome.value],
            }
            for result in results
        ]
    )


class BlackjackUI:
    """
    Streamlit-based UI for pocketjack.
    """

    def __init__(self):
        """Initialize the session state used across reruns."""
        if "screen" not in st.session_state:
            st.session_state.screen = "start"
            st.session_state.player_count = DEFAULT_PLAYERS
            st.session_state.game = None

    # Callbacks run before the script reruns

    def change_player_count(self, delta: int) -> None:
        st.session_state.player_count = clamp_player_count(
            st.session_state.player_count + delta
        )

    def start_game(self) -> None:
        st.session_state.game = GameSession(st.session_state.player_count)
        st.session_state.screen = "game"

    def draw(self, index: int) -> None:
        st.session_state.game.draw(index)

    def stop(self, index: int) -> None:
        st.session_state.game.stop(index)

    def replay(self) -> None:
        st.session_state.game.reset(st.session_state.player_count)

    def go_home(self) -> None:
        st.session_state.game = None
        st.session_state.screen = "start"

    def render_start_screen(self) -> None:
        st.title("🎴 Multi Blackjack 🎴")

        count = st.session_state.player_count
        minus, label, plus = st.columns([1, 2, 1])
        minus.button(
            "◀",
            on_click=self.change_player_count,
            args=(-1,),
            disabled=count <= MIN_PLAYERS,
        )
        label.markdown(f"### Players: {count}")
        plus.button(
            "▶",
            on_click=self.change_player_count,
            args=(1,),
            disabled=count >= MAX_PLAYERS,
        )

        st.button("Start game", type="primary", on_click=self.start_game)

    def render_game_screen(self) -> None:
        game: GameSession = st.session_state.game
        st.title("🃏 Blackjack 🃏")

        for i, player in enumerate(game.players):
            is_current = i == game.current_player_index and not game.ended
            with st.container(border=True):
                heading = f"**{player.name}**"
                if is_current:
                    heading = f"▶ {heading}"
                st.markdown(heading)
                st.markdown("  ".join(str(card) for card in player.hand))
                st.write(f"Score: {player.score}")

                if is_current and not player.stopped:
                    draw_col, stop_col = st.columns(2)
                    draw_col.button(
                        "Draw",
                        key=f"draw_{i}",
                        on_click=self.draw,
                        args=(i,),
                        disabled=not game.deck,
                    )
                    stop_col.button(
                        "Stop", key=f"stop_{i}", on_click=self.stop, args=(i,)
                    )
                elif player.stopped:
                    st.caption("✔ Stopped")

        if game.ended:
            self.render_results(game)

    def render_results(self, game: GameSession) -> None:
        st.subheader("🎉 Results 🎉")
        st.dataframe(results_frame(game.results()), hide_index=True)

        replay_col, home_col = st.columns(2)
        replay_col.button("🔁 Play again", on_click=self.replay)
        home_col.button("🏠 Home", on_click=self.go_home)

    def run(self) -> None:
        if st.session_state.screen == "game" and st.session_state.game is not None:
            self.render_game_screen()
        else:
            self.render_start_screen()


def main():
    BlackjackUI().run()


if __name__ == "__main__":
    main()
