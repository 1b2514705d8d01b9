"""
End-of-game ranking.

Every player's score is capped at 21 for the purpose of finding the winning
score, busted players included. A player wins when their real score is at most
21 and equals that winning score, so equal top scores produce several winners.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from pocketjack.blackjack.constants import BLACKJACK_TOTAL
from pocketjack.blackjack.state import PlayerState


class Outcome(Enum):
    """The single label shown next to a player's final score."""

    BLACKJACK = "blackjack"
    WIN = "win"
    BUST = "bust"
    NONE = "none"


@dataclass(frozen=True)
class PlayerResult:
    """Final score and outcome of one seat."""

    index: int
    name: str
    score: int
    outcome: Outcome

    @property
    def is_winner(self) -> bool:
        return self.outcome in (Outcome.WIN, Outcome.BLACKJACK)

    def to_dict(self):
        return {
            "index": self.index,
            "name": self.name,
            "score": self.score,
            "outcome": self.outcome.value,
        }


def winning_score(players: Sequence[PlayerState]) -> int:
    """Highest score at the table with every score capped at 21."""
    if not players:
        return 0
    return max(min(player.score, BLACKJACK_TOTAL) for player in players)


def classify(player: PlayerState, best: int) -> Outcome:
    score = player.score
    if player.is_blackjack:
        return Outcome.BLACKJACK
    if score <= BLACKJACK_TOTAL and score == best:
        return Outcome.WIN
    if score > BLACKJACK_TOTAL:
        return Outcome.BUST
    return Outcome.NONE


def rank_players(players: Sequence[PlayerState]) -> List[PlayerResult]:
    """
    Compute the final results for a table, in seat order.

    Args:
        players: Final player states

    Returns:
        One PlayerResult per player
    """
    best = winning_score(players)
    return [
        PlayerResult(
            index=i,
            name=player.name,
            score=player.score,
            outcome=classify(player, best),
        )
        for i, player in enumerate(players)
    ]
