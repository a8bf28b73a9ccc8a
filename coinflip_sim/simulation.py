"""Coin-flip gambling simulation."""

from __future__ import annotations

import math
import random

STARTING_BALANCE = 100.0
MAX_BET_FRACTION = 0.9


class Reactor:
    """A gambler betting on coin flips: heads wins the bet, tails loses it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.coin_state = False
        self.coin_states: list[bool] = []
        self.balance = STARTING_BALANCE
        self.balances: list[float] = [STARTING_BALANCE]
        self.bet = 0.0
        self.peak = STARTING_BALANCE
        self.heads = 0

    @property
    def max_bet(self) -> float:
        """Largest bet currently allowed."""
        return self.balance * MAX_BET_FRACTION

    def set_bet(self, amount: float) -> float:
        """Set the bet, clamped to the allowed range; return the value used."""
        self.bet = min(max(float(amount), 0.0), self.max_bet)
        return self.bet

    def flip(self) -> bool:
        """Flip the coin and settle the bet; return True for heads."""
        if self.bet > self.balance:
            self.bet = self.max_bet
        self.coin_state = self._rng.randrange(2) == 1
        self.coin_states.append(self.coin_state)
        self.balance += self.bet if self.coin_state else -self.bet
        self.balances.append(self.balance)
        self.peak = max(self.peak, self.balance)
        if self.coin_state:
            self.heads += 1
        return self.coin_state

    def tails(self) -> int:
        """Number of flips that came up tails."""
        return len(self.coin_states) - self.heads

    def ratio(self) -> float:
        """Heads divided by tails; inf or nan when there are no tails."""
        tails = self.tails()
        if tails == 0:
            return math.inf if self.heads else math.nan
        return self.heads / tails

    def difference(self) -> int:
        """Absolute difference between heads and tails."""
        return abs(self.heads - self.tails())

    def render(self) -> str:
        """Text panel describing the current state."""
        lines = [
            "Coin Flip Simulation",
            f"Bet Amount: {self.bet:.2f}",
            f"Balance: {self.balance:.2f}",
            f"Coin State: {'Heads' if self.coin_state else 'Tails'}",
            f"Heads: {self.heads}",
            f"Tails: {self.tails()}",
            f"Heads Tails Ratio: {self.ratio():.2f}",
            f"Heads Tails Difference: {self.difference()}",
        ]
        return "\n".join(lines)