import math

from coinflip_sim.simulation import Reactor


class _Sequence:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, n):
        return next(self._values)


def test_initial_state():
    reactor = Reactor(_Sequence([]))
    assert reactor.balance == 100.0
    assert reactor.balances == [100.0]
    assert reactor.peak == 100.0
    assert reactor.heads == 0


def test_bet_clamped_to_fraction_of_balance():
    reactor = Reactor(_Sequence([]))
    assert reactor.set_bet(1000) == reactor.max_bet
    assert reactor.max_bet == 90.0
    assert reactor.set_bet(-5) == 0.0


def test_heads_wins_bet():
    reactor = Reactor(_Sequence([1]))
    reactor.set_bet(10)
    assert reactor.flip() is True
    assert reactor.balance == 110.0
    assert reactor.peak == reactor.balance
    assert reactor.heads == 1
    assert reactor.balances[-1] == reactor.balance


def test_tails_loses_bet():
    reactor = Reactor(_Sequence([0]))
    reactor.set_bet(10)
    assert reactor.flip() is False
    assert reactor.balance == 90.0
    assert reactor.peak == 100.0
    assert reactor.tails() == 1


def test_counts_and_difference():
    reactor = Reactor(_Sequence([1, 1, 1, 0]))
    for _ in range(4):
        reactor.flip()
    assert reactor.heads + reactor.tails() == len(reactor.coin_states)
    assert reactor.difference() == 2
    assert reactor.ratio() == 3.0


def test_ratio_without_tails():
    reactor = Reactor(_Sequence([1]))
    assert math.isnan(reactor.ratio())
    reactor.flip()
    assert reactor.ratio() == math.inf


def test_render_shows_state():
    reactor = Reactor(_Sequence([1]))
    reactor.flip()
    text = reactor.render()
    assert "Balance: 100.00" in text
    assert "Coin State: Heads" in text
    assert "Heads: 1" in text
    assert "Tails: 0" in text