"""Tests for the Monte Carlo driver and the odds aggregator."""

import random

import pytest

from casino_odds import config
from casino_odds.models.card import parse_cards
from casino_odds.models.odds import Odds, Outcome, Tally
from casino_odds.simulation.engine import SimulationEngine, Variant, check_unique


class RecordingVariant(Variant):
    """Deals two cards per round and remembers what the deck looked like."""

    name = "recording"

    def __init__(self, known):
        self.known = known
        self.deck_sizes = []
        self.leaked = []

    def known_cards(self):
        return list(self.known)

    def play_round(self, deck):
        self.deck_sizes.append(len(deck))
        self.leaked.extend(c for c in deck.cards if c in self.known)
        first, second = deck.deal(2)
        if first.rank > second.rank:
            return Outcome.HERO
        if first.rank < second.rank:
            return Outcome.VILLAIN
        return Outcome.TIE


class TestTally:
    """Tests for outcome counting and normalization."""

    def test_record(self):
        tally = Tally()
        for outcome in (Outcome.HERO, Outcome.HERO, Outcome.VILLAIN, Outcome.TIE):
            tally.record(outcome)
        assert (tally.hero, tally.villain, tally.tie) == (2, 1, 1)
        assert tally.total == 4

    def test_merge(self):
        merged = Tally(1, 2, 3).merge(Tally(4, 5, 6))
        assert merged == Tally(5, 7, 9)

    def test_to_odds(self):
        odds = Tally(hero=50, villain=30, tie=20).to_odds(100)
        assert odds == Odds(hero=50.0, villain=30.0, tie=20.0)
        assert odds.total == pytest.approx(100.0)

    def test_to_odds_rejects_mismatched_total(self):
        with pytest.raises(ValueError, match="Tally covers"):
            Tally(hero=3).to_odds(4)

    def test_to_odds_rejects_zero_iterations(self):
        with pytest.raises(ValueError):
            Tally().to_odds(0)


class TestOdds:
    """Tests for the Odds triple."""

    def test_certain(self):
        assert Odds.certain(Outcome.VILLAIN) == Odds(0.0, 100.0, 0.0)
        assert Odds.certain(Outcome.TIE).tie == 100.0

    def test_equity_splits_ties(self):
        assert Odds(40.0, 40.0, 20.0).equity == pytest.approx(50.0)

    def test_as_dict(self):
        assert Odds(1.0, 2.0, 97.0).as_dict() == {"hero": 1.0, "villain": 2.0, "tie": 97.0}


class TestSimulationEngine:
    """Tests for the SimulationEngine driver."""

    def test_defaults_come_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_ITERATIONS", 123)
        monkeypatch.setattr(config, "DEFAULT_WORKERS", 2)
        engine = SimulationEngine()
        assert engine.iterations == 123
        assert engine.workers == 2

    @pytest.mark.parametrize("iterations", [0, -5])
    def test_rejects_non_positive_iterations(self, iterations):
        with pytest.raises(ValueError, match="iterations must be positive"):
            SimulationEngine(iterations=iterations)

    def test_rejects_non_positive_workers(self):
        with pytest.raises(ValueError, match="workers must be positive"):
            SimulationEngine(iterations=10, workers=0)

    def test_every_round_gets_a_full_fresh_deck(self):
        known = parse_cards("As Kd 7c")
        blocked = parse_cards("2h 3h")
        variant = RecordingVariant(known + blocked)
        engine = SimulationEngine(iterations=200, rng=random.Random(1))
        engine.run(variant)
        assert variant.deck_sizes == [47] * 200
        assert variant.leaked == []

    def test_blocked_cards_are_excluded(self):
        variant = RecordingVariant(parse_cards("As"))
        engine = SimulationEngine(iterations=10, rng=random.Random(1))
        remaining = engine.remaining_deck(variant, parse_cards("Kd Qd"))
        assert len(remaining) == 49
        engine.run(variant, parse_cards("Kd Qd"))
        assert set(variant.deck_sizes) == {49}

    def test_duplicate_known_cards_fail_fast(self):
        variant = RecordingVariant(parse_cards("As Kd"))
        engine = SimulationEngine(iterations=10)
        with pytest.raises(ValueError, match="Duplicate known card"):
            engine.run(variant, parse_cards("Kd"))

    def test_odds_sum_to_100(self):
        odds = SimulationEngine(iterations=777, rng=random.Random(3)).run(RecordingVariant([]))
        assert odds.total == pytest.approx(100.0)

    def test_seeded_runs_are_reproducible(self):
        first = SimulationEngine(iterations=500, rng=random.Random(9)).run(RecordingVariant([]))
        second = SimulationEngine(iterations=500, rng=random.Random(9)).run(RecordingVariant([]))
        assert first == second

    def test_parallel_workers_cover_every_round(self):
        variant = RecordingVariant(parse_cards("Ac"))
        engine = SimulationEngine(iterations=1001, rng=random.Random(4), workers=4)
        odds = engine.run(variant)
        assert len(variant.deck_sizes) == 1001
        assert odds.total == pytest.approx(100.0)

    def test_parallel_seeded_runs_are_reproducible(self):
        first = SimulationEngine(iterations=400, rng=random.Random(6), workers=3).run(RecordingVariant([]))
        second = SimulationEngine(iterations=400, rng=random.Random(6), workers=3).run(RecordingVariant([]))
        assert first == second

    def test_check_unique(self):
        assert check_unique(parse_cards("As Ks")) == parse_cards("As Ks")
        with pytest.raises(ValueError):
            check_unique(parse_cards("As As"))

    def test_known_cards_outside_the_deck_are_rejected(self):
        variant = RecordingVariant(["As"])
        with pytest.raises(ValueError, match="Expected 51 cards left"):
            SimulationEngine(iterations=10).run(variant)
