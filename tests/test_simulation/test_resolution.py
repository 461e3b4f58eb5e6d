"""Tests for catch and flag pull resolution."""

import pytest

from flagplay.simulation.core.entities import Side
from flagplay.simulation.resolution.catch import CatchResolver, CatchResult
from flagplay.simulation.resolution.flag_pull import FlagPullResolver


@pytest.fixture
def resolver(geometry):
    return CatchResolver(geometry)


@pytest.fixture
def receiver(make_player, make_agent):
    return make_agent(make_player("x", 0.5, 0.5, route=[(0.5, 0.4)]))


# =============================================================================
# Catch Resolution
# =============================================================================

class TestCatchProbabilities:
    """Tests for the probability model."""

    def test_uncontested(self, resolver, receiver):
        probabilities, defender, separation = resolver.calculate_probabilities(receiver, [])
        assert defender is None
        assert separation == float("inf")
        # 0.675 base for average hands, plus both open bonuses
        assert probabilities.complete == pytest.approx(0.875)
        assert probabilities.interception == 0.0

    def test_contested(self, resolver, receiver, make_player, make_agent):
        defender = make_agent(make_player("d", 0.5, 0.5, side=Side.DEFENSE))
        probabilities, nearest, separation = resolver.calculate_probabilities(receiver, [defender])

        assert nearest is defender
        assert separation == 0.0
        assert probabilities.interception == pytest.approx(0.06)
        assert probabilities.incomplete == pytest.approx(1 - 0.3375)
        assert probabilities.complete == pytest.approx(0.3375 - 0.06)

    def test_probabilities_sum_to_one(self, resolver, receiver, make_player, make_agent):
        defender = make_agent(make_player("d", 0.5, 0.51, side=Side.DEFENSE))
        probabilities, _, _ = resolver.calculate_probabilities(receiver, [defender])
        total = probabilities.complete + probabilities.incomplete + probabilities.interception
        assert total == pytest.approx(1.0)

    def test_one_open_bonus(self, resolver, receiver, make_player, make_agent):
        defender = make_agent(make_player("d", 0.5, 0.5 + 4 / 64, side=Side.DEFENSE))
        probabilities, _, separation = resolver.calculate_probabilities(receiver, [defender])
        assert separation == pytest.approx(4.0)
        assert probabilities.complete == pytest.approx(0.775)

    def test_capped(self, resolver, make_player, make_agent, make_roster_player):
        sure_hands = make_agent(
            make_player("x", 0.5, 0.5),
            roster=make_roster_player("x", offense={"catching": 10, "hands_consistency": 10}),
        )
        probabilities, _, _ = resolver.calculate_probabilities(sure_hands, [])
        assert probabilities.complete == pytest.approx(0.95)

    def test_ball_hawk(self, resolver, receiver, make_player, make_agent, make_roster_player):
        hawk = make_agent(
            make_player("d", 0.5, 0.5, side=Side.DEFENSE),
            roster=make_roster_player("d", defense={"ball_hawking": 10}),
        )
        assert resolver.interception_probability(hawk, 0.0) == pytest.approx(0.1)
        assert resolver.interception_probability(hawk, 2.5) == 0.0


class TestCatchResolve:
    """Tests for the single-roll resolution bands."""

    def test_interception_band(self, resolver, receiver, make_player, make_agent, fixed_random):
        defender = make_agent(make_player("d", 0.5, 0.5, side=Side.DEFENSE))
        resolution = resolver.resolve(receiver, [defender], fixed_random(0.01))
        assert resolution.result == CatchResult.INTERCEPTION
        assert resolution.defender is defender
        assert resolution.contested

    def test_incompletion_band(self, resolver, receiver, make_player, make_agent, fixed_random):
        defender = make_agent(make_player("d", 0.5, 0.5, side=Side.DEFENSE))
        resolution = resolver.resolve(receiver, [defender], fixed_random(0.3))
        assert resolution.result == CatchResult.INCOMPLETE

    def test_completion_band(self, resolver, receiver, make_player, make_agent, fixed_random):
        defender = make_agent(make_player("d", 0.5, 0.5, side=Side.DEFENSE))
        resolution = resolver.resolve(receiver, [defender], fixed_random(0.9))
        assert resolution.result == CatchResult.COMPLETE

    def test_uses_one_roll(self, resolver, receiver, fixed_random):
        rng = fixed_random(0.5)
        resolution = resolver.resolve(receiver, [], rng)
        assert rng.calls == 1
        assert resolution.roll == 0.5
        assert resolution.result == CatchResult.COMPLETE
        assert not resolution.contested

    def test_uncontested_drop(self, resolver, receiver, fixed_random):
        resolution = resolver.resolve(receiver, [], fixed_random(0.05))
        assert resolution.result == CatchResult.INCOMPLETE

    def test_does_not_mutate_agents(self, resolver, receiver, fixed_random):
        before = receiver.pos
        resolver.resolve(receiver, [], fixed_random(0.9))
        assert receiver.pos == before
        assert not receiver.has_ball

    def test_serializes(self, resolver, receiver, fixed_random):
        data = resolver.resolve(receiver, [], fixed_random(0.9)).to_dict()
        assert data["result"] == "complete"
        assert data["separation"] is None
        assert data["defender_id"] is None


# =============================================================================
# Flag Pulls
# =============================================================================

class TestFlagPull:
    """Tests for flag pull rolls."""

    @pytest.fixture
    def carrier(self, make_player, make_agent):
        return make_agent(make_player("x", 0.5, 0.5))

    def test_out_of_reach_draws_nothing(self, carrier, make_player, make_agent, fixed_random):
        defender = make_agent(make_player("d", 0.5, 0.6, side=Side.DEFENSE))
        rng = fixed_random(0.0)
        assert FlagPullResolver().resolve(carrier, [defender], rng) is None
        assert rng.calls == 0

    def test_average_matchup_is_a_coin_flip(self, carrier, make_player, make_agent, fixed_random):
        resolver = FlagPullResolver()
        defender = make_agent(make_player("d", 0.5, 0.51, side=Side.DEFENSE))
        assert resolver.pull_chance(defender, carrier) == pytest.approx(0.5)
        assert resolver.resolve(carrier, [defender], fixed_random(0.4)).defender is defender
        assert resolver.resolve(carrier, [defender], fixed_random(0.6)) is None

    def test_technique_against_evasion(self, carrier, make_player, make_agent, make_roster_player):
        resolver = FlagPullResolver()
        defender = make_agent(
            make_player("d", 0.5, 0.51, side=Side.DEFENSE),
            roster=make_roster_player("d", defense={"flag_pull_technique": 10}),
        )
        assert resolver.pull_chance(defender, carrier) == pytest.approx(0.75)

        slippery = make_agent(
            carrier.formation,
            roster=make_roster_player("x", universal={"hip_drop": 10, "agility": 10}),
        )
        assert resolver.pull_chance(defender, slippery) == pytest.approx(0.5)

    def test_first_success_wins(self, carrier, make_player, make_agent, fixed_random):
        d1 = make_agent(make_player("d1", 0.5, 0.51, side=Side.DEFENSE))
        d2 = make_agent(make_player("d2", 0.51, 0.5, side=Side.DEFENSE))
        attempt = FlagPullResolver().resolve(carrier, [d1, d2], fixed_random(0.9, 0.1))
        assert attempt.defender is d2
        assert attempt.success
