"""Tests for polylines, speed conversion and pass planning."""

import pytest

from flagplay.simulation.core.entities import RouteSegment, SegmentType
from flagplay.simulation.core.vec2 import Vec2
from flagplay.simulation.physics.ball_flight import (
    MIN_FLIGHT_TIME,
    ThrowPlan,
    inaccuracy,
    plan_throw,
    throw_speed,
)
from flagplay.simulation.physics.kinematics import speed_to_yards_per_second, step_toward
from flagplay.simulation.physics.paths import (
    PathProgress,
    Polyline,
    build_motion_path,
    build_route_path,
    sample_polyline,
)


# =============================================================================
# Polylines
# =============================================================================

class TestSamplePolyline:
    """Tests for arc-length sampling."""

    POINTS = [Vec2(0.0, 0.0), Vec2(0.1, 0.0), Vec2(0.1, 0.1)]

    def test_midpoint_of_second_leg(self):
        line = Polyline.from_points(self.POINTS)
        assert line.total_length == pytest.approx(0.2)
        point = line.sample(0.15)
        assert point.x == pytest.approx(0.1)
        assert point.y == pytest.approx(0.05)

    def test_clamps_at_both_ends(self):
        line = Polyline.from_points(self.POINTS)
        assert line.sample(-1.0) == self.POINTS[0]
        assert line.sample(5.0) == self.POINTS[-1]

    def test_vertex_exact(self):
        line = Polyline.from_points(self.POINTS)
        point = line.sample(0.1)
        assert point.x == pytest.approx(0.1)
        assert point.y == pytest.approx(0.0)

    def test_empty_and_single_point(self):
        assert sample_polyline([], [], 1.0) == Vec2(0.0, 0.0)
        single = Polyline.from_points([Vec2(0.3, 0.4)])
        assert single.is_degenerate
        assert single.sample(0.2) == Vec2(0.3, 0.4)

    def test_repeated_points_are_zero_length_legs(self):
        line = Polyline.from_points([Vec2(0.2, 0.2), Vec2(0.2, 0.2), Vec2(0.2, 0.3)])
        assert line.total_length == pytest.approx(0.1)
        assert line.sample(0.05).y == pytest.approx(0.25)


class TestPathProgress:
    """Tests for monotonic path travel."""

    def test_advance_is_monotonic_and_clamped(self):
        progress = PathProgress(Polyline.from_points([Vec2(0.5, 0.8), Vec2(0.5, 0.6)]))
        progress.advance(0.05)
        assert progress.traveled == pytest.approx(0.05)

        progress.advance(-0.5)
        assert progress.traveled == pytest.approx(0.05)

        progress.advance(10.0)
        assert progress.done
        assert progress.traveled == pytest.approx(progress.total_length)
        assert progress.position == Vec2(0.5, 0.6)

    def test_done_is_sticky(self):
        progress = PathProgress(Polyline.from_points([Vec2(0.5, 0.8), Vec2(0.5, 0.7)]))
        progress.advance(1.0)
        progress.advance(1.0)
        assert progress.done
        assert progress.remaining == pytest.approx(0.0)

    def test_degenerate_starts_done(self):
        assert PathProgress(Polyline()).done
        assert PathProgress(Polyline.from_points([Vec2(0.5, 0.5)])).done

    def test_look_ahead_does_not_move(self):
        progress = PathProgress(Polyline.from_points([Vec2(0.5, 0.8), Vec2(0.5, 0.6)]))
        ahead = progress.look_ahead(0.1)
        assert ahead.y == pytest.approx(0.7)
        assert progress.traveled == 0.0


class TestPathBuilders:
    """Tests for building motion and route polylines from a formation."""

    def test_no_motion(self, make_player):
        assert len(build_motion_path(make_player("x", 0.5, 0.8))) == 0

    def test_motion_starts_at_alignment(self, make_player):
        player = make_player("x", 0.5, 0.8, motion=[(0.6, 0.8)])
        path = build_motion_path(player)
        assert path.start == Vec2(0.5, 0.8)
        assert path.total_length == pytest.approx(0.1)

    def test_route_starts_where_motion_ends(self, make_player):
        player = make_player("x", 0.5, 0.8, motion=[(0.6, 0.8)], route=[(0.6, 0.7)])
        path = build_route_path(player)
        assert path.start == Vec2(0.6, 0.8)
        assert path.total_length == pytest.approx(0.1)

    def test_option_segments_skipped(self, make_player):
        segments = (
            RouteSegment(points=(Vec2(0.5, 0.7),)),
            RouteSegment(points=(Vec2(0.9, 0.7),), type=SegmentType.OPTION),
            RouteSegment(points=(Vec2(0.5, 0.6),), type=SegmentType.CURVE),
        )
        path = build_route_path(make_player("x", 0.5, 0.8, segments=segments))
        assert path.points == (Vec2(0.5, 0.8), Vec2(0.5, 0.7), Vec2(0.5, 0.6))

    def test_no_route(self, make_player):
        assert build_route_path(make_player("x", 0.5, 0.8)).is_degenerate


# =============================================================================
# Kinematics
# =============================================================================

class TestKinematics:
    """Tests for speed mapping and stepping."""

    def test_speed_range(self):
        assert speed_to_yards_per_second(1) == pytest.approx(10.0)
        assert speed_to_yards_per_second(10) == pytest.approx(22.0)
        assert speed_to_yards_per_second(5) == pytest.approx(10 + 4 * 12 / 9)

    def test_base_speed_normalized(self, model):
        assert model.base_speed(10) == pytest.approx(22 / 64)
        assert model.base_speed() == pytest.approx(model.base_speed(5))

    def test_step_toward_no_overshoot(self):
        target = Vec2(0.5, 0.5)
        arrived = step_toward(Vec2(0.5, 0.6), target, 1.0)
        assert arrived.x == pytest.approx(0.5)
        assert arrived.y == pytest.approx(0.5)
        moved = step_toward(Vec2(0.5, 0.6), target, 0.04)
        assert moved.y == pytest.approx(0.56)
        assert step_toward(target, target, 0.1) == target


# =============================================================================
# Ball Flight
# =============================================================================

class TestThrowPlan:
    """Tests for the in-flight parameter."""

    def test_progress_clamped(self):
        plan = ThrowPlan(start=Vec2(0.5, 0.9), target=Vec2(0.5, 0.5), flight_time=1.0, receiver_id="x")
        assert plan.progress(-1.0) == 0.0
        assert plan.progress(0.25) == pytest.approx(0.25)
        assert plan.progress(3.0) == 1.0
        assert plan.position_at(0.5).y == pytest.approx(0.7)
        assert plan.arrived(1.0)

    def test_zero_flight_time_arrives_immediately(self):
        plan = ThrowPlan(start=Vec2(0.5, 0.9), target=Vec2(0.5, 0.5), flight_time=0.0, receiver_id="x")
        assert plan.progress(0.0) == 1.0


class TestPlanThrow:
    """Tests for lead and inaccuracy."""

    def test_throw_speed_and_inaccuracy(self):
        assert throw_speed(0) == 20
        assert throw_speed(10) == 50
        assert inaccuracy(10) == 0
        assert inaccuracy(5) == pytest.approx(0.015)

    def test_leads_receiver_along_route(self, make_player, make_agent, model, fixed_random):
        qb = make_agent(make_player("qb", 0.5, 0.9, position="QB"))
        receiver = make_agent(make_player("x", 0.5, 0.8, route=[(0.5, 0.5)]))

        plan = plan_throw(qb, receiver, model, fixed_random(0.5))

        flight = 6.4 / 35
        lead = (10 + 4 * 12 / 9) * flight * 0.6 / 64
        assert plan.flight_time == pytest.approx(flight)
        assert plan.distance_yards == pytest.approx(6.4)
        assert plan.target.x == pytest.approx(0.5)
        assert plan.target.y == pytest.approx(0.8 - lead)
        assert plan.receiver_id == "x"
        assert plan.start == qb.pos

    def test_leads_receiver_along_motion(self, make_player, make_agent, model, fixed_random):
        qb = make_agent(make_player("qb", 0.5, 0.9, position="QB"))
        receiver = make_agent(make_player("x", 0.5, 0.8, motion=[(0.9, 0.8)], route=[(0.9, 0.5)]))

        plan = plan_throw(qb, receiver, model, fixed_random(0.5))

        lead = (10 + 4 * 12 / 9) * (6.4 / 35) * 0.6 / 64
        assert plan.target.x == pytest.approx(0.5 + lead)
        assert plan.target.y == pytest.approx(0.8)

    def test_lead_past_motion_continues_into_route(self, make_player, make_agent, model, fixed_random):
        qb = make_agent(make_player("qb", 0.5, 0.9, position="QB"))
        receiver = make_agent(make_player("x", 0.5, 0.8, motion=[(0.51, 0.8)], route=[(0.51, 0.5)]))

        plan = plan_throw(qb, receiver, model, fixed_random(0.5))

        lead = (10 + 4 * 12 / 9) * (6.4 / 35) * 0.6 / 64
        assert plan.target.x == pytest.approx(0.51)
        assert plan.target.y == pytest.approx(0.8 - (lead - 0.01))

    def test_finished_route_targets_receiver(self, make_player, make_agent, model, fixed_random):
        qb = make_agent(make_player("qb", 0.5, 0.9, position="QB"))
        receiver = make_agent(make_player("x", 0.5, 0.8))

        plan = plan_throw(qb, receiver, model, fixed_random(0.5))
        assert plan.target == receiver.pos

    def test_short_throw_has_minimum_flight(self, make_player, make_agent, model, fixed_random):
        qb = make_agent(make_player("qb", 0.5, 0.9, position="QB"))
        receiver = make_agent(make_player("x", 0.5, 0.89))

        plan = plan_throw(qb, receiver, model, fixed_random(0.5))
        assert plan.flight_time == MIN_FLIGHT_TIME

    def test_inaccuracy_offsets_target(self, make_player, make_agent, make_roster_player, model, fixed_random):
        qb = make_agent(make_player("qb", 0.5, 0.9, position="QB"))
        receiver = make_agent(make_player("x", 0.5, 0.8))

        plan = plan_throw(qb, receiver, model, fixed_random(0.0))
        assert plan.target.x == pytest.approx(0.5 - 0.0075)
        assert plan.target.y == pytest.approx(0.8 - 0.0075)

        sharp = make_agent(
            make_player("qb", 0.5, 0.9, position="QB"),
            roster=make_roster_player("qb", offense={"accuracy": 10}),
        )
        plan = plan_throw(sharp, receiver, model, fixed_random(0.0))
        assert plan.target == receiver.pos
