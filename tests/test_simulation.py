"""
Tests for Simulation Module
===========================

Tests the fleet clock, settings, ship lookup, the force inspector and the
command line entry point.
"""

import json
import math
import threading
import pytest

from sailsim.geometry import Vector2, bound_angle
from sailsim.main import main
from sailsim.simulation.clock import (
    DELTA_TIME, Simulation, SimConfig, SimSettings, default_population,
)
from sailsim.simulation.instruments import debug_ship_physics


class TestSimulationClock:
    """Tests for stepping and resetting the fleet."""

    def test_default_fleet(self, simulation):
        population = simulation.get_population()
        assert len(population) == 3
        assert [ship.location for ship in population] == [
            Vector2(50.0, 25.0), Vector2(50.0, 50.0), Vector2(50.0, 75.0),
        ]
        for ship in population:
            assert ship.heading == pytest.approx(-math.pi)
            assert not ship.is_moving()

    def test_step_counts(self, simulation):
        assert simulation.step_count == 0
        assert simulation.step() == 1
        assert simulation.step() == 2
        assert simulation.step_count == 2

    def test_reset(self, simulation):
        for _ in range(5):
            simulation.step()
        simulation.set_ship_controls(0, [2.0], 0.4)
        simulation.reset()

        assert simulation.step_count == 0
        assert simulation.get_population() == default_population(simulation.config)

    def test_calm_step_changes_nothing(self, calm_simulation):
        """No wind and no motion: a tick is a no-op."""
        before = calm_simulation.get_population()
        calm_simulation.step()
        assert calm_simulation.get_population() == before

    def test_downwind_first_step(self, simulation):
        """Default fleet with a 5 m/s wind from astern starts to move after one tick."""
        before = simulation.get_ship(0)
        simulation.step()
        after = simulation.get_ship(0)

        assert after.velocity.magnitude() > 0.0
        # The eased default mainsheet lets the sail swing out to one side,
        # so its force acts off the hull centreline and the ship starts to turn.
        assert after.rot_velocity != 0.0
        turned = bound_angle(after.heading - before.heading)
        assert turned == pytest.approx(after.rot_velocity * DELTA_TIME, abs=1e-12)

    def test_wind_pushes_fleet_back(self, simulation):
        """Running before the wind, the ships are pushed towards -x."""
        for _ in range(30):
            simulation.step()
        for ship in simulation.get_population():
            assert ship.velocity.x < 0.0

    def test_ships_are_independent(self, simulation):
        """Identical ships in identical conditions stay identical."""
        for _ in range(10):
            simulation.step()
        first, second, _ = simulation.get_population()
        assert first.velocity.x == pytest.approx(second.velocity.x)
        assert first.location.x == pytest.approx(second.location.x)

    def test_concurrent_steps(self, simulation):
        threads = [threading.Thread(target=lambda: [simulation.step() for _ in range(5)])
                   for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert simulation.step_count == 20


class TestSettings:
    """Tests for the shared wind settings."""

    def test_initial_settings(self, simulation):
        settings = simulation.get_settings()
        assert settings == SimSettings(0.0, 5.0)

    def test_set_settings(self, simulation):
        simulation.set_settings(1.0, 8.0)
        settings = simulation.get_settings()
        assert settings.wind_angle == pytest.approx(1.0)
        assert settings.wind_speed == 8.0

    def test_wind_angle_wrapped(self, simulation):
        simulation.set_settings(3 * math.pi / 2, 2.0)
        assert simulation.get_settings().wind_angle == pytest.approx(-math.pi / 2)

    def test_negative_speed_rejected(self, simulation):
        with pytest.raises(ValueError):
            simulation.set_settings(0.0, -1.0)
        assert simulation.get_settings().wind_speed == 5.0

    def test_settings_copy(self, simulation):
        settings = simulation.get_settings()
        settings.wind_speed = 99.0
        assert simulation.get_settings().wind_speed == 5.0

    def test_to_dict(self):
        assert SimSettings(0.5, 3.0).to_dict() == {'wind_angle': 0.5, 'wind_speed': 3.0}


class TestShipAccess:
    """Tests for ship lookup and controls."""

    def test_get_ship(self, simulation):
        assert simulation.get_ship(1).location == Vector2(50.0, 50.0)

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_ship_out_of_range(self, simulation, index):
        assert simulation.get_ship(index) is None

    def test_population_is_a_copy(self, simulation):
        population = simulation.get_population()
        population[0].mainsheet_lengths[0] = 1.0
        population[0].location = Vector2(0.0, 0.0)
        ship = simulation.get_ship(0)
        assert ship.mainsheet_lengths == [7.0]
        assert ship.location == Vector2(50.0, 25.0)

    def test_set_population(self, simulation, ship):
        simulation.set_population([ship])
        ship.rudder_angle = 1.0
        assert len(simulation.get_population()) == 1
        assert simulation.get_ship(0).rudder_angle == 0.0

    def test_set_ship_controls(self, simulation):
        simulation.set_ship_controls(2, [3.5], 0.25)
        ship = simulation.get_ship(2)
        assert ship.mainsheet_lengths == [3.5]
        assert ship.rudder_angle == pytest.approx(0.25)

    def test_hauling_in_pinned_sail(self, simulation):
        """Shortening the mainsheet of a pinned sail pulls it inside the new limit."""
        simulation.step()
        assert abs(simulation.get_ship(0).trim_angles[0]) == pytest.approx(math.pi / 3)

        simulation.set_ship_controls(0, [0.0], 0.0)
        assert abs(simulation.get_ship(0).trim_angles[0]) <= 0.0

    def test_set_controls_missing_ship_ignored(self, simulation):
        before = simulation.get_population()
        simulation.set_ship_controls(7, [3.5], 0.25)
        assert simulation.get_population() == before

    def test_set_controls_wrong_sail_count(self, simulation):
        with pytest.raises(ValueError):
            simulation.set_ship_controls(0, [1.0, 2.0], 0.0)

    @pytest.mark.parametrize("point,expected", [
        ((50.0, 26.0), 0),
        ((50.0, 50.0), 1),
        ((53.0, 77.0), 2),
        ((0.0, 0.0), None),
        ((50.0, 30.0), None),
    ])
    def test_find_ship_near(self, simulation, point, expected):
        assert simulation.find_ship_near(Vector2(*point)) == expected

    def test_custom_fleet(self):
        sim = Simulation(SimConfig(initial_positions=[(0.0, 0.0)], initial_heading=0.0))
        population = sim.get_population()
        assert len(population) == 1
        assert population[0].heading == 0.0


class TestDebugShipPhysics:
    """Tests for the single-ship force inspector."""

    def test_readouts_first(self):
        report = debug_ship_physics(0.0, 5.0, Vector2.zeros(), 0.0, math.pi, [7.0], 0.0)
        names = [f.name for f in report.forces]
        assert names[:4] == ["Wind", "Velocity", "Apparent Wind", "Rotation"]
        assert names[4:] == ["Sail 0 Lift", "Sail 0 Drag"]

    def test_wind_readout(self):
        report = debug_ship_physics(0.0, 5.0, Vector2.zeros(), 0.0, math.pi, [7.0], 0.0)
        wind = report.forces[0]
        assert wind.point == Vector2(0.0, 13.0)
        assert wind.vector.x == pytest.approx(-5.0)
        assert report.forces[3].point == Vector2(13.0, 0.0)

    def test_before_and_after(self):
        report = debug_ship_physics(0.0, 5.0, Vector2.zeros(), 0.0, math.pi, [7.0], 0.0)
        assert report.before.velocity == Vector2.zeros()
        assert report.after.velocity.magnitude() > 0.0
        assert report.before.location == Vector2.zeros()

    def test_before_holds_previous_trim(self):
        """Sail trim happens during the tick, so only after shows it."""
        report = debug_ship_physics(0.0, 5.0, Vector2.zeros(), 0.0, math.pi, [7.0], 0.0)
        assert report.before.trim_angles == [0.0]
        assert report.after.trim_angles[0] == pytest.approx(-math.pi / 3)

    def test_report_to_dict(self):
        report = debug_ship_physics(0.0, 0.0, Vector2(1.0, 0.0), 0.0, 0.0, [7.0], 0.0)
        data = report.to_dict()
        assert len(data['forces']) == 4 + 10
        assert data['before']['speed'] == pytest.approx(1.0)
        json.dumps(data)


class TestCommandLine:
    """Tests for the sailsim command."""

    def test_coefficients(self, capsys):
        assert main(["coefficients", "--step", "10"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data['angle_deg']) == len(data['lift']) == len(data['drag']) == 18
        assert data['angle_deg'][9] == pytest.approx(90.0)

    def test_run(self, capsys):
        assert main(["run", "--steps", "3"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['step'] == 3
        assert len(data['ships']) == 3
        assert data['settings']['wind_speed'] == 5.0

    def test_forces(self, capsys):
        assert main(["forces", "--wind-speed", "4", "--mainsheet", "5"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['forces'][0]['name'] == "Wind"
        assert data['before']['mainsheet_lengths'] == [5.0]

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            main([])
