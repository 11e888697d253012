import pytest

from gncsim.gnc import (
    ControlModule,
    GNCSystem,
    GuidanceModule,
    NavigationModule,
    State,
)


def test_guidance_set_target():
    guidance = GuidanceModule()
    guidance.target = 50.0
    assert guidance.target == 50.0
    guidance.target = 100.0
    assert guidance.target == 100.0


def test_guidance_set_gain():
    guidance = GuidanceModule()
    guidance.gain = 0.5
    assert guidance.gain == 0.5
    guidance.gain = 1.0
    assert guidance.gain == 1.0


def test_guidance_defaults():
    guidance = GuidanceModule()
    assert guidance.gain == 0.1
    assert guidance.target == 0.0


def test_guidance_compute_desired_velocity():
    guidance = GuidanceModule(0.2, 100.0)
    assert guidance.compute_desired_velocity(State(50.0, 0.0)) == pytest.approx(10.0)


def test_control_set_gain():
    control = ControlModule()
    assert control.gain == 1.0
    control.gain = 1.5
    assert control.gain == 1.5
    control.gain = 2.0
    assert control.gain == 2.0


def test_control_compute_acceleration():
    control = ControlModule(2.0)
    assert control.compute_control_acceleration(15.0, State(0.0, 5.0)) == pytest.approx(20.0)


def test_navigation_update_positive_dt():
    state = State(0.0, 0.0)
    NavigationModule().update_state(state, 10.0, 2.0)
    assert state.position == pytest.approx(20.0, abs=1e-6)
    assert state.velocity == pytest.approx(20.0, abs=1e-6)


def test_navigation_negative_dt_raises():
    state = State(0.0, 0.0)
    with pytest.raises(ValueError):
        NavigationModule().update_state(state, 10.0, -1.0)
    assert state == State(0.0, 0.0)


def test_system_set_gains():
    gnc = GNCSystem(0.0, 0.0, 100.0)
    assert gnc.guidance_gain == 0.1
    assert gnc.control_gain == 1.0
    gnc.guidance_gain = 0.5
    assert gnc.guidance_gain == 0.5
    gnc.control_gain = 2.0
    assert gnc.control_gain == 2.0


def test_system_set_target():
    gnc = GNCSystem(0.0, 0.0, 100.0)
    assert gnc.target == 100.0
    gnc.target = 200.0
    assert gnc.target == 200.0


def test_system_single_update():
    gnc = GNCSystem(0.0, 0.0, 100.0)
    gnc.update(1.0)
    assert gnc.state.position == pytest.approx(5.0, abs=1e-6)
    assert gnc.state.velocity == pytest.approx(10.0, abs=1e-6)
    assert gnc.latest_control_acceleration == pytest.approx(10.0, abs=1e-6)


def test_system_zero_dt_update():
    gnc = GNCSystem(10.0, 2.0, 50.0)
    gnc.update(0.0)
    assert gnc.state.position == pytest.approx(10.0, abs=1e-6)
    assert gnc.state.velocity == pytest.approx(2.0, abs=1e-6)


def test_system_negative_dt_raises():
    gnc = GNCSystem(0.0, 0.0, 100.0)
    with pytest.raises(ValueError):
        gnc.update(-0.5)


def test_system_convergence_to_target():
    gnc = GNCSystem(0.0, 0.0, 100.0)
    for _ in range(3000):
        gnc.update(0.1)
    assert gnc.state.position == pytest.approx(100.0, abs=1e-1)
    assert gnc.state.velocity == pytest.approx(0.0, abs=1e-1)