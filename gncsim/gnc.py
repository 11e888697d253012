"""Guidance, navigation and control loop for a one-dimensional body."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class State:
    """Position and velocity of the controlled body."""

    position: float
    velocity: float


@dataclass
class GuidanceModule:
    """Turns the position error into a desired velocity with a proportional gain."""

    gain: float = 0.1
    target: float = 0.0

    def compute_desired_velocity(self, state: State) -> float:
        """Return ``gain * (target - position)``."""
        return self.gain * (self.target - state.position)


@dataclass
class ControlModule:
    """Turns the velocity error into an acceleration with a proportional gain."""

    gain: float = 1.0

    def compute_control_acceleration(self, desired_velocity: float, state: State) -> float:
        """Return ``gain * (desired_velocity - velocity)``."""
        return self.gain * (desired_velocity - state.velocity)


class NavigationModule:
    """Integrates an acceleration into a state with constant-acceleration kinematics."""

    def update_state(self, state: State, acceleration: float, dt: float) -> None:
        """Advance ``state`` in place by ``dt`` seconds.

        Raises ValueError if ``dt`` is negative.
        """
        if dt < 0:
            raise ValueError("dt cannot be negative")
        state.position += state.velocity * dt + 0.5 * acceleration * dt * dt
        state.velocity += acceleration * dt


@dataclass
class GNCSystem:
    """Guidance, control and navigation combined into one closed loop."""

    initial_position: float
    initial_velocity: float
    initial_target: float
    state: State = field(init=False)
    guidance: GuidanceModule = field(init=False)
    control: ControlModule = field(init=False)
    navigation: NavigationModule = field(init=False, default_factory=NavigationModule)
    latest_control_acceleration: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.state = State(self.initial_position, self.initial_velocity)
        self.guidance = GuidanceModule(0.1, self.initial_target)
        self.control = ControlModule(1.0)

    @property
    def guidance_gain(self) -> float:
        return self.guidance.gain

    @guidance_gain.setter
    def guidance_gain(self, gain: float) -> None:
        self.guidance.gain = gain

    @property
    def control_gain(self) -> float:
        return self.control.gain

    @control_gain.setter
    def control_gain(self, gain: float) -> None:
        self.control.gain = gain

    @property
    def target(self) -> float:
        return self.guidance.target

    @target.setter
    def target(self, target: float) -> None:
        self.guidance.target = target

    def update(self, dt: float) -> None:
        """Run one guidance-control-navigation step of length ``dt``."""
        desired_velocity = self.guidance.compute_desired_velocity(self.state)
        acceleration = self.control.compute_control_acceleration(desired_velocity, self.state)
        self.latest_control_acceleration = acceleration
        self.navigation.update_state(self.state, acceleration, dt)