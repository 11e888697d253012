"""A throttleable engine that burns a finite fuel supply."""

from __future__ import annotations

CONSUMPTION_RATE = 0.0001
"""Fuel burned per unit of thrust per second, in kg/(N*s)."""


class PropulsionSystem:
    """An engine with a fuel mass in kilograms and a maximum thrust in newtons."""

    def __init__(self, fuel_mass: float, max_thrust: float) -> None:
        self.fuel_mass = fuel_mass
        self.max_thrust = max_thrust
        self.current_thrust = 0.0
        self.running = False
        self.consumption_rate = CONSUMPTION_RATE

    def ignite(self) -> None:
        """Start the engine.

        Raises RuntimeError if there is no fuel.
        """
        if self.fuel_mass <= 0:
            raise RuntimeError("Cannot ignite: No fuel available!")
        self.running = True

    def shutdown(self) -> None:
        """Stop the engine and drop thrust to zero."""
        self.running = False
        self.current_thrust = 0.0

    def set_throttle(self, throttle: float) -> None:
        """Set thrust to ``throttle`` times the maximum.

        Raises ValueError if ``throttle`` is outside [0, 1] and RuntimeError if
        the engine is not running.
        """
        if not 0.0 <= throttle <= 1.0:
            raise ValueError("Throttle must be in the range [0, 1].")
        if not self.running:
            raise RuntimeError("Engine not running. Ignite the engine first.")
        self.current_thrust = self.max_thrust * throttle

    def update(self, dt: float) -> None:
        """Burn fuel for ``dt`` seconds at the current thrust.

        If the fuel runs out, thrust is reduced to what the remaining fuel could
        sustain over ``dt``, the fuel is emptied and the engine stops.
        """
        if not self.running:
            return
        fuel_needed = self.current_thrust * dt * self.consumption_rate
        if fuel_needed >= self.fuel_mass:
            self.current_thrust = self.fuel_mass / (dt * self.consumption_rate)
            self.fuel_mass = 0.0
            self.running = False
        else:
            self.fuel_mass -= fuel_needed