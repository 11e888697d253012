"""Point-mass bodies integrated under constant force over a time step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Vector3:
    """A three-component vector."""

    x: float
    y: float
    z: float


def compute_acceleration(force: Vector3, mass: float) -> Vector3:
    """Return ``force / mass`` component by component."""
    return Vector3(force.x / mass, force.y / mass, force.z / mass)


class PhysicsBody:
    """A one-dimensional body that accumulates forces and integrates them on update."""

    def __init__(self, mass: float, position: float = 0.0, velocity: float = 0.0) -> None:
        if mass <= 0.0:
            raise ValueError("Mass must be positive.")
        self._mass = mass
        self.position = position
        self.velocity = velocity
        self.accumulated_force = 0.0

    @property
    def mass(self) -> float:
        return self._mass

    def apply_force(self, force: float) -> None:
        """Add ``force`` to the force applied during the next update."""
        self.accumulated_force += force

    def reset_force(self) -> None:
        """Clear the accumulated force."""
        self.accumulated_force = 0.0

    def update(self, dt: float) -> None:
        """Integrate over ``dt`` seconds with the accumulated force, then clear it.

        Raises ValueError if ``dt`` is negative.
        """
        if dt < 0.0:
            raise ValueError("Time step dt must be non-negative.")
        acceleration = self.accumulated_force / self._mass
        self.position += self.velocity * dt + 0.5 * acceleration * dt * dt
        self.velocity += acceleration * dt
        self.reset_force()


class PhysicsEngine:
    """Steps a collection of bodies together."""

    def update_bodies(self, bodies: Iterable[PhysicsBody], dt: float) -> None:
        """Update every body in ``bodies`` by ``dt``."""
        for body in bodies:
            body.update(dt)