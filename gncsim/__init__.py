"""One-dimensional GNC loop, point-mass physics and propulsion models."""

__version__ = "0.1.0"
__all__ = ["gnc", "physics", "propulsion"]