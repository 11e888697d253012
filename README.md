# gncsim

Small, dependency-free models for simulating a vehicle along one axis.

- **`gncsim.gnc`** holds a guidance, navigation and control loop.
  - `GuidanceModule(gain=0.1, target=0.0)` turns the distance to a target
    position into a desired velocity: `gain * (target - position)`.
  - `ControlModule(gain=1.0)` turns the velocity error into an acceleration:
    `gain * (desired_velocity - velocity)`.
  - `NavigationModule.update_state(state, acceleration, dt)` advances a
    `State(position, velocity)` in place with constant-acceleration kinematics.
  - `GNCSystem(initial_position, initial_velocity, initial_target)` chains all
    three. It starts with a guidance gain of 0.1 and a control gain of 1.0.
    You can read and set these as `guidance_gain`, `control_gain` and `target`.
    The current state is `state`, and the acceleration from the last `update`
    is `latest_control_acceleration`.
- **`gncsim.physics`** holds the point-mass models.
  - `PhysicsBody(mass, position=0.0, velocity=0.0)` gathers forces passed to
    `apply_force`. On `update(dt)` it integrates them and clears them.
    `reset_force` clears them by hand. `mass` is read-only.
  - `PhysicsEngine.update_bodies(bodies, dt)` steps every body in an iterable.
  - `compute_acceleration(force, mass)` divides a `Vector3` force by a mass.
- **`gncsim.propulsion`** holds the engine model.
  - `PropulsionSystem(fuel_mass, max_thrust)` is an engine with `ignite`,
    `shutdown`, `set_throttle` and `update`.
  - Fuel is burned at `CONSUMPTION_RATE` (0.0001 kg per newton-second).
  - The current values are in `fuel_mass`, `current_thrust` and `running`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Usage

Drive a vehicle toward a target position:

```python
from gncsim.gnc import GNCSystem

gnc = GNCSystem(0.0, 0.0, 100.0)   # position, velocity, target
for _ in range(3000):
    gnc.update(0.1)
print(gnc.state.position, gnc.state.velocity)   # close to 100.0 and 0.0
```

Integrate forces on bodies:

```python
from gncsim.physics import PhysicsBody, PhysicsEngine

bodies = [PhysicsBody(2.0), PhysicsBody(3.0, 5.0, 1.0)]
bodies[0].apply_force(4.0)
bodies[1].apply_force(3.0)
PhysicsEngine().update_bodies(bodies, 2.0)
print(bodies[0].position, bodies[1].position)   # 4.0 9.0
```

Burn fuel:

```python
from gncsim.propulsion import PropulsionSystem

engine = PropulsionSystem(10.0, 5000.0)   # fuel in kg, maximum thrust in N
engine.ignite()
engine.set_throttle(0.5)
engine.update(1.0)
print(engine.fuel_mass)   # 9.75
```

## Errors

- A negative time step passed to `NavigationModule.update_state`,
  `GNCSystem.update` or `PhysicsBody.update` raises `ValueError`.
- Creating a `PhysicsBody` with a mass that is not positive raises `ValueError`.
- A throttle setting outside `[0, 1]` raises `ValueError`.
- Igniting an engine with no fuel raises `RuntimeError`.
- Setting the throttle while the engine is off raises `RuntimeError`.

`PropulsionSystem.update` does nothing while the engine is off. Sometimes an
update needs at least as much fuel as the tank holds. The thrust is then cut to
what the remaining fuel can supply over that step. The tank is left empty and
the engine shuts down.

## What it does not do

This is a library only. It has no command-line program, no plotting and no
saving of results. The three modules are independent of one another. Linking
engine thrust to a body or to the GNC loop is left to the caller.

## Running the tests

```
pytest
```