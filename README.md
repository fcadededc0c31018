# actorforces

Small building blocks that decide, frame by frame, which forces, impulses and
torques a rigid body receives. They are not tied to any engine.

- `actorforces.math3d.Vec3` is an immutable 3D vector. It supports `+`, `-`,
  multiplication by a scalar from either side, negation, `dot`, `length` and
  `safe_normal`. `safe_normal` returns the zero vector when the squared length is
  below the tolerance. The module also defines `ZERO`, `FORWARD` `(1, 0, 0)` and
  `UP` `(0, 0, 1)`.
- `actorforces.forces.AcceleratedForceApplier` applies one of three things to a
  target, chosen with `ForceMode`: a continuous force that ramps up over time
  (`CONTINUOUS_FORCE`), an instant impulse (`INSTANT_IMPULSE`) or a torque
  (`TORQUE_FORCE`).
- `actorforces.torque.TorqueApplier` applies a torque chosen with `TorqueMode`.
  It can be a constant torque (`CONSTANT_TORQUE`), a single angular impulse that
  is applied once only (`IMPULSE_TORQUE`), or a torque plus a damping term that
  opposes the target's angular velocity along the axis (`DAMPED_TORQUE`).
- `actorforces.threshold.AcceleratingTutorialThreshold` moves a value from 0
  toward 1 at an interpolation speed that keeps increasing. It maps the value
  to one of six `Phase` members and calls registered listeners whenever the
  phase changes. The smoothing step is available on its own as `finterp_to`.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Physics targets and debug output

`actorforces.forces.PhysicsTarget` is a plain dataclass with these fields:

- `location`
- `angular_velocity`
- `simulating_physics`
- `applied`, a list of `AppliedForce` records

Each call to `add_force`, `add_impulse`, `add_torque` or `add_angular_impulse`
appends one record. A record holds its `ForceKind`, the vector and the
`ignore_mass` flag. `clear()` empties the list.

An applier only does work while its target has `simulating_physics` set.
`begin_play()` sets that flag if it is off. If no target is assigned,
`begin_play()` logs an error and does nothing else. Calling `apply_force` or
`apply_torque` directly without a target raises `RuntimeError`.

A `DebugDrawer` can be passed as `debug_drawer`. After each tick it collects
`DebugLine` and `DebugLabel` entries in its `lines` and `labels` lists. A drawer
created with `enabled=False` ignores every request.

## Usage

```python
from actorforces.forces import AcceleratedForceApplier, ForceMode, PhysicsTarget

body = PhysicsTarget()
applier = AcceleratedForceApplier(target=body, force_mode=ForceMode.CONTINUOUS_FORCE)
applier.begin_play()          # switches simulation on
for _ in range(60):
    applier.tick(1 / 60)
print(body.applied[-1].vector)
```

```python
from actorforces.torque import TorqueApplier, TorqueMode
from actorforces.forces import PhysicsTarget
from actorforces.math3d import Vec3

body = PhysicsTarget(simulating_physics=True, angular_velocity=Vec3(0, 0, 2))
spinner = TorqueApplier(target=body, torque_mode=TorqueMode.DAMPED_TORQUE)
spinner.tick(1 / 60)          # torque (0, 0, 1000 - 2 * 1)
```

```python
from actorforces.threshold import AcceleratingTutorialThreshold

tutorial = AcceleratingTutorialThreshold()
tutorial.add_listener(lambda phase: print("now in", phase.display_name))
for _ in range(600):
    tutorial.tick(1 / 60)
```

## Defaults

| Setting | `AcceleratedForceApplier` | `TorqueApplier` |
|---|---|---|
| mode | `ForceMode.CONTINUOUS_FORCE` | `TorqueMode.CONSTANT_TORQUE` |
| `force_direction` | `(1, 0, 0)` | n/a |
| `torque_axis` | `(0, 0, 1)` | `(0, 0, 1)` |
| `force_magnitude` | 1000 | n/a |
| `torque_magnitude` | 500 | 1000 |
| `damping_factor` | n/a | 1 |
| `ignore_mass` | `False` | `False` |

Directions and axes are normalised before they are used. In continuous mode,
`current_force_magnitude` grows by `force_magnitude * delta_time` on every tick
and is clamped to the range from 0 to ten times `force_magnitude`. In impulse
mode an impulse is applied on every tick and `current_force_magnitude` is reset
to 0.

`AcceleratingTutorialThreshold` starts with `base_interp_speed` 0.1. Its speed
grows by `interp_acceleration` (0.3) times `delta_time` on every tick. The
phase is `floor(threshold * 5)`, clamped to the range 0 to 5.

## What this package does not do

It does not integrate motion. Forces, impulses and torques are recorded on the
`PhysicsTarget`. They do not change its location or angular velocity. Those
fields must be updated by your own simulation. The debug drawer only collects
lines and labels and does not render anything.