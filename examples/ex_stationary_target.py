"""Core-only example (no GrADyS-SIM runtime required).

This script demonstrates the *pure* solver functions exposed by
`move_towards.core`:

- position mode: next position + velocity to store for the next call
- force mode: acceleration an external integrator should apply

It intentionally does NOT build a GrADyS-SIM NG simulation. For the full
integration example (handler + protocol + visualization), use `main.py` and
`protocol.py` at the repository root.

Usage:
    python examples/ex_stationary_target.py
"""

from move_towards import move_towards, move_towards_force


def simulate_stationary_target():
    """
    Drive one axis from 0 to 10 with bounded acceleration.
    """
    print("Core-only demo: bounded-acceleration move towards a stationary target")

    dt = 0.1              # Time step (s)
    acceleration = 5.0    # Max acceleration (m/s²)
    target = 10.0

    position = 0.0
    velocity = 0.0

    print(f"Target: {target} m, a_max: {acceleration} m/s², dt: {dt} s")
    print("-" * 52)
    print(f"{'t (s)':>6} | {'pos (m)':>9} | {'vel (m/s)':>9} | {'force (m/s²)':>12}")
    print("-" * 52)

    for step in range(41):
        time = step * dt
        force = move_towards_force(position, target, velocity, acceleration, dt)

        if step % 4 == 0:
            print(f"{time:>6.1f} | {position:>9.4f} | {velocity:>9.4f} | {force:>12.4f}")

        position, velocity = move_towards(position, target, velocity, acceleration, dt)

    print("-" * 52)
    print(f"Final position: {position:.4f} m")
    print(f"Final velocity: {velocity:.4f} m/s")


if __name__ == "__main__":
    simulate_stationary_target()
