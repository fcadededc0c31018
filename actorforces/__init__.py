"""Per-frame force, impulse and torque appliers for rigid bodies, and an accelerating phase threshold."""

__version__ = "0.1.0"
__all__ = ["math3d", "forces", "threshold", "torque"]