"""Internal subsystems for shouldkit."""

__version__ = "0.1.0"
