"""Stepper motor control with acceleration profiles, pluggable pin output and coordinated multi-axis moves."""

__version__ = "1.60.0"

__all__ = ["gpio", "phases", "profile", "stepper", "multistepper"]