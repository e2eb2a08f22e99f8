"""Runtime services (telemetry) shared by the scanner components."""

from . import telemetry

__all__ = ["telemetry"]
