"""Runtime services shared by every layer (telemetry)."""

from . import telemetry

__all__ = ["telemetry"]
