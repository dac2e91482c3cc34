"""Infrastructure services."""

from habitual.infrastructure.metrics import MetricsRecorder

__all__ = ["MetricsRecorder"]
