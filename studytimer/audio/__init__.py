"""Audio package."""

from .alert import AlertSound, generate_alert

__all__ = ["AlertSound", "generate_alert"]
