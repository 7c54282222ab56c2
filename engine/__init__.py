"""
engine/
-------
Playback layer.

    from engine import Stepper
"""

from engine.stepper import Stepper

__all__ = [
    "Stepper",
]
