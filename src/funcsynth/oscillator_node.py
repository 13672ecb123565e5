"""
Naive periodic oscillators: sawtooth, square and triangle.

These generators are not band-limited and have no integral(); use them as
carriers, not inside frequency signals.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import numpy as np

from funcsynth.signal_node import SourceNode


class SawtoothNode(SourceNode):
    """
    Rising sawtooth in [-1, 1): 2 * frac(frequency * t) - 1.

    Args:
        frequency: Frequency in Hz
    """

    def __init__(self, frequency: float):
        self._frequency = float(frequency)

    @property
    def frequency(self) -> float:
        return self._frequency

    def _sample(self, t: np.ndarray) -> np.ndarray:
        x = t * self._frequency
        return (x - np.floor(x)) * 2.0 - 1.0

    def __repr__(self) -> str:
        return f"SawtoothNode(frequency={self._frequency})"


class SquareNode(SourceNode):
    """
    Pulse wave: +1 for the first `pulse_width` fraction of each period,
    -1 for the rest.

    Args:
        frequency: Frequency in Hz
        pulse_width: Duty cycle in [0, 1] (default: 0.5, a square wave)
    """

    def __init__(self, frequency: float, pulse_width: float = 0.5):
        if not 0.0 <= pulse_width <= 1.0:
            raise ValueError(f"pulse_width must be in [0, 1], got {pulse_width}")
        self._frequency = float(frequency)
        self._pulse_width = float(pulse_width)

    @property
    def frequency(self) -> float:
        return self._frequency

    @property
    def pulse_width(self) -> float:
        return self._pulse_width

    def _sample(self, t: np.ndarray) -> np.ndarray:
        x = t * self._frequency
        return np.where(x - np.floor(x) < self._pulse_width, 1.0, -1.0)

    def __repr__(self) -> str:
        return f"SquareNode(frequency={self._frequency}, pulse_width={self._pulse_width})"


class TriangleNode(SourceNode):
    """
    Triangle wave in [-1, 1], equal to -1 at t = 0 and +1 half a period later.

    Args:
        frequency: Frequency in Hz
    """

    def __init__(self, frequency: float):
        self._frequency = float(frequency)

    @property
    def frequency(self) -> float:
        return self._frequency

    def _sample(self, t: np.ndarray) -> np.ndarray:
        x = t * self._frequency
        return 2.0 * np.abs(2.0 * (x - np.floor(x + 0.5))) - 1.0

    def __repr__(self) -> str:
        return f"TriangleNode(frequency={self._frequency})"
