"""
SineNode - a sine/cosine oscillator with a closed-form integral.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations

import numpy as np

from funcsynth.signal_node import SignalNode, SourceNode
from funcsynth.constant_node import ConstantNode
from funcsynth.gain_node import GainNode
from funcsynth.mix_node import MixNode
from funcsynth.ramp_node import LineNode
from funcsynth.logger import get_logger

logger = get_logger(__name__)


class SineNode(SourceNode):
    """
    A sine oscillator: sin(2*pi*frequency*t + phase).

    Unlike the other periodic generators, a sine has a closed-form
    antiderivative, so it can be used inside a frequency signal for
    FrequencyModulatorNode (e.g. vibrato via RangeNode(SineNode.sin(5), ...)).

    Args:
        frequency: Frequency in Hz
        phase: Phase offset in radians (default: 0.0)

    Example:
        a440 = SineNode.sin(440.0)
        cosine = SineNode.cos(440.0)
    """

    def __init__(self, frequency: float, phase: float = 0.0):
        self._frequency = float(frequency)
        self._phase = float(phase)

    @classmethod
    def sin(cls, frequency: float) -> SineNode:
        """A sine starting at 0."""
        return cls(frequency, 0.0)

    @classmethod
    def cos(cls, frequency: float) -> SineNode:
        """A cosine (sine with a quarter-period phase advance)."""
        return cls(frequency, np.pi / 2.0)

    @property
    def frequency(self) -> float:
        """Frequency in Hz."""
        return self._frequency

    @property
    def phase(self) -> float:
        """Phase offset in radians."""
        return self._phase

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return np.sin(2.0 * np.pi * self._frequency * t + self._phase)

    def integral(self) -> SignalNode:
        """
        Return (cos(phase) - cos(2*pi*f*t + phase)) / (2*pi*f).

        A zero-frequency sine is the constant sin(phase), whose integral
        is the line sin(phase) * t.
        """
        if self._frequency == 0.0:
            logger.debug("SineNode.integral: zero frequency, integrating as constant")
            return LineNode(0.0, np.sin(self._phase))
        scale = 1.0 / (2.0 * np.pi * self._frequency)
        return MixNode([
            (1.0, GainNode(SineNode(self._frequency, self._phase + np.pi / 2.0), -scale)),
            (scale * np.cos(self._phase), ConstantNode(1.0)),
        ])

    def __repr__(self) -> str:
        return f"SineNode(frequency={self._frequency}, phase={self._phase})"
