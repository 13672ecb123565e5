"""
ConstantNode - a source that outputs a constant value.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import numpy as np

from funcsynth.signal_node import SignalNode, SourceNode
from funcsynth.ramp_node import LineNode


class ConstantNode(SourceNode):
    """
    A SourceNode that outputs a constant value for all t.

    Useful for:
    - DC offsets
    - Constant carrier frequencies for FrequencyModulatorNode
    - Sustain segments of envelopes

    The integral of a constant c is the line c*t through the origin.

    Args:
        value: The constant value to output

    Example:
        # DC offset of 0.5
        dc = ConstantNode(0.5)

        # 440 Hz as a frequency signal for FM
        tone = FrequencyModulatorNode(SineNode.sin(1.0), ConstantNode(440.0))
    """

    def __init__(self, value: float):
        self._value = float(value)

    @property
    def value(self) -> float:
        """The constant output value."""
        return self._value

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return np.full(np.shape(t), self._value, dtype=np.float64)

    def integral(self) -> SignalNode:
        """Return LineNode(0, value)."""
        return LineNode(0.0, self._value)

    def __repr__(self) -> str:
        return f"ConstantNode(value={self._value})"
