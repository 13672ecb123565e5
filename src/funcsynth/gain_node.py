"""
GainNode - scales a signal by a constant factor.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import numpy as np

from funcsynth.signal_node import SignalNode


class GainNode(SignalNode):
    """
    A SignalNode that multiplies its source by a constant gain.

    For a time-varying gain (tremolo, envelopes) use AmplitudeModulatorNode.

    Args:
        source: Input SignalNode
        gain: Gain multiplier (default: 1.0)

    Example:
        # Attenuate by half
        quiet = GainNode(source, 0.5)

        # Invert phase
        inverted = GainNode(source, -1.0)
    """

    def __init__(self, source: SignalNode, gain: float = 1.0):
        self._source = source
        self._gain = float(gain)

    @property
    def source(self) -> SignalNode:
        """The input SignalNode."""
        return self._source

    @property
    def gain(self) -> float:
        """The gain factor."""
        return self._gain

    def inputs(self) -> list[SignalNode]:
        return [self._source]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return self._source.sample(t) * self._gain

    def integral(self) -> SignalNode:
        """The integral of gain * x is gain times the integral of x."""
        return GainNode(self._source.integral(), self._gain)

    def __repr__(self) -> str:
        return f"GainNode(source={self._source.__class__.__name__}, gain={self._gain})"
