"""
RangeNode - remaps a bipolar signal onto an arbitrary [low, high] band.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import numpy as np

from funcsynth.signal_node import SignalNode
from funcsynth.mix_node import MixNode
from funcsynth.ramp_node import LineNode


class RangeNode(SignalNode):
    """
    Maps a source assumed to lie in [-1, 1] onto [low, high]:

        (x + 1) / 2 * (high - low) + low

    Typical use is turning an LFO into a one-sided modulation signal,
    e.g. a vibrato frequency ratio:

        vibrato = RangeNode(SineNode.sin(5.0), 1.05, 1.10)

    Args:
        source: Input SignalNode (expected range [-1, 1])
        low: Output value for x = -1
        high: Output value for x = +1
    """

    def __init__(self, source: SignalNode, low: float, high: float):
        self._source = source
        self._low = float(low)
        self._high = float(high)

    @property
    def source(self) -> SignalNode:
        return self._source

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    def inputs(self) -> list[SignalNode]:
        return [self._source]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        x = self._source.sample(t)
        return (x + 1.0) / 2.0 * (self._high - self._low) + self._low

    def integral(self) -> SignalNode:
        """(high - low) / 2 * F(t) + (high + low) / 2 * t"""
        return MixNode([
            ((self._high - self._low) / 2.0, self._source.integral()),
            (1.0, LineNode(0.0, (self._high + self._low) / 2.0)),
        ])

    def __repr__(self) -> str:
        return (
            f"RangeNode(source={self._source.__class__.__name__}, "
            f"low={self._low}, high={self._high})"
        )
