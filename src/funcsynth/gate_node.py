"""
GateNode - restricts a signal to a half-open time interval.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import numpy as np

from funcsynth.signal_node import SignalNode
from funcsynth.constant_node import ConstantNode
from funcsynth.mix_node import MixNode
from funcsynth.errors import ConfigurationError


class GateNode(SignalNode):
    """
    Passes its source through inside [start, end) and outputs 0 elsewhere.

    The interval is half-open so that gates placed back to back
    ([a, b), [b, c), ...) never overlap: exactly one of them is open at
    any t. adsr() relies on this.

    The integral of a gated signal is itself gated, and re-zeroed at the
    gate's opening so that it starts from 0 at t = start:

        Gate(F - F(start), start, end)

    Gating twice with the same interval is the same as gating once.

    Args:
        source: Input SignalNode
        start: Opening time in seconds (inclusive)
        end: Closing time in seconds (exclusive)

    Raises:
        ConfigurationError: If start > end

    Example:
        # A 440 Hz tone sounding from t = 1 to t = 2
        tone = GateNode(SineNode.sin(440.0), 1.0, 2.0)
    """

    def __init__(self, source: SignalNode, start: float, end: float):
        if start > end:
            raise ConfigurationError(
                f"GateNode start ({start}) must be less than or equal to end ({end})"
            )
        self._source = source
        self._start = float(start)
        self._end = float(end)

    @property
    def source(self) -> SignalNode:
        return self._source

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    def inputs(self) -> list[SignalNode]:
        return [self._source]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        is_open = (t >= self._start) & (t < self._end)
        return np.where(is_open, self._source.sample(t), 0.0)

    def integral(self) -> SignalNode:
        source_integral = self._source.integral()
        at_start = source_integral.sample(self._start)
        return GateNode(
            MixNode([(1.0, source_integral), (-1.0, ConstantNode(at_start))]),
            self._start,
            self._end,
        )

    def __repr__(self) -> str:
        return (
            f"GateNode(source={self._source.__class__.__name__}, "
            f"start={self._start}, end={self._end})"
        )
