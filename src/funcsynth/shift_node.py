"""
ShiftNode and DelayNode - move a signal along the time axis.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import numpy as np

from funcsynth.signal_node import SignalNode


class ShiftNode(SignalNode):
    """
    Evaluates its source at t + offset.

    Sign convention: a positive offset *advances* the signal (what the
    source does at t = offset now happens at t = 0). To place a note at an
    absolute start time s, use ShiftNode(note, -s). DelayNode offers the
    opposite convention.

    Args:
        source: Input SignalNode
        offset: Time offset in seconds

    Example:
        # A note that starts two seconds into the piece
        placed = ShiftNode(note, -2.0)
    """

    def __init__(self, source: SignalNode, offset: float):
        self._source = source
        self._offset = float(offset)

    @property
    def source(self) -> SignalNode:
        return self._source

    @property
    def offset(self) -> float:
        return self._offset

    def inputs(self) -> list[SignalNode]:
        return [self._source]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return self._source.sample(t + self._offset)

    def integral(self) -> SignalNode:
        """
        Shifted integral, re-zeroed at the origin:
        F(t + offset) - F(offset).
        """
        from funcsynth.constant_node import ConstantNode
        from funcsynth.mix_node import MixNode

        source_integral = self._source.integral()
        at_origin = source_integral.sample(self._offset)
        return MixNode([
            (1.0, ShiftNode(source_integral, self._offset)),
            (-1.0, ConstantNode(at_origin)),
        ])

    def __repr__(self) -> str:
        return f"ShiftNode(source={self._source.__class__.__name__}, offset={self._offset})"


class DelayNode(SignalNode):
    """
    Evaluates its source at t - delay.

    Positive delay values push the signal later in time.

    Args:
        source: Input SignalNode
        delay: Delay in seconds

    Example:
        # Simple echo
        echo = MixNode([(1.0, source), (0.5, DelayNode(source.clone(), 0.25))])
    """

    def __init__(self, source: SignalNode, delay: float):
        self._source = source
        self._delay = float(delay)

    @property
    def source(self) -> SignalNode:
        return self._source

    @property
    def delay(self) -> float:
        return self._delay

    def inputs(self) -> list[SignalNode]:
        return [self._source]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return self._source.sample(t - self._delay)

    def integral(self) -> SignalNode:
        """Delayed integral, re-zeroed at the origin: F(t - delay) - F(-delay)."""
        from funcsynth.constant_node import ConstantNode
        from funcsynth.mix_node import MixNode

        source_integral = self._source.integral()
        at_origin = source_integral.sample(-self._delay)
        return MixNode([
            (1.0, DelayNode(source_integral, self._delay)),
            (-1.0, ConstantNode(at_origin)),
        ])

    def __repr__(self) -> str:
        return f"DelayNode(source={self._source.__class__.__name__}, delay={self._delay})"
