"""
MixNode - weighted sum of several signal nodes.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations
from typing import Callable, Iterable

import numpy as np

from funcsynth.signal_node import SignalNode, zeros_like
from funcsynth.errors import ConfigurationError
from funcsynth.logger import get_logger

logger = get_logger(__name__)


class MixNode(SignalNode):
    """
    A SignalNode that mixes (adds) its children with individual gains.

        sample(t) = sum(gain_i * child_i.sample(t))

    The integral of a mix is the mix of the children's integrals with the
    same gains. Frequency modulation relies on this: a frequency signal
    built as a sum of ramps, constants and sines can be integrated exactly.

    An empty mix is the zero signal.

    Args:
        items: Iterable of (gain, SignalNode) pairs

    Example:
        # Two sines, the second one quieter
        chord = MixNode([(1.0, SineNode.sin(440.0)), (0.5, SineNode.sin(660.0))])

        # Three voices an octave apart
        organ = MixNode.unison(220.0, 3, SineNode.sin)
    """

    def __init__(self, items: Iterable[tuple[float, SignalNode]]):
        self._items = [(float(gain), node) for gain, node in items]

    @classmethod
    def unison(
        cls,
        pitch: float,
        count: int,
        creator: Callable[[float], SignalNode],
    ) -> MixNode:
        """
        Build `count` voices stacked in octaves around `pitch`.

        Voice k has frequency pitch * 2**k for k in -(count//2) .. count//2,
        and is created by calling creator(frequency).

        Args:
            pitch: Center frequency in Hz
            count: Number of voices (must be odd and positive)
            creator: Function mapping a frequency to a SignalNode

        Raises:
            ConfigurationError: If count is even or not positive
        """
        if count <= 0 or count % 2 == 0:
            raise ConfigurationError(
                f"MixNode.unison requires an odd, positive voice count (got {count})"
            )
        half = count // 2
        return cls(
            (1.0, creator(pitch * 2.0 ** k)) for k in range(-half, half + 1)
        )

    @classmethod
    def from_events(cls, events: Iterable[tuple[float, SignalNode]]) -> MixNode:
        """
        Place each node at an absolute start time.

        Each (start, node) pair becomes ShiftNode(node, -start) with gain 1,
        so that the node's local t = 0 lines up with `start`.
        """
        from funcsynth.shift_node import ShiftNode

        return cls((1.0, ShiftNode(node, -start)) for start, node in events)

    @property
    def items(self) -> list[tuple[float, SignalNode]]:
        """The (gain, node) pairs of this mix."""
        return list(self._items)

    def inputs(self) -> list[SignalNode]:
        return [node for _, node in self._items]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        result = zeros_like(t)
        for gain, node in self._items:
            result = result + gain * node.sample(t)
        return result

    def integral(self) -> SignalNode:
        return MixNode((gain, node.integral()) for gain, node in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        names = [f"{gain}*{node.__class__.__name__}" for gain, node in self._items]
        return f"MixNode({', '.join(names)})"
