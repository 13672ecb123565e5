"""
LineNode and QuadraticNode - polynomial sources in t.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations

import numpy as np

from funcsynth.signal_node import SignalNode, SourceNode
from funcsynth.logger import get_logger

logger = get_logger(__name__)


class LineNode(SourceNode):
    """
    A linear ramp: a0 + a1 * t.

    The line is unbounded in time; wrap it in a GateNode to get a finite
    ramp segment (this is how adsr() builds its attack, decay and release).

    Args:
        a0: Value at t = 0
        a1: Slope (change per second)

    Example:
        # Fade from 0 to 1 over the first two seconds
        fade = GateNode(LineNode.interpolate((0.0, 0.0), (2.0, 1.0)), 0.0, 2.0)
    """

    def __init__(self, a0: float, a1: float):
        self._a0 = float(a0)
        self._a1 = float(a1)

    @classmethod
    def interpolate(
        cls,
        a: tuple[float, float],
        b: tuple[float, float],
    ) -> LineNode:
        """
        Build the line through two (time, value) control points.

        If both points share the same time the slope is undefined; the
        result is then the constant line at a's value.
        """
        (t0, v0), (t1, v1) = a, b
        if t1 == t0:
            logger.debug(
                f"LineNode.interpolate: degenerate interval at t={t0}, "
                f"using constant {v0}"
            )
            return cls(v0, 0.0)
        a1 = (v1 - v0) / (t1 - t0)
        a0 = v0 - t0 * a1
        return cls(a0, a1)

    @property
    def a0(self) -> float:
        return self._a0

    @property
    def a1(self) -> float:
        return self._a1

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return self._a0 + t * self._a1

    def integral(self) -> SignalNode:
        """Return QuadraticNode(0, a0, a1 / 2)."""
        return QuadraticNode(0.0, self._a0, self._a1 / 2.0)

    def __repr__(self) -> str:
        return f"LineNode(a0={self._a0}, a1={self._a1})"


class QuadraticNode(SourceNode):
    """
    A quadratic polynomial: a0 + a1 * t + a2 * t**2.

    Produced by LineNode.integral(); rarely useful as an audio source.
    """

    def __init__(self, a0: float, a1: float, a2: float):
        self._a0 = float(a0)
        self._a1 = float(a1)
        self._a2 = float(a2)

    @property
    def coefficients(self) -> tuple[float, float, float]:
        """(a0, a1, a2)"""
        return (self._a0, self._a1, self._a2)

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return t * t * self._a2 + t * self._a1 + self._a0

    def __repr__(self) -> str:
        return f"QuadraticNode(a0={self._a0}, a1={self._a1}, a2={self._a2})"
