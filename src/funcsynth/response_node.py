"""
ResponseNode - function composition of two signal nodes.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import numpy as np

from funcsynth.signal_node import SignalNode


class ResponseNode(SignalNode):
    """
    Evaluates a system node at the value of an input node:

        sample(t) = system(input(t))

    The input's output is used as the time coordinate of the system. This
    generalizes FrequencyModulatorNode (whose input is a phase integral) to
    arbitrary shaping, e.g. a waveshaper built from a polynomial node.

    Args:
        input: Node whose value drives the system
        system: Node evaluated at input(t)

    Example:
        # Square a sine by reading it through the parabola x**2
        squared = ResponseNode(SineNode.sin(220.0), QuadraticNode(0.0, 0.0, 1.0))
    """

    def __init__(self, input: SignalNode, system: SignalNode):
        self._input = input
        self._system = system

    @property
    def input(self) -> SignalNode:
        return self._input

    @property
    def system(self) -> SignalNode:
        return self._system

    def inputs(self) -> list[SignalNode]:
        return [self._input, self._system]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return self._system.sample(self._input.sample(t))

    def __repr__(self) -> str:
        return (
            f"ResponseNode(input={self._input.__class__.__name__}, "
            f"system={self._system.__class__.__name__})"
        )
