"""
SignalNode and SourceNode abstract base classes.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations
import copy
from abc import ABC, abstractmethod
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from funcsynth.errors import IntegralUnavailableError


class SignalNode(ABC):
    """
    Abstract base class for all signal nodes.

    A SignalNode is a pure function of time: sample(t) returns the amplitude
    of the signal at time t (in seconds). Nodes form a tree, where:
    - Sources (SourceNode subclasses) have no inputs
    - Combinators own one or more child SignalNodes

    A node never shares a child with another node. To reuse a subtree, call
    clone() and hand the copy to the second owner.

    Nodes are immutable once constructed, so the same node may be sampled
    from any number of threads, at any time, in any order.

    sample() accepts either a scalar time or a numpy array of times. The
    array form is how the renderer evaluates whole buffers at once; it is
    elementwise identical to calling sample() on each time separately.
    """

    def sample(self, t: Union[float, ArrayLike]) -> Union[float, NDArray[np.float64]]:
        """
        Evaluate the signal at time t.

        Args:
            t: Time in seconds, either a scalar or an array of times

        Returns:
            A float for scalar t, otherwise a float64 array shaped like t
        """
        times = np.asarray(t, dtype=np.float64)
        values = self._sample(times)
        if times.ndim == 0:
            return float(values)
        return np.asarray(values, dtype=np.float64)

    @abstractmethod
    def _sample(self, t: NDArray[np.float64]) -> NDArray[np.float64]:
        """
        Actual evaluation logic, implemented by subclasses.

        Args:
            t: float64 array of times (possibly 0-dimensional)

        Returns:
            float64 array with the same shape as t
        """
        pass

    def integral(self) -> SignalNode:
        """
        Return a node for the antiderivative of this signal.

        The antiderivative is normalized so that integral().sample(0) == 0.

        Raises:
            IntegralUnavailableError: If this node has no closed-form
                antiderivative
        """
        raise IntegralUnavailableError(
            f"{self.__class__.__name__} has no closed-form integral"
        )

    @abstractmethod
    def inputs(self) -> list[SignalNode]:
        """
        Return the list of child SignalNodes.

        Returns:
            List of children (empty for sources)
        """
        pass

    def clone(self) -> SignalNode:
        """Return a deep copy of this node and its whole subtree."""
        return copy.deepcopy(self)


class SourceNode(SignalNode):
    """
    Abstract base class for source SignalNodes (no inputs).

    Sources compute their output from their own parameters only
    (constants, oscillators, recorded buffers).
    """

    def inputs(self) -> list[SignalNode]:
        """Sources have no inputs."""
        return []


def zeros_like(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return a float64 array of zeros shaped like t."""
    return np.zeros(np.shape(t), dtype=np.float64)
