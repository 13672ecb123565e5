"""
ImpulseNode - a unit impulse at t = 0.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import numpy as np

from funcsynth.signal_node import SourceNode


class ImpulseNode(SourceNode):
    """
    Outputs 1.0 at exactly t == 0 and 0.0 everywhere else.

    When recorded at any sample rate the impulse lands on sample 0, which
    makes ImpulseNode handy as an identity filter kernel.
    """

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return np.where(t == 0.0, 1.0, 0.0)

    def __repr__(self) -> str:
        return "ImpulseNode()"
