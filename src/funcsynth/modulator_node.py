"""
Modulator nodes: amplitude, frequency, phase and time-scale modulation.

All modulators own a carrier and a modulating signal and sample both at
the same t. They differ in where the modulator is applied:

    AmplitudeModulatorNode   carrier(t) * modulator(t)
    FrequencyModulatorNode   carrier(integral(frequency)(t))
    PhaseModulatorNode       carrier(t + modulator(t))
    TimeScaleModulatorNode   carrier(t * modulator(t))

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations

import numpy as np

from funcsynth.signal_node import SignalNode


class AmplitudeModulatorNode(SignalNode):
    """
    Product of a carrier and a modulator.

    Args:
        carrier: The signal being modulated
        modulator: The amplitude signal (e.g. an adsr() envelope or a
            RangeNode tremolo)

    Example:
        # A sawtooth shaped by an envelope
        note = AmplitudeModulatorNode(SawtoothNode(220.0), adsr(0.1, 0.5, 0.0, 0.1, 0.1))
    """

    def __init__(self, carrier: SignalNode, modulator: SignalNode):
        self._carrier = carrier
        self._modulator = modulator

    @property
    def carrier(self) -> SignalNode:
        return self._carrier

    @property
    def modulator(self) -> SignalNode:
        return self._modulator

    def inputs(self) -> list[SignalNode]:
        return [self._carrier, self._modulator]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return self._carrier.sample(t) * self._modulator.sample(t)

    def __repr__(self) -> str:
        return (
            f"AmplitudeModulatorNode(carrier={self._carrier.__class__.__name__}, "
            f"modulator={self._modulator.__class__.__name__})"
        )


class FrequencyModulatorNode(SignalNode):
    """
    Drives a carrier's time argument by the integral of a frequency signal.

        sample(t) = carrier(phase_integral(t)),  phase_integral = ∫ frequency

    The carrier is read as a function of "phase time": a carrier with
    frequency 1 Hz played through a frequency signal f(t) sounds at f(t) Hz,
    and a carrier at frequency c sounds at c * f(t) Hz. Because the phase
    is an exact antiderivative (not a running sum), the result is
    phase-continuous and stays a pure function of t.

    The integral is computed once, at construction.

    Args:
        carrier: The signal being modulated
        frequency: Instantaneous frequency (ratio) signal; must support
            integral()

    Raises:
        IntegralUnavailableError: If frequency has no closed-form integral

    Example:
        # Sawtooth with a 5 Hz vibrato between +5% and +10% pitch
        vibrato = RangeNode(SineNode.sin(5.0), 1.05, 1.10)
        tone = FrequencyModulatorNode(SawtoothNode(440.0), vibrato)
    """

    def __init__(self, carrier: SignalNode, frequency: SignalNode):
        self._carrier = carrier
        self._phase_integral = frequency.integral()

    @classmethod
    def from_integral(
        cls,
        carrier: SignalNode,
        phase_integral: SignalNode,
    ) -> FrequencyModulatorNode:
        """Build a modulator from an already integrated frequency signal."""
        node = cls.__new__(cls)
        node._carrier = carrier
        node._phase_integral = phase_integral
        return node

    @property
    def carrier(self) -> SignalNode:
        return self._carrier

    @property
    def phase_integral(self) -> SignalNode:
        return self._phase_integral

    def inputs(self) -> list[SignalNode]:
        return [self._carrier, self._phase_integral]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return self._carrier.sample(self._phase_integral.sample(t))

    def __repr__(self) -> str:
        return (
            f"FrequencyModulatorNode(carrier={self._carrier.__class__.__name__}, "
            f"phase_integral={self._phase_integral.__class__.__name__})"
        )


class PhaseModulatorNode(SignalNode):
    """
    Shifts the carrier's input by the modulator: carrier(t + modulator(t)).

    Args:
        carrier: The signal being modulated
        modulator: Time offset signal, in seconds
    """

    def __init__(self, carrier: SignalNode, modulator: SignalNode):
        self._carrier = carrier
        self._modulator = modulator

    @property
    def carrier(self) -> SignalNode:
        return self._carrier

    @property
    def modulator(self) -> SignalNode:
        return self._modulator

    def inputs(self) -> list[SignalNode]:
        return [self._carrier, self._modulator]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return self._carrier.sample(t + self._modulator.sample(t))

    def __repr__(self) -> str:
        return (
            f"PhaseModulatorNode(carrier={self._carrier.__class__.__name__}, "
            f"modulator={self._modulator.__class__.__name__})"
        )


class TimeScaleModulatorNode(SignalNode):
    """
    Scales the carrier's input by the modulator: carrier(t * modulator(t)).

    Args:
        carrier: The signal being modulated
        modulator: Time scale factor signal
    """

    def __init__(self, carrier: SignalNode, modulator: SignalNode):
        self._carrier = carrier
        self._modulator = modulator

    @property
    def carrier(self) -> SignalNode:
        return self._carrier

    @property
    def modulator(self) -> SignalNode:
        return self._modulator

    def inputs(self) -> list[SignalNode]:
        return [self._carrier, self._modulator]

    def _sample(self, t: np.ndarray) -> np.ndarray:
        return self._carrier.sample(t * self._modulator.sample(t))

    def __repr__(self) -> str:
        return (
            f"TimeScaleModulatorNode(carrier={self._carrier.__class__.__name__}, "
            f"modulator={self._modulator.__class__.__name__})"
        )
