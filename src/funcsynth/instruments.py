"""
Instrument presets.

An instrument turns (note frequency, length in seconds, volume) into a
SignalNode that starts at t = 0. Presets are fixed recipes built from the
node algebra; the MML compiler calls play() once per note.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from abc import ABC, abstractmethod

from funcsynth.signal_node import SignalNode
from funcsynth.envelope import adsr
from funcsynth.gain_node import GainNode
from funcsynth.mix_node import MixNode
from funcsynth.modulator_node import AmplitudeModulatorNode, FrequencyModulatorNode
from funcsynth.oscillator_node import SawtoothNode
from funcsynth.range_node import RangeNode
from funcsynth.sine_node import SineNode


class Instrument(ABC):
    """Base class for instruments used by compile_mml()."""

    @abstractmethod
    def play(self, note: float, length: float, volume: float) -> SignalNode:
        """
        Build the node for one note.

        Args:
            note: Frequency in Hz (0.0 for rests)
            length: Nominal note length in seconds
            volume: Volume in [0, ~0.6]

        Returns:
            A SignalNode whose t = 0 is the note's onset
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class DrumInstrument(Instrument):
    """
    A pitched percussive thump: a low sawtooth with a short envelope,
    swept in pitch by a second envelope. Ignores the note length.
    """

    def play(self, note: float, length: float, volume: float) -> SignalNode:
        body = AmplitudeModulatorNode(
            SawtoothNode(note / 32.0),
            adsr(0.1, 0.1, 0.0, 0.1, 0.1),
        )
        return GainNode(
            FrequencyModulatorNode(body, adsr(0.05, 1.0, 0.05, 0.05, 0.1)),
            0.2 * volume,
        )


class DummyInstrument(Instrument):
    """A sawtooth lead with a 5 Hz vibrato."""

    def play(self, note: float, length: float, volume: float) -> SignalNode:
        body = AmplitudeModulatorNode(
            SawtoothNode(note),
            adsr(0.1, length, 0.0, 0.1, 0.1),
        )
        return GainNode(
            FrequencyModulatorNode(body, RangeNode(SineNode.sin(5.0), 1.05, 1.10)),
            0.1 * volume,
        )


class LegitInstrument(Instrument):
    """Seven sines stacked in octaves, with a 4 Hz tremolo."""

    def play(self, note: float, length: float, volume: float) -> SignalNode:
        organ = MixNode([(0.1, MixNode.unison(note, 7, SineNode.sin))])
        tremolo = AmplitudeModulatorNode(organ, RangeNode(SineNode.sin(4.0), 0.3, 1.0))
        return GainNode(
            AmplitudeModulatorNode(tremolo, adsr(0.1, length, 0.0, 0.1, 0.1)),
            volume,
        )


INSTRUMENTS: dict[str, type[Instrument]] = {
    "drum": DrumInstrument,
    "dummy": DummyInstrument,
    "legit": LegitInstrument,
}


def get_instrument(name: str) -> Instrument:
    """
    Look up a preset by name.

    Raises:
        KeyError: If no preset has that name
    """
    try:
        return INSTRUMENTS[name.lower()]()
    except KeyError:
        raise KeyError(
            f"unknown instrument {name!r}; choose one of {sorted(INSTRUMENTS)}"
        ) from None
