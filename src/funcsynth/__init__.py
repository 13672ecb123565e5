"""
funcsynth - a functional audio synthesizer.

Signals are pure functions of time built from composable nodes; pieces are
written in MML and rendered into sample buffers.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from funcsynth.config import (
    ErrorMode,
    set_error_mode,
    get_error_mode,
    handle_error,
    set_sample_rate,
    get_sample_rate,
)
from funcsynth.errors import (
    SynthError,
    ConfigurationError,
    ParseError,
    ResourceError,
    RenderError,
    IntegralUnavailableError,
)
from funcsynth.signal_node import SignalNode, SourceNode
from funcsynth.constant_node import ConstantNode
from funcsynth.ramp_node import LineNode, QuadraticNode
from funcsynth.sine_node import SineNode
from funcsynth.oscillator_node import SawtoothNode, SquareNode, TriangleNode
from funcsynth.impulse_node import ImpulseNode
from funcsynth.mix_node import MixNode
from funcsynth.gain_node import GainNode
from funcsynth.shift_node import ShiftNode, DelayNode
from funcsynth.gate_node import GateNode
from funcsynth.range_node import RangeNode
from funcsynth.modulator_node import (
    AmplitudeModulatorNode,
    FrequencyModulatorNode,
    PhaseModulatorNode,
    TimeScaleModulatorNode,
)
from funcsynth.response_node import ResponseNode
from funcsynth.envelope import adsr
from funcsynth.filter_kernel import FilterKernel, load_kernel, clear_kernel_cache
from funcsynth.record import Record
from funcsynth.mml import NoteEvent, tokenize, parse_mml, compile_mml, piece_duration
from funcsynth.instruments import (
    Instrument,
    DrumInstrument,
    DummyInstrument,
    LegitInstrument,
    get_instrument,
)
from funcsynth.songs import SONGS, get_song
from funcsynth.pcm import to_pcm16, write_pcm16, stream_blocks, write_wav
from funcsynth.logger import set_global_logging, get_logger
from funcsynth.debug_utils import format_node_tree, print_node_tree, find_shared_nodes

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ErrorMode",
    "set_error_mode",
    "get_error_mode",
    "handle_error",
    "set_sample_rate",
    "get_sample_rate",
    # Errors
    "SynthError",
    "ConfigurationError",
    "ParseError",
    "ResourceError",
    "RenderError",
    "IntegralUnavailableError",
    # Core classes
    "SignalNode",
    "SourceNode",
    # Sources
    "ConstantNode",
    "LineNode",
    "QuadraticNode",
    "SineNode",
    "SawtoothNode",
    "SquareNode",
    "TriangleNode",
    "ImpulseNode",
    # Combinators
    "MixNode",
    "GainNode",
    "ShiftNode",
    "DelayNode",
    "GateNode",
    "RangeNode",
    "AmplitudeModulatorNode",
    "FrequencyModulatorNode",
    "PhaseModulatorNode",
    "TimeScaleModulatorNode",
    "ResponseNode",
    "adsr",
    # Rendering and filtering
    "Record",
    "FilterKernel",
    "load_kernel",
    "clear_kernel_cache",
    # Sequencer
    "NoteEvent",
    "tokenize",
    "parse_mml",
    "compile_mml",
    "piece_duration",
    "Instrument",
    "DrumInstrument",
    "DummyInstrument",
    "LegitInstrument",
    "get_instrument",
    "SONGS",
    "get_song",
    # Output
    "to_pcm16",
    "write_pcm16",
    "stream_blocks",
    "write_wav",
    # Logging utilities
    "set_global_logging",
    "get_logger",
    # Debug utilities
    "format_node_tree",
    "print_node_tree",
    "find_shared_nodes",
    # Version
    "__version__",
]
