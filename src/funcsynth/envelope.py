"""
ADSR envelope builder.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from funcsynth.constant_node import ConstantNode
from funcsynth.gate_node import GateNode
from funcsynth.mix_node import MixNode
from funcsynth.ramp_node import LineNode
from funcsynth.errors import ConfigurationError


def adsr(
    attack: float,
    decay: float,
    sustain: float,
    release: float,
    sustain_level: float,
) -> MixNode:
    """
    Build an attack/decay/sustain/release envelope starting at t = 0.

    The envelope is the sum of four gated segments laid end to end:

        [0, a)              attack    ramp 0 -> 1
        [a, a+d)            decay     ramp 1 -> sustain_level
        [a+d, a+d+s)        sustain   flat sustain_level
        [a+d+s, a+d+s+r)    release   ramp sustain_level -> 0

    Gates are half-open, so at every t at most one segment is active and the
    output is 0 outside [0, a+d+s+r). Unlike a gate-driven envelope, all
    durations (including sustain) are fixed up front.

    The result is a pure SignalNode with an exact integral(), so it can
    drive a FrequencyModulatorNode as well as an AmplitudeModulatorNode.

    Args:
        attack: Attack duration in seconds
        decay: Decay duration in seconds
        sustain: Sustain duration in seconds
        release: Release duration in seconds
        sustain_level: Level held during sustain

    Raises:
        ConfigurationError: If any duration is negative

    Example:
        env = adsr(0.1, 0.2, 0.1, 0.1, 0.6)
        note = AmplitudeModulatorNode(SineNode.sin(440.0), env)
    """
    for name, value in (
        ("attack", attack),
        ("decay", decay),
        ("sustain", sustain),
        ("release", release),
    ):
        if value < 0:
            raise ConfigurationError(f"adsr {name} must be non-negative (got {value})")

    decay_start = attack
    sustain_start = decay_start + decay
    release_start = sustain_start + sustain
    release_end = release_start + release

    return MixNode([
        (1.0, GateNode(
            LineNode.interpolate((0.0, 0.0), (attack, 1.0)),
            0.0,
            decay_start,
        )),
        (1.0, GateNode(
            LineNode.interpolate((decay_start, 1.0), (sustain_start, sustain_level)),
            decay_start,
            sustain_start,
        )),
        (1.0, GateNode(
            ConstantNode(sustain_level),
            sustain_start,
            release_start,
        )),
        (1.0, GateNode(
            LineNode.interpolate((release_start, sustain_level), (release_end, 0.0)),
            release_start,
            release_end,
        )),
    ])
