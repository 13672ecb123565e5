"""
Note frequencies for the fourth octave and octave transposition.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

C = 261.63
C_SHARP_D_FLAT = 277.18
D = 293.66
D_SHARP_E_FLAT = 311.13
E = 329.63
F = 349.23
F_SHARP_G_FLAT = 369.99
G = 392.0
G_SHARP_A_FLAT = 415.30
A = 440.0
A_SHARP_B_FLAT = 466.16
B = 493.88

# Octave in which the table above is defined
REFERENCE_OCTAVE = 4

# MML note names (lower case, '+' sharp, '-' flat) -> frequency in the
# reference octave. 'b+' and 'c-' wrap to C and B of the same octave, and
# rests ('r', 'p') have frequency 0.
NOTE_FREQUENCIES: dict[str, float] = {
    "c": C,
    "c+": C_SHARP_D_FLAT,
    "d-": C_SHARP_D_FLAT,
    "d": D,
    "d+": D_SHARP_E_FLAT,
    "e-": D_SHARP_E_FLAT,
    "e": E,
    "f": F,
    "f+": F_SHARP_G_FLAT,
    "g-": F_SHARP_G_FLAT,
    "g": G,
    "g+": G_SHARP_A_FLAT,
    "a-": G_SHARP_A_FLAT,
    "a": A,
    "a+": A_SHARP_B_FLAT,
    "b-": A_SHARP_B_FLAT,
    "b": B,
    "b+": C,
    "c-": B,
    "p": 0.0,
    "r": 0.0,
}

REST_NAMES = frozenset({"p", "r"})


def on_octave(frequency: float, octave: int) -> float:
    """
    Transpose a reference-octave frequency to `octave`.

    Example:
        >>> on_octave(A, 5)
        880.0
        >>> on_octave(A, 3)
        220.0
    """
    return frequency * 2.0 ** (octave - REFERENCE_OCTAVE)
