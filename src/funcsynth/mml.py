"""
MML (Music Macro Language) compiler.

Compiles tracker-style notation into a SignalNode. The notation is a
string of voices separated by commas; each voice is a run of tokens of the
form  command [accidental] [digits] [.] :

    o<n>    set octave                 t<n>    set tempo
    l<n>    set default note length    v<n>    set volume (0..127)
    >  <    octave up / down           &       tie (parsed, no effect)
    a..g    note, optionally followed by '+' / '#' (sharp) or '-' (flat),
            a length denominator and a dot (1.5x length)
    r  p    rest

A note of denominator n lasts 320 / tempo / n seconds. Every voice starts
at octave 4, tempo 80, length 4 and volume 120, and keeps its own time
cursor. Each note is rendered by an instrument's play(frequency, length,
volume) and placed at the cursor; the voices are then mixed.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from funcsynth.signal_node import SignalNode
from funcsynth.mix_node import MixNode
from funcsynth.notes import NOTE_FREQUENCIES, REST_NAMES, on_octave
from funcsynth.config import ErrorMode, handle_error
from funcsynth.errors import ParseError, SynthError
from funcsynth.logger import get_logger

logger = get_logger(__name__)

# Seconds per whole note at tempo 1
WHOLE_NOTE_SECONDS = 320.0

# Dotted notes last this much longer
DOT_FACTOR = 1.5

# Volume v<n> is handed to instruments as n / VOLUME_SCALE
VOLUME_SCALE = 200.0

# A command is any non-digit, non-space character with an optional
# accidental; stray digits produce a token with an empty command.
_TOKEN_PATTERN = re.compile(r"([^\d\s][+\-]?|)(\d*)(\.?)")

_VALUE_COMMANDS = frozenset({"o", "t", "l", "v"})


@dataclass(frozen=True)
class Token:
    """One MML token, with its position inside its voice."""
    command: str
    value: Optional[int]
    dotted: bool
    position: int
    text: str


@dataclass
class TrackState:
    """Per-voice sequencer state, reset at the start of every voice."""
    octave: int = 4
    tempo: int = 80
    length: int = 4
    volume: int = 120
    time: float = 0.0


@dataclass(frozen=True)
class NoteEvent:
    """
    A note (or rest) produced by the parser.

    Attributes:
        start: Start time in seconds from the start of the piece
        duration: Length in seconds
        frequency: Frequency in Hz (0.0 for rests)
        volume: Instrument volume (v<n> / 200)
        rest: True for 'r' and 'p' tokens
    """
    start: float
    duration: float
    frequency: float
    volume: float
    rest: bool = False

    @property
    def end(self) -> float:
        return self.start + self.duration


def normalize(text: str) -> list[str]:
    """Lower-case the notation, map '#' to '+' and split it into voices."""
    return text.replace("#", "+").lower().split(",")


def tokenize(voice: str) -> list[Token]:
    """
    Split one (normalized) voice into tokens, skipping whitespace.

    Tokenizing never fails; malformed tokens are reported when compiled.
    """
    tokens = []
    pos = 0
    while pos < len(voice):
        if voice[pos].isspace():
            pos += 1
            continue
        match = _TOKEN_PATTERN.match(voice, pos)
        command, digits, dot = match.groups()
        tokens.append(Token(
            command=command,
            value=int(digits) if digits else None,
            dotted=dot == ".",
            position=pos,
            text=match.group(0),
        ))
        pos = match.end()
    return tokens


def _note_event(token: Token, state: TrackState, track: int) -> NoteEvent:
    denominator = token.value if token.value is not None else state.length
    if denominator <= 0:
        raise ParseError("note length must be positive", token.text, token.position, track)
    duration = WHOLE_NOTE_SECONDS / state.tempo / denominator
    if token.dotted:
        duration *= DOT_FACTOR
    return NoteEvent(
        start=state.time,
        duration=duration,
        frequency=on_octave(NOTE_FREQUENCIES[token.command], state.octave),
        volume=state.volume / VOLUME_SCALE,
        rest=token.command in REST_NAMES,
    )


def _apply_token(token: Token, state: TrackState, track: int) -> Optional[NoteEvent]:
    """Update `state` for one token; return the note event it emits, if any."""
    command = token.command

    if command in _VALUE_COMMANDS:
        if token.value is None:
            raise ParseError(
                f"'{command}' requires a numeric value", token.text, token.position, track
            )
        if command == "o":
            state.octave = token.value
        elif command == "t":
            if token.value <= 0:
                raise ParseError("tempo must be positive", token.text, token.position, track)
            state.tempo = token.value
        elif command == "l":
            if token.value <= 0:
                raise ParseError("length must be positive", token.text, token.position, track)
            state.length = token.value
        else:
            state.volume = token.value
        return None

    if command == ">":
        state.octave += 1
        return None
    if command == "<":
        state.octave -= 1
        return None
    if command == "&":
        # Ties are recognized but do not extend the previous note
        return None

    if command in NOTE_FREQUENCIES:
        event = _note_event(token, state, track)
        state.time = event.end
        return event

    if command == "":
        raise ParseError("numeric value without a command", token.text, token.position, track)
    raise ParseError(f"unknown command '{command}'", token.text, token.position, track)


def parse_track(
    voice: str,
    track: int = 0,
    error_mode: Optional[ErrorMode] = None,
) -> list[NoteEvent]:
    """
    Parse one normalized voice into note events.

    In STRICT mode the first malformed token raises ParseError. In LENIENT
    mode malformed tokens are logged and skipped.
    """
    state = TrackState()
    events = []
    for token in tokenize(voice):
        try:
            event = _apply_token(token, state, track)
        except ParseError as err:
            handle_error(str(err), error_mode=error_mode, exception=err)
            continue
        if event is not None:
            events.append(event)
    return events


def parse_mml(text: str, error_mode: Optional[ErrorMode] = None) -> list[list[NoteEvent]]:
    """
    Parse MML text into one list of note events per voice.

    Empty voices (e.g. from a trailing comma) are errors: in LENIENT mode
    they are logged and dropped from the result.

    Raises:
        ParseError: In STRICT mode, for the first malformed token or voice
    """
    tracks = []
    for track, voice in enumerate(normalize(text)):
        if not voice.strip():
            err = ParseError("empty track", voice, 0, track)
            handle_error(str(err), error_mode=error_mode, exception=err)
            continue
        tracks.append(parse_track(voice, track, error_mode))
    return tracks


def _resolve_play(instrument) -> Callable[[float, float, float], SignalNode]:
    play = getattr(instrument, "play", None)
    if callable(play):
        return play
    if callable(instrument):
        return instrument
    raise TypeError(
        f"instrument must have a play(note, length, volume) method or be callable, "
        f"got {instrument!r}"
    )


def compile_mml(
    text: str,
    instrument,
    error_mode: Optional[ErrorMode] = None,
    play_rests: bool = True,
) -> MixNode:
    """
    Compile MML text into a playable SignalNode.

    Each note event becomes instrument.play(frequency, duration, volume),
    shifted to the event's start time. Rests are played too, at frequency
    0, unless play_rests is False.

    Args:
        text: MML notation, voices separated by commas
        instrument: An Instrument, or any callable (note, length, volume)
        error_mode: Override the global error mode
        play_rests: Whether rests are routed through the instrument

    Returns:
        A MixNode of per-voice MixNodes

    Raises:
        ParseError: In STRICT mode, for malformed notation
        SynthError: In STRICT mode, if the instrument rejects a note
    """
    play = _resolve_play(instrument)
    voices = []
    note_count = 0
    end_time = 0.0

    for track, events in enumerate(parse_mml(text, error_mode)):
        placed = []
        for event in events:
            if event.rest and not play_rests:
                continue
            try:
                node = play(event.frequency, event.duration, event.volume)
            except SynthError as err:
                handle_error(
                    f"track {track}: note at {event.start:.3f}s failed: {err}",
                    error_mode=error_mode,
                    exception=err,
                )
                continue
            placed.append((event.start, node))
            end_time = max(end_time, event.end)
        note_count += len(placed)
        voices.append((1.0, MixNode.from_events(placed)))

    logger.info(
        f"Compiled {len(voices)} tracks, {note_count} notes, {end_time:.2f}s"
    )
    return MixNode(voices)


def piece_duration(tracks: list[list[NoteEvent]]) -> float:
    """End time of the last event over all tracks (0.0 if there are none)."""
    return max((event.end for events in tracks for event in events), default=0.0)
