"""Fixed musical constants for the note table.

The generator is driven entirely by these values:

- ``NOTE_NAMES`` - the seven letters in ascending order within an octave.
- ``SHARP_NOTE_NAMES`` / ``FLAT_NOTE_NAMES`` - letters that may carry a sharp or flat.
- ``HALF_TONE_PAIRS`` - adjacent letters a single semitone apart (no accidental slot between them).
- ``OCTAVES`` - the supported octave range, with ``LOWEST_OCTAVE_NAMES`` and
  ``HIGHEST_OCTAVE_NAMES`` restricting the truncated octaves at either end.
- ``REFERENCE_*`` - the tuning anchor, A4 = 440 Hz.
"""

import typing


NOTE_NAMES: typing.Tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")

SHARP_NOTE_NAMES: typing.FrozenSet[str] = frozenset({"C", "D", "F", "G", "A"})

FLAT_NOTE_NAMES: typing.FrozenSet[str] = frozenset({"D", "E", "G", "A", "B"})

# (lower, upper) letters with no enharmonic slot between them.
HALF_TONE_PAIRS: typing.FrozenSet[typing.Tuple[str, str]] = frozenset({("E", "F"), ("B", "C")})

OCTAVES: range = range(0, 9)

# Piano range A0..C8. Only these letters survive in the boundary octaves.
LOWEST_OCTAVE_NAMES: typing.FrozenSet[str] = frozenset({"A", "B"})
HIGHEST_OCTAVE_NAMES: typing.FrozenSet[str] = frozenset({"C"})

SEMITONES_PER_OCTAVE = 12

REFERENCE_NOTE_NAME = "A"
REFERENCE_OCTAVE = 4
REFERENCE_FREQUENCY = 440.0

FREQUENCY_PRECISION = 2
