"""Note table generator.

Builds the ordered chromatic sequence from A0 to C8 (88 slots). Every slot is
one semitone above the previous one and is either a natural :class:`~fret.note.Note`
or an :class:`~fret.note.EnharmonicPair`.

The build runs in four passes:

1. **Chromatic walk** - for each octave, step through ``C D E F G A B``. Between
   two adjacent letters insert a sharp/flat pair unless the step is listed in
   ``HALF_TONE_PAIRS`` (E-F and B-C).
2. **Truncation** - octave 0 keeps only A, A#/Bb and B; octave 8 keeps only C.
3. **Concatenation** - octaves 0 through 8 in ascending order.
4. **Frequencies** - equal temperament around the reference pitch (A4):
   ``f = reference * 2 ** ((i - r) / 12)`` rounded to ``precision`` places.

Truncation happens before frequencies so that semitone distances are counted
over the final sequence.
"""

import dataclasses
import logging
import math
import threading
import typing

import fret.constants
import fret.note


logger = logging.getLogger(__name__)


Table = typing.Tuple[fret.note.Slot, ...]


@dataclasses.dataclass(frozen=True)
class _RawSlot:

	"""
	A table position before frequencies are attached.

	``names`` holds one letter for a natural, or the (sharp, flat) letters of a pair.
	"""

	octave: int
	names: typing.Tuple[str, ...]

	@property
	def is_pair (self) -> bool:

		return len(self.names) == 2


def _is_half_tone (lower: str, upper: str) -> bool:

	return (lower, upper) in fret.constants.HALF_TONE_PAIRS


def _walk_octave (octave: int) -> typing.List[_RawSlot]:

	"""
	Return every natural and enharmonic slot of one octave, C upwards.
	"""

	names = fret.constants.NOTE_NAMES
	slots: typing.List[_RawSlot] = []

	for index, name in enumerate(names):

		slots.append(_RawSlot(octave=octave, names=(name,)))

		# B wraps round to C.
		next_name = names[(index + 1) % len(names)]

		if not _is_half_tone(name, next_name):
			slots.append(_RawSlot(octave=octave, names=(name, next_name)))

	return slots


def _in_range (slot: _RawSlot) -> bool:

	"""
	Return False for slots outside the A0..C8 range.

	Pairs are judged by their sharp letter.
	"""

	lowest = min(fret.constants.OCTAVES)
	highest = max(fret.constants.OCTAVES)

	if slot.octave == lowest:
		return slot.names[0] in fret.constants.LOWEST_OCTAVE_NAMES

	if slot.octave == highest:
		return not slot.is_pair and slot.names[0] in fret.constants.HIGHEST_OCTAVE_NAMES

	return True


def _raw_sequence () -> typing.List[_RawSlot]:

	sequence: typing.List[_RawSlot] = []

	for octave in fret.constants.OCTAVES:
		sequence.extend(slot for slot in _walk_octave(octave) if _in_range(slot))

	return sequence


def _reference_index (sequence: typing.Sequence[_RawSlot]) -> int:

	"""Return the 1-based position of the reference natural (A4)."""

	reference = _RawSlot(octave=fret.constants.REFERENCE_OCTAVE, names=(fret.constants.REFERENCE_NOTE_NAME,))

	return sequence.index(reference) + 1


def frequency_at (semitones: int, reference_frequency: float = fret.constants.REFERENCE_FREQUENCY, precision: int = fret.constants.FREQUENCY_PRECISION) -> float:

	"""
	Return the equal-tempered frequency a number of semitones from the reference.

	Parameters:
		semitones: Signed distance from the reference pitch.
		reference_frequency: Frequency of the reference pitch in hertz.
		precision: Decimal places to round to.

	Example:
		```python
		frequency_at(12)   # → 880.0
		frequency_at(-9)   # → 261.63 (C4)
		```
	"""

	return round(reference_frequency * 2 ** (semitones / fret.constants.SEMITONES_PER_OCTAVE), precision)


def _to_slot (raw: _RawSlot, frequency: float) -> fret.note.Slot:

	if raw.is_pair:
		sharp_name, flat_name = raw.names
		return fret.note.EnharmonicPair(
			sharp=fret.note.Note(sharp_name, fret.note.Accidental.SHARP, raw.octave, frequency),
			flat=fret.note.Note(flat_name, fret.note.Accidental.FLAT, raw.octave, frequency),
		)

	return fret.note.Note(raw.names[0], fret.note.Accidental.NATURAL, raw.octave, frequency)


def validate_tuning (reference_frequency: typing.Any, precision: typing.Any) -> None:

	"""
	Check the parameters of a table build.

	Raises:
		ValueError: If ``reference_frequency`` is not a finite positive number
			or ``precision`` is not a non-negative integer.
	"""

	if isinstance(reference_frequency, bool) or not isinstance(reference_frequency, (int, float)):
		raise ValueError(f"reference_frequency must be a number, got {reference_frequency!r}")

	if not math.isfinite(reference_frequency) or reference_frequency <= 0:
		raise ValueError(f"reference_frequency must be finite and positive, got {reference_frequency}")

	if isinstance(precision, bool) or not isinstance(precision, int):
		raise ValueError(f"precision must be an integer, got {precision!r}")

	if precision < 0:
		raise ValueError(f"precision must not be negative, got {precision}")


def build_table (reference_frequency: float = fret.constants.REFERENCE_FREQUENCY, precision: int = fret.constants.FREQUENCY_PRECISION) -> Table:

	"""
	Build the full ascending note table.

	The result is deterministic: equal arguments always produce value-equal
	tables.

	Parameters:
		reference_frequency: Frequency of A4 in hertz (default 440.0).
		precision: Decimal places frequencies are rounded to (default 2).

	Returns:
		A tuple of slots from A0 to C8.

	Raises:
		ValueError: If ``reference_frequency`` is not a finite positive
			number or ``precision`` is not a non-negative integer.

	Example:
		```python
		notes = build_table()
		len(notes)       # → 88
		str(notes[0])    # → "A0"
		str(notes[1])    # → "A#0/Bb0"
		```
	"""

	validate_tuning(reference_frequency, precision)

	sequence = _raw_sequence()
	reference_index = _reference_index(sequence)

	notes = tuple(
		_to_slot(raw, frequency_at(index - reference_index, reference_frequency, precision))
		for index, raw in enumerate(sequence, 1)
	)

	logger.debug(f"Built note table: {len(notes)} slots, A4 = {reference_frequency} Hz")

	return notes


_default_table: typing.Optional[Table] = None
_default_table_lock = threading.Lock()


def table () -> Table:

	"""
	Return the standard table (A4 = 440 Hz), building it on first use.

	Concurrent first callers block until a single build completes; later
	calls return the cached tuple without locking.
	"""

	global _default_table

	if _default_table is None:
		with _default_table_lock:
			if _default_table is None:
				_default_table = build_table()

	return _default_table


def octave_slots (notes: Table, octave: int) -> Table:

	"""Return the slots of ``notes`` that lie in the given octave."""

	return tuple(slot for slot in notes if slot.octave == octave)
