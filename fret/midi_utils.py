"""MIDI helpers for table notes.

Table slots map one-to-one onto MIDI note numbers: A0 is 21, middle C (C4)
is 60 and C8 is 108, matching the MIDI Manufacturers Association convention.
Both spellings of an enharmonic pair share a number.

The ``note_on`` / ``note_off`` helpers build ``mido.Message`` objects only;
sending them to a port is up to the caller.
"""

import typing

import mido

import fret.constants
import fret.lookup
import fret.note
import fret.table


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"D": 2,
	"E": 4,
	"F": 5,
	"G": 7,
	"A": 9,
	"B": 11,
}

ACCIDENTAL_OFFSET: typing.Dict[fret.note.Accidental, int] = {
	fret.note.Accidental.NATURAL: 0,
	fret.note.Accidental.SHARP: 1,
	fret.note.Accidental.FLAT: -1,
}

MIDI_CHANNELS = range(0, 16)
MIDI_VELOCITIES = range(0, 128)


def _note_number (note: fret.note.Note) -> int:

	return (note.octave + 1) * fret.constants.SEMITONES_PER_OCTAVE + NOTE_NAME_TO_PC[note.name] + ACCIDENTAL_OFFSET[note.accidental]


def midi_number (query: fret.lookup.QueryLike, notes: typing.Optional[fret.table.Table] = None) -> int:

	"""
	Return the MIDI note number of a table note.

	The number follows from letter, accidental and octave (C4 = 60), so it
	is the same whether ``notes`` is the full table or a slice of it such as
	the result of :func:`fret.lookup.notes_from`.

	Raises:
		NotFoundError: If the note is not in ``notes``.

	Example:
		```python
		midi_number("A4")   # → 69
		midi_number("Db4")  # → 61
		```
	"""

	return _note_number(fret.lookup.find(query, notes))


def slot_for_midi_number (number: int, notes: typing.Optional[fret.table.Table] = None) -> fret.note.Slot:

	"""
	Return the table slot for a MIDI note number.

	Raises:
		NotFoundError: If no slot of ``notes`` has that number (the full
			table spans A0..C8, 21-108).
	"""

	notes = fret.table.table() if notes is None else notes

	for slot in notes:
		note = slot.sharp if isinstance(slot, fret.note.EnharmonicPair) else slot
		if _note_number(note) == number:
			return slot

	raise fret.lookup.NotFoundError(f"MIDI note {number} is not in the table")


def _validate (velocity: int, channel: int) -> None:

	if velocity not in MIDI_VELOCITIES:
		raise ValueError(f"velocity must be 0-127, got {velocity}")

	if channel not in MIDI_CHANNELS:
		raise ValueError(f"channel must be 0-15, got {channel}")


def note_on (query: fret.lookup.QueryLike, velocity: int = 100, channel: int = 0, notes: typing.Optional[fret.table.Table] = None) -> mido.Message:

	"""
	Build a note-on message for a table note.

	Parameters:
		query: Note to play, as a query, note or text.
		velocity: MIDI velocity (0-127).
		channel: MIDI channel (0-15).

	Raises:
		ValueError: If velocity or channel is out of range.
		NotFoundError: If the note is not in the table.
	"""

	_validate(velocity, channel)

	return mido.Message("note_on", note=midi_number(query, notes), velocity=velocity, channel=channel)


def note_off (query: fret.lookup.QueryLike, velocity: int = 0, channel: int = 0, notes: typing.Optional[fret.table.Table] = None) -> mido.Message:

	"""Build a note-off message for a table note."""

	_validate(velocity, channel)

	return mido.Message("note_off", note=midi_number(query, notes), velocity=velocity, channel=channel)
