"""Note model - pitches, enharmonic pairs and their classification.

A position in the note table (a *slot*) is one of two variants:

- a natural :class:`Note` such as ``C4``, or
- an :class:`EnharmonicPair` holding the sharp and flat spellings of one
  pitch, such as ``C#4/Db4``.

:func:`classify` reports which variant (if any) a value is, checking letter
membership, accidental tag and octave range. It never raises; anything it
does not recognise is :attr:`NoteKind.NONE`.

Example:
	```python
	import fret.note

	query = fret.note.Query("F", fret.note.Accidental.SHARP, 3)
	fret.note.classify(query)  # → NoteKind.SHARP
	```
"""

import dataclasses
import enum
import math
import typing

import fret.constants


class Accidental (enum.Enum):

	"""
	The accidental carried by a spelled note.
	"""

	NATURAL = "natural"
	SHARP = "sharp"
	FLAT = "flat"

	@property
	def symbol (self) -> str:

		"""Return the ASCII marker used in note names (``""``, ``"#"`` or ``"b"``)."""

		return ACCIDENTAL_SYMBOLS[self]


ACCIDENTAL_SYMBOLS: typing.Dict[Accidental, str] = {
	Accidental.NATURAL: "",
	Accidental.SHARP: "#",
	Accidental.FLAT: "b",
}


class NoteKind (enum.Enum):

	"""
	Result of :func:`classify`.
	"""

	NATURAL = "natural"
	SHARP = "sharp"
	FLAT = "flat"
	ENHARMONIC_PAIR = "enharmonic_pair"
	NONE = "none"


@dataclasses.dataclass(frozen=True)
class Query:

	"""
	Identity of a note without its frequency - the key used to look a note up.

	Attributes:
		name: Letter name, one of ``C D E F G A B``.
		accidental: Natural, sharp or flat.
		octave: Octave number (0-8).
	"""

	name: str
	accidental: Accidental
	octave: int

	@property
	def spelling (self) -> str:

		"""Return the textual name, e.g. ``"Bb5"``."""

		return f"{self.name}{self.accidental.symbol}{self.octave}"

	def __str__ (self) -> str:

		return self.spelling


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A single spelled pitch in the note table.

	Only :mod:`fret.table` assigns ``frequency``, from the note's position in
	the table. Notes built elsewhere (to classify or look up) leave it as
	``None``; :func:`classify` rejects a note whose frequency is set but is
	not a finite positive number. Notes are immutable; derive a new value
	rather than changing one.

	Attributes:
		name: Letter name, one of ``C D E F G A B``.
		accidental: Natural, sharp or flat.
		octave: Octave number (0-8).
		frequency: Pitch in hertz, rounded to the table's precision, or
			``None`` for a note not taken from a table.
	"""

	name: str
	accidental: Accidental
	octave: int
	frequency: typing.Optional[float] = None

	@property
	def spelling (self) -> str:

		"""Return the textual name, e.g. ``"C#4"``."""

		return self.query.spelling

	@property
	def query (self) -> Query:

		"""Return this note's identity as a :class:`Query`."""

		return Query(name=self.name, accidental=self.accidental, octave=self.octave)

	def matches (self, query: Query) -> bool:

		"""Return True when name, accidental and octave all equal the query's."""

		return (
			self.name == query.name
			and self.accidental is query.accidental
			and self.octave == query.octave
		)

	def __str__ (self) -> str:

		return self.spelling


@dataclasses.dataclass(frozen=True)
class EnharmonicPair:

	"""
	Two spellings of one pitch: the sharp of a letter and the flat of the next.

	Both members share an octave and a frequency.
	"""

	sharp: Note
	flat: Note

	@property
	def octave (self) -> int:

		return self.sharp.octave

	@property
	def frequency (self) -> typing.Optional[float]:

		return self.sharp.frequency

	def members (self) -> typing.Tuple[Note, Note]:

		"""Return ``(sharp, flat)``."""

		return (self.sharp, self.flat)

	def matches (self, query: Query) -> bool:

		"""Return True when either spelling matches the query."""

		return self.sharp.matches(query) or self.flat.matches(query)

	def __str__ (self) -> str:

		return f"{self.sharp.spelling}/{self.flat.spelling}"


Slot = typing.Union[Note, EnharmonicPair]


def _valid_octave (octave: typing.Any) -> bool:

	return isinstance(octave, int) and not isinstance(octave, bool) and octave in fret.constants.OCTAVES


def _valid_frequency (frequency: typing.Any) -> bool:

	if frequency is None:
		return True

	if isinstance(frequency, bool) or not isinstance(frequency, (int, float)):
		return False

	return math.isfinite(frequency) and frequency > 0


def classify (value: typing.Any) -> NoteKind:

	"""
	Report which note variant a value is.

	Notes and queries are classified by accidental, then by whether their
	letter is eligible for that accidental and their octave lies in 0-8. A
	note whose frequency is set must carry a finite positive value. An
	:class:`EnharmonicPair` is valid when its first member is a sharp note,
	its second a flat note, and both sit in the same octave.

	Parameters:
		value: Any object.

	Returns:
		The matching :class:`NoteKind`, or ``NoteKind.NONE``.
	"""

	if isinstance(value, EnharmonicPair):

		if (
			classify(value.sharp) is NoteKind.SHARP
			and classify(value.flat) is NoteKind.FLAT
			and value.sharp.octave == value.flat.octave
		):
			return NoteKind.ENHARMONIC_PAIR

		return NoteKind.NONE

	if not isinstance(value, (Note, Query)):
		return NoteKind.NONE

	if isinstance(value, Note) and not _valid_frequency(value.frequency):
		return NoteKind.NONE

	if not isinstance(value.name, str) or not _valid_octave(value.octave):
		return NoteKind.NONE

	if value.accidental is Accidental.NATURAL and value.name in fret.constants.NOTE_NAMES:
		return NoteKind.NATURAL

	if value.accidental is Accidental.SHARP and value.name in fret.constants.SHARP_NOTE_NAMES:
		return NoteKind.SHARP

	if value.accidental is Accidental.FLAT and value.name in fret.constants.FLAT_NOTE_NAMES:
		return NoteKind.FLAT

	return NoteKind.NONE


def is_note (value: typing.Any) -> bool:

	"""Return True for any valid natural, sharp, flat or enharmonic-pair value."""

	return classify(value) is not NoteKind.NONE
