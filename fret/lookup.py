"""Parsing, lookup and comparison of notes in the table.

- :func:`parse` turns text such as ``"F#3"`` into a :class:`~fret.note.Query`.
- :func:`find` returns the table's :class:`~fret.note.Note` for a query.
- :func:`compare` orders two notes by frequency.

Every entry point accepts an optional ``notes`` table and falls back to the
standard table from :func:`fret.table.table`. Queries may be given as text
and are parsed first.

Example:
	```python
	import fret.lookup

	fret.lookup.find("A4").frequency          # → 440.0
	fret.lookup.compare("C#4", "Db4")         # → Ordering.EQUAL
	```
"""

import enum
import re
import typing

import fret.constants
import fret.note
import fret.table


NOTE_PATTERN = re.compile(r"^(?P<name>[A-Za-z])(?P<accidental>#|[bB])?(?P<octave>[0-9])$")

LETTER_TO_NAME: typing.Dict[str, str] = {letter.lower(): letter for letter in "CDEFGAB"}

MARKER_TO_ACCIDENTAL: typing.Dict[str, fret.note.Accidental] = {
	"": fret.note.Accidental.NATURAL,
	"#": fret.note.Accidental.SHARP,
	"b": fret.note.Accidental.FLAT,
}


class ParseError (ValueError):

	"""Raised when text is not a well-formed, musically valid note name."""


class NotFoundError (LookupError):

	"""Raised when a valid query has no slot in the table."""


class Ordering (enum.Enum):

	"""
	Result of :func:`compare`.
	"""

	LESS_THAN = -1
	EQUAL = 0
	GREATER_THAN = 1


QueryLike = typing.Union[fret.note.Query, fret.note.Note, fret.note.EnharmonicPair, str]


def parse (text: str) -> fret.note.Query:

	"""
	Parse a note name into a query.

	The syntax is a letter ``A``-``G`` (any case), an optional ``#`` (sharp)
	or ``b``/``B`` (flat), then a single octave digit ``0``-``8``.

	Parameters:
		text: Note name such as ``"C4"``, ``"f#3"`` or ``"Bb5"``.

	Returns:
		The parsed :class:`~fret.note.Query`.

	Raises:
		ParseError: If the text does not match the syntax, or spells an
			accidental the letter cannot carry (e.g. ``"E#4"``, ``"Cb2"``).

	Example:
		```python
		parse("c#4") == parse("C#4")  # → True
		parse("H4")                   # raises ParseError
		```
	"""

	if not isinstance(text, str):
		raise ParseError(f"Cannot parse note from {text!r}: expected a string")

	match = NOTE_PATTERN.fullmatch(text)

	if match is None:
		raise ParseError(f"Cannot parse note from {text!r}: expected e.g. 'C4', 'F#3', 'Bb5'")

	name = LETTER_TO_NAME.get(match.group("name").lower())

	if name is None:
		raise ParseError(f"Cannot parse note from {text!r}: unknown letter {match.group('name')!r}")

	octave = int(match.group("octave"))

	if octave not in fret.constants.OCTAVES:
		raise ParseError(f"Cannot parse note from {text!r}: octave {octave} is outside 0-8")

	marker = (match.group("accidental") or "").lower()
	accidental = MARKER_TO_ACCIDENTAL[marker]

	query = fret.note.Query(name=name, accidental=accidental, octave=octave)

	if fret.note.classify(query) is fret.note.NoteKind.NONE:
		raise ParseError(f"Cannot parse note from {text!r}: {name} has no {accidental.value} spelling")

	return query


def _as_query (query: QueryLike) -> fret.note.Query:

	if isinstance(query, str):
		return parse(query)

	kind = fret.note.classify(query)

	if kind is fret.note.NoteKind.NONE:
		raise NotFoundError(f"{query!r} is not a note")

	# Both spellings share a slot; the sharp one locates it.
	if kind is fret.note.NoteKind.ENHARMONIC_PAIR:
		return query.sharp.query

	if isinstance(query, fret.note.Note):
		return query.query

	return query


def _resolve (notes: typing.Optional[fret.table.Table]) -> fret.table.Table:

	return fret.table.table() if notes is None else notes


def find_index (query: QueryLike, notes: typing.Optional[fret.table.Table] = None) -> int:

	"""
	Return the 0-based position of the slot holding the query.

	Raises:
		NotFoundError: If no slot matches.
		ParseError: If ``query`` is text that cannot be parsed.
	"""

	query = _as_query(query)

	for index, slot in enumerate(_resolve(notes)):
		if slot.matches(query):
			return index

	raise NotFoundError(f"Note {query} is not in the table")


def find (query: QueryLike, notes: typing.Optional[fret.table.Table] = None) -> fret.note.Note:

	"""
	Return the table note matching a query on name, accidental and octave.

	A natural slot matches when it equals the query; an enharmonic pair
	matches when either spelling does, and the matching spelling is returned.

	Parameters:
		query: A :class:`~fret.note.Query`, a :class:`~fret.note.Note`, an
			:class:`~fret.note.EnharmonicPair` (resolved through its sharp
			spelling) or note text.
		notes: Table to search (default: the standard table).

	Raises:
		NotFoundError: If the query lies outside the table (e.g. ``G0``, ``D8``)
			or is not a note at all (e.g. ``None``).
		ParseError: If ``query`` is text that cannot be parsed.

	Example:
		```python
		find("Db4").spelling   # → "Db4"
		find("Db4").frequency  # → 277.18
		```
	"""

	query = _as_query(query)

	for slot in _resolve(notes):

		kind = fret.note.classify(slot)

		if kind is fret.note.NoteKind.ENHARMONIC_PAIR:
			for member in slot.members():
				if member.matches(query):
					return member

		elif kind is fret.note.NoteKind.NATURAL and slot.matches(query):
			return slot

	raise NotFoundError(f"Note {query} is not in the table")


def compare (query1: QueryLike, query2: QueryLike, notes: typing.Optional[fret.table.Table] = None) -> Ordering:

	"""
	Order two notes by pitch.

	Both sides are resolved with :func:`find`; the lower frequency is
	"less than". Only the two spellings of one enharmonic pair compare equal.

	Raises:
		NotFoundError: If either side is not in the table.
		ParseError: If either side is text that cannot be parsed.

	Example:
		```python
		compare("C4", "A4")   # → Ordering.LESS_THAN
		compare("A4", "A4")   # → Ordering.EQUAL
		```
	"""

	notes = _resolve(notes)
	frequency1 = find(query1, notes).frequency
	frequency2 = find(query2, notes).frequency

	if frequency1 < frequency2:
		return Ordering.LESS_THAN

	if frequency1 > frequency2:
		return Ordering.GREATER_THAN

	return Ordering.EQUAL


def notes_from (query: QueryLike, notes: typing.Optional[fret.table.Table] = None) -> fret.table.Table:

	"""
	Return the table from the slot holding the query up to C8.

	Example:
		```python
		[str(slot) for slot in notes_from("A7")][:3]  # → ["A7", "A#7/Bb7", "B7"]
		```
	"""

	notes = _resolve(notes)

	return notes[find_index(query, notes):]
