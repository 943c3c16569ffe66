import pytest

import fret.lookup
import fret.note
import fret.table


Accidental = fret.note.Accidental
Ordering = fret.lookup.Ordering
Query = fret.note.Query


# ---------------------------------------------------------------------------
# parse() tests
# ---------------------------------------------------------------------------

def test_parse_natural () -> None:

	"""Middle C parses to a natural query."""

	assert fret.lookup.parse("C4") == Query("C", Accidental.NATURAL, 4)


def test_parse_is_case_insensitive () -> None:

	"""Letter case does not matter, for the letter or the flat marker."""

	assert fret.lookup.parse("c#4") == fret.lookup.parse("C#4") == Query("C", Accidental.SHARP, 4)
	assert fret.lookup.parse("Bb5") == fret.lookup.parse("bB5") == fret.lookup.parse("BB5") == Query("B", Accidental.FLAT, 5)


def test_parse_octave_range_edges () -> None:

	"""Octaves 0 and 8 parse even where the table has no such note."""

	assert fret.lookup.parse("G0") == Query("G", Accidental.NATURAL, 0)
	assert fret.lookup.parse("D8") == Query("D", Accidental.NATURAL, 8)


@pytest.mark.parametrize("text", ["H4", "C9", "C##4", "", "C", "4", "C#", "Cb10", " C4", "C4 ", "C4\n", "C-1", "Cx4", "C♯4"])
def test_parse_rejects_malformed (text: str) -> None:

	"""Unknown letters, octaves outside 0-8 and malformed shapes fail."""

	with pytest.raises(fret.lookup.ParseError):
		fret.lookup.parse(text)


@pytest.mark.parametrize("text", ["E#4", "B#3", "Cb4", "Fb2", "e#4"])
def test_parse_rejects_impossible_spellings (text: str) -> None:

	"""Well-formed text that spells a non-existent accidental fails."""

	with pytest.raises(fret.lookup.ParseError):
		fret.lookup.parse(text)


def test_parse_rejects_non_strings () -> None:

	"""Only text can be parsed."""

	with pytest.raises(fret.lookup.ParseError):
		fret.lookup.parse(None)  # type: ignore[arg-type]


def test_parse_error_is_value_error () -> None:

	"""Callers can catch parse failures as ValueError."""

	with pytest.raises(ValueError):
		fret.lookup.parse("H4")


def test_parse_round_trips_spelling () -> None:

	"""Every table spelling parses back to its own identity."""

	for slot in fret.table.table():
		members = slot.members() if isinstance(slot, fret.note.EnharmonicPair) else (slot,)
		for note in members:
			assert fret.lookup.parse(note.spelling) == note.query


# ---------------------------------------------------------------------------
# find() tests
# ---------------------------------------------------------------------------

def test_find_reference_pitch () -> None:

	"""A4 is 440 Hz and A5 an octave above it."""

	assert fret.lookup.find(Query("A", Accidental.NATURAL, 4)).frequency == 440.0
	assert fret.lookup.find(Query("A", Accidental.NATURAL, 5)).frequency == 880.0


def test_find_enharmonic_spellings () -> None:

	"""Both spellings of a pair resolve to the same frequency but keep their own names."""

	sharp = fret.lookup.find(Query("C", Accidental.SHARP, 4))
	flat = fret.lookup.find(Query("D", Accidental.FLAT, 4))

	assert sharp.frequency == flat.frequency == 277.18
	assert sharp.spelling == "C#4"
	assert flat.spelling == "Db4"


def test_find_accepts_text_and_notes () -> None:

	"""Text is parsed first; a note is looked up by its identity."""

	assert fret.lookup.find("a4").frequency == 440.0

	note = fret.note.Note("A", Accidental.NATURAL, 4)
	assert fret.lookup.find(note).frequency == 440.0


@pytest.mark.parametrize("text", ["G0", "C0", "G#0", "Ab0", "D8", "C#8", "Db8", "B8"])
def test_find_outside_range (text: str) -> None:

	"""Well-formed notes truncated from the table are not found."""

	with pytest.raises(fret.lookup.NotFoundError):
		fret.lookup.find(text)


def test_find_boundaries () -> None:

	"""The lowest and highest notes are present."""

	assert fret.lookup.find("A0").frequency == 27.5
	assert fret.lookup.find("Bb0").frequency == 29.14
	assert fret.lookup.find("C8").frequency == 4186.01


def test_find_in_custom_table () -> None:

	"""A supplied table is searched instead of the standard one."""

	notes = fret.table.build_table(reference_frequency=442.0)

	assert fret.lookup.find("A4", notes).frequency == 442.0


def test_find_propagates_parse_errors () -> None:

	"""Text queries that cannot be parsed raise ParseError, not NotFoundError."""

	with pytest.raises(fret.lookup.ParseError):
		fret.lookup.find("E#4")


def test_find_accepts_enharmonic_pairs () -> None:

	"""A pair taken from the table resolves to its sharp spelling."""

	pair = fret.table.table()[1]

	assert fret.lookup.find(pair).spelling == "A#0"
	assert fret.lookup.find(pair).frequency == 29.14
	assert fret.lookup.find_index(pair) == 1


@pytest.mark.parametrize("value", [None, 42, ("A", 4), fret.note.Query("E", Accidental.SHARP, 4), fret.note.Note("A", Accidental.NATURAL, 4, float("nan"))])
def test_find_rejects_non_notes (value: object) -> None:

	"""Values that are not notes fail with NotFoundError."""

	with pytest.raises(fret.lookup.NotFoundError):
		fret.lookup.find(value)  # type: ignore[arg-type]

	with pytest.raises(fret.lookup.NotFoundError):
		fret.lookup.find_index(value)  # type: ignore[arg-type]


def test_find_index () -> None:

	"""Positions are 0-based and shared by both spellings of a pair."""

	assert fret.lookup.find_index("A0") == 0
	assert fret.lookup.find_index("A#0") == fret.lookup.find_index("Bb0") == 1
	assert fret.lookup.find_index("A4") == 48
	assert fret.lookup.find_index("C8") == 87


# ---------------------------------------------------------------------------
# compare() tests
# ---------------------------------------------------------------------------

def test_compare_orders_by_pitch () -> None:

	"""Lower pitches compare less than higher ones."""

	c4 = Query("C", Accidental.NATURAL, 4)
	a4 = Query("A", Accidental.NATURAL, 4)

	assert fret.lookup.compare(c4, a4) is Ordering.LESS_THAN
	assert fret.lookup.compare(a4, c4) is Ordering.GREATER_THAN
	assert fret.lookup.compare(a4, a4) is Ordering.EQUAL


def test_compare_enharmonic_equal () -> None:

	"""The two spellings of one pitch are equal."""

	assert fret.lookup.compare("C#4", "Db4") is Ordering.EQUAL
	assert fret.lookup.compare("A#0", "Bb0") is Ordering.EQUAL


def test_compare_across_octaves () -> None:

	"""B3 is below C4, one semitone apart."""

	assert fret.lookup.compare("B3", "C4") is Ordering.LESS_THAN
	assert fret.lookup.compare("C5", "B4") is Ordering.GREATER_THAN


def test_compare_enharmonic_pairs () -> None:

	"""Pairs compare by their shared pitch."""

	pair = fret.table.table()[1]

	assert fret.lookup.compare(pair, "Bb0") is Ordering.EQUAL
	assert fret.lookup.compare(pair, "A0") is Ordering.GREATER_THAN
	assert fret.lookup.compare("C4", fret.lookup.find("C#4")) is Ordering.LESS_THAN

	with pytest.raises(fret.lookup.NotFoundError):
		fret.lookup.compare(None, pair)  # type: ignore[arg-type]


def test_compare_propagates_not_found () -> None:

	"""A missing note on either side fails the comparison."""

	with pytest.raises(fret.lookup.NotFoundError):
		fret.lookup.compare("G0", "A4")

	with pytest.raises(fret.lookup.NotFoundError):
		fret.lookup.compare("A4", "D8")


# ---------------------------------------------------------------------------
# notes_from() tests
# ---------------------------------------------------------------------------

def test_notes_from () -> None:

	"""The slice starts at the slot holding the query and runs to C8."""

	upper = fret.lookup.notes_from("Bb7")

	assert [str(slot) for slot in upper] == ["A#7/Bb7", "B7", "C8"]
	assert fret.lookup.notes_from("A0") == fret.table.table()


def test_notes_from_missing () -> None:

	"""Starting from a note outside the table fails."""

	with pytest.raises(fret.lookup.NotFoundError):
		fret.lookup.notes_from("C0")
