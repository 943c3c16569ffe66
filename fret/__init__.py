"""
Fret - the 12-tone chromatic scale as data.

Fret builds the ordered table of every pitch from A0 to C8 (the 88 keys of a
piano), with sharp/flat spellings paired on the five black-key slots of each
octave and equal-tempered frequencies anchored at A4 = 440 Hz. On top of the
table it parses note names, looks notes up and compares them by pitch.

It produces data only: no audio, no rendering.

Example:

    ```python
    import fret

    notes = fret.note_table()
    len(notes)                          # → 88

    fret.find("A4").frequency           # → 440.0
    fret.find(fret.parse("c#4"))        # → Note(name='C', accidental=<Accidental.SHARP: 'sharp'>, octave=4, frequency=277.18)
    fret.compare("C#4", "Db4")          # → Ordering.EQUAL
    ```

Package-level exports: ``note_table``, ``build_table``, ``parse``, ``find``,
``compare``, ``Note``, ``EnharmonicPair``, ``Query``, ``Accidental``,
``Ordering``, ``ParseError``, ``NotFoundError``.
"""

import fret.lookup
import fret.note
import fret.table


note_table = fret.table.table
build_table = fret.table.build_table
parse = fret.lookup.parse
find = fret.lookup.find
compare = fret.lookup.compare

Note = fret.note.Note
EnharmonicPair = fret.note.EnharmonicPair
Query = fret.note.Query
Accidental = fret.note.Accidental
Ordering = fret.lookup.Ordering
ParseError = fret.lookup.ParseError
NotFoundError = fret.lookup.NotFoundError
