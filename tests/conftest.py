import pytest

import fret.table


@pytest.fixture
def empty_table_cache (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Clear the cached standard table so the next call rebuilds it."""

	monkeypatch.setattr(fret.table, "_default_table", None)
