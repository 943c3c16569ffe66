"""Tuning configuration loaded from YAML.

Example ``fret.yaml``::

	tuning:
	  reference_frequency: 442.0
	  precision: 2

Missing files and missing keys fall back to the defaults in
:mod:`fret.constants` (A4 = 440 Hz, 2 decimal places).
"""

import dataclasses
import logging
import os
import typing

import yaml

import fret.constants
import fret.table


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "fret.yaml"


@dataclasses.dataclass(frozen=True)
class TuningConfig:

	"""
	Parameters for building a note table.

	Attributes:
		reference_frequency: Frequency of A4 in hertz.
		precision: Decimal places frequencies are rounded to.
	"""

	reference_frequency: float = fret.constants.REFERENCE_FREQUENCY
	precision: int = fret.constants.FREQUENCY_PRECISION

	def __post_init__ (self) -> None:

		fret.table.validate_tuning(self.reference_frequency, self.precision)

	@classmethod
	def from_dict (cls, config: typing.Optional[typing.Dict[str, typing.Any]]) -> "TuningConfig":

		"""
		Build a config from the parsed YAML mapping, reading the ``tuning`` section.

		Raises:
			ValueError: If the section or its values have the wrong type or range.
				YAML ``.nan`` and ``.inf`` are rejected, and ``precision``
				must be a plain integer.
		"""

		config = config or {}

		if not isinstance(config, dict):
			raise ValueError(f"Configuration must be a mapping, got {type(config).__name__}")

		tuning = config.get("tuning") or {}

		if not isinstance(tuning, dict):
			raise ValueError(f"'tuning' must be a mapping, got {type(tuning).__name__}")

		reference_frequency = tuning.get("reference_frequency", fret.constants.REFERENCE_FREQUENCY)
		precision = tuning.get("precision", fret.constants.FREQUENCY_PRECISION)

		fret.table.validate_tuning(reference_frequency, precision)

		return cls(reference_frequency=float(reference_frequency), precision=precision)

	def build_table (self) -> fret.table.Table:

		"""Build a note table with these parameters."""

		return fret.table.build_table(self.reference_frequency, self.precision)


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f)

	return config or {}


def load_tuning (config_path: str = DEFAULT_CONFIG_PATH) -> TuningConfig:

	"""Read the ``tuning`` section of a YAML file into a :class:`TuningConfig`."""

	return TuningConfig.from_dict(load_config(config_path))


def table_from_config (config_path: str = DEFAULT_CONFIG_PATH) -> fret.table.Table:

	"""
	Build a note table using the tuning in a YAML file.

	Example:
		```python
		notes = table_from_config("fret.yaml")
		fret.lookup.find("A4", notes).frequency  # → 442.0 with the example file
		```
	"""

	tuning = load_tuning(config_path)
	logger.info(f"Tuning: A4 = {tuning.reference_frequency} Hz, {tuning.precision} decimal places")

	return tuning.build_table()
