# backend/materials_service/core/reference_data.py
"""Static unit and tax-rate lookup tables.

Both tables are JSON arrays of objects with at least an ``id`` key, loaded
once at startup and never modified afterwards.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_reference_ids(path: Path | str) -> frozenset:
    """Read a reference JSON file and return the set of its ``id`` values.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a list of objects carrying an ``id``
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        entries = json.load(f)

    if not isinstance(entries, list):
        raise ValueError(f"{path.name}: expected a JSON array of entries")

    ids = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or "id" not in entry:
            raise ValueError(f"{path.name}: entry {index} has no 'id'")
        ids.append(entry["id"])
    return frozenset(ids)


def _typed(ids: frozenset) -> frozenset:
    return frozenset((type(known), known) for known in ids)


@dataclass(frozen=True)
class ReferenceData:
    """Valid unit ids and tax-rate ids."""

    unit_ids: frozenset
    tax_rate_ids: frozenset
    # 1 == 1.0 == True, so lookups key on (type, id)
    _unit_keys: frozenset = field(init=False, repr=False, compare=False)
    _tax_rate_keys: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_unit_keys", _typed(self.unit_ids))
        object.__setattr__(self, "_tax_rate_keys", _typed(self.tax_rate_ids))

    @classmethod
    def from_files(cls, units_path: Path | str, tax_rates_path: Path | str) -> "ReferenceData":
        data = cls(
            unit_ids=load_reference_ids(units_path),
            tax_rate_ids=load_reference_ids(tax_rates_path),
        )
        logger.info(
            f"Loaded {len(data.unit_ids)} units and {len(data.tax_rate_ids)} tax rates"
        )
        return data

    def is_valid_unit_id(self, value: Any) -> bool:
        return (type(value), value) in self._unit_keys

    def is_valid_tax_rate_id(self, value: Any) -> bool:
        return (type(value), value) in self._tax_rate_keys
