"""Read-only access to the pre-fetched holiday collection.

The holiday records live in an application state snapshot under a key path
(``academicCalendar.data`` by default). This module selects them and coerces
them into ``HolidayRecord`` objects; anything missing or malformed degrades to
fewer (or no) records rather than an error.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from .exceptions import DataSourceError
from .models import HolidayRecord

logger = logging.getLogger(__name__)

DEFAULT_STORE_KEY = "academicCalendar.data"


def select_path(state: Any, key_path: str) -> Any:
    """Look up a dotted key path in a nested mapping.

    Args:
        state: State snapshot
        key_path: Dotted path such as ``academicCalendar.data``

    Returns:
        Value at the path, or None if any segment is missing
    """
    current = state
    for segment in key_path.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current


def coerce_records(raw: Any) -> tuple[HolidayRecord, ...]:
    """Convert raw upstream records into HolidayRecord objects.

    Args:
        raw: List of record mappings (or HolidayRecord objects), or None

    Returns:
        Tuple of records in upstream order; malformed items are skipped
    """
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        logger.warning(f"Holiday data is not a list ({type(raw).__name__}); treating as empty")
        return ()

    records: list[HolidayRecord] = []
    for index, item in enumerate(raw):
        if isinstance(item, HolidayRecord):
            records.append(item)
            continue
        if not isinstance(item, Mapping):
            logger.warning(f"Skipping holiday #{index}: expected a mapping, got {type(item).__name__}")
            continue
        try:
            records.append(HolidayRecord.model_validate(dict(item)))
        except ValidationError as e:
            logger.warning(f"Skipping holiday #{index}: {e}")

    return tuple(records)


class _SnapshotLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamp-like scalars as plain strings.

    Record dates are parsed per record later on, so an impossible date such as
    ``2023-02-29`` only invalidates that record instead of the whole file.
    """


_SnapshotLoader.add_constructor("tag:yaml.org,2002:timestamp", _SnapshotLoader.construct_yaml_str)


def load_state_file(path: Union[str, Path]) -> Any:
    """Load a state snapshot from a JSON or YAML file.

    Args:
        path: Path to the snapshot. ``.json`` files are parsed as JSON, anything
              else as YAML.

    Returns:
        Parsed snapshot, or None if the file does not exist

    Raises:
        DataSourceError: If the file exists but cannot be read, decoded or parsed
    """
    p = Path(path)
    if not p.exists():
        logger.warning(f"Holiday data file {p} not found; no holidays will be shown")
        return None

    try:
        text = p.read_text(encoding="utf-8")
        if p.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.load(text, Loader=_SnapshotLoader)  # nosec
    except OSError as e:
        raise DataSourceError(f"Cannot read holiday data file: {e}", str(p)) from e
    except (ValueError, yaml.YAMLError) as e:
        # ValueError covers JSON syntax errors and non-UTF-8 content
        raise DataSourceError(f"Holiday data file is not valid JSON/YAML: {e}", str(p)) from e


class HolidayStore:
    """Read-only view over the holiday records of a state snapshot."""

    def __init__(self, state: Any = None, key_path: str = DEFAULT_STORE_KEY) -> None:
        """Initialize holiday store.

        Args:
            state: State snapshot (mapping) or a bare list of records
            key_path: Dotted path of the records inside the snapshot
        """
        self.key_path = key_path
        raw = state if isinstance(state, (list, tuple)) else select_path(state, key_path)
        if state is not None and raw is None:
            logger.warning(f"No holiday data at '{key_path}' in state snapshot")
        self._holidays = coerce_records(raw)

        logger.debug(f"Holiday store initialized with {len(self._holidays)} records")

    @classmethod
    def from_file(
        cls, path: Optional[Union[str, Path]], key_path: str = DEFAULT_STORE_KEY
    ) -> "HolidayStore":
        """Create a store from a snapshot file.

        Args:
            path: Snapshot path; None gives an empty store
            key_path: Dotted path of the records inside the snapshot

        Returns:
            HolidayStore instance
        """
        state = load_state_file(path) if path else None
        return cls(state, key_path=key_path)

    @property
    def holidays(self) -> tuple[HolidayRecord, ...]:
        """Immutable snapshot of the holiday records."""
        return self._holidays

    def __len__(self) -> int:
        return len(self._holidays)
