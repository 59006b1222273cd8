"""
Data record for a single trial.

The record is a mapping of field name to scalar value,
accumulated phase by phase and exported as one flat table row. Responses are
kept in two separate sub-records (first and final round) that are flattened
into `response<Field>` and `response<Field>Final` columns only when the
record is read.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .errors import RecordError

START_FIELD = 'timestampStart'


class ResponseRound(Mapping):
    """
    Response fields from one round of response collection.

    Keys are the collector's field names; `column()` gives the flattened
    column name used in the table row.

    Args:
        prefix: Column prefix (e.g. "response")
        suffix: Column suffix (e.g. "Final")
    """

    def __init__(self, prefix: str = "response", suffix: str = ""):
        self.prefix = prefix
        self.suffix = suffix
        self._values: Dict[str, Any] = {}

    def column(self, field: str) -> str:
        """Flattened column name: prefix + capitalised field + suffix."""
        return f"{self.prefix}{field[:1].upper()}{field[1:]}{self.suffix}"

    def columns(self) -> List[str]:
        return [self.column(field) for field in self._values]

    def set(self, field: str, value: Any) -> None:
        self._values[field] = value

    def flatten(self) -> Dict[str, Any]:
        return {self.column(field): value for field, value in self._values.items()}

    def __getitem__(self, field: str) -> Any:
        return self._values[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        return f"ResponseRound({self.flatten()!r})"


class DataRecord(Mapping):
    """
    Append-only record of a trial's data.

    Fields can be added or overwritten but never removed. The start timestamp
    can only be written once.

    Columns are ordered as: plain fields in insertion order, then first-round
    response columns, then final-round response columns. A response column
    follows every plain field, including fields written after it.

    Example:
        record = DataRecord(['timestampStart', 'timeEnd'])
        record.mark_start(1000)
        record['timeEnd'] = 250
        record.response.set('value', 7)
        record.as_row()
        # {'timestampStart': 1000, 'timeEnd': 250, 'responseValue': 7}
    """

    def __init__(self, fields: Optional[Iterable[str]] = None):
        self._fields: Dict[str, Any] = {}
        for field in fields or ():
            self._fields[field] = None
        self.response = ResponseRound("response", "")
        self.final_response = ResponseRound("response", "Final")

    @property
    def timestamp_start(self) -> Optional[float]:
        return self._fields.get(START_FIELD)

    def mark_start(self, timestamp: float) -> None:
        """
        Record the trial start timestamp.

        Raises:
            RecordError: If the start timestamp was already recorded
        """
        if self._fields.get(START_FIELD) is not None:
            raise RecordError(f"{START_FIELD} already set to {self._fields[START_FIELD]}")
        self._fields[START_FIELD] = timestamp

    def __setitem__(self, field: str, value: Any) -> None:
        if field == START_FIELD:
            self.mark_start(value)
            return
        self._fields[field] = value

    def __delitem__(self, field: str) -> None:
        raise RecordError(f"Cannot remove '{field}': data record fields are append-only")

    def _flat(self) -> Dict[str, Any]:
        flat = dict(self._fields)
        flat.update(self.response.flatten())
        flat.update(self.final_response.flatten())
        return flat

    def __getitem__(self, field: str) -> Any:
        if field in self._fields:
            return self._fields[field]
        return self._flat()[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._flat())

    def __len__(self) -> int:
        return len(self._fields) + len(self.response) + len(self.final_response)

    def as_row(self, headers: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """
        Flat row of the record.

        Args:
            headers: Columns to include (None = every column, in record order).
                     Columns missing from the record are given as None.

        Returns:
            Dictionary of column name to value
        """
        flat = self._flat()
        if headers is None:
            return flat
        return {header: flat.get(header) for header in headers}

    def __repr__(self):
        return f"DataRecord({self._flat()!r})"
