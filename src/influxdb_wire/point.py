"""In-memory points handed to the line-protocol encoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence
import logging

import pandas as pd

from .models import Key
from .precision import WritePrecision
from .timestamp import scale_to
from .values import FieldValue, fields_from_mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """One data point: a measurement, its fields, optional tags and time."""

    measurement: Key
    fields: Mapping[Key, FieldValue]
    tags: Mapping[Key, str] = field(default_factory=dict)
    time: Optional[Any] = None

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError("a point needs at least one field")

    def timestamp(self, precision: WritePrecision) -> Optional[int]:
        """Return the time as a count of ``precision`` units, or None."""
        if self.time is None:
            return None
        return scale_to(precision, self.time)


def make_point(
    measurement: str | Key,
    fields: Mapping[Any, Any],
    tags: Optional[Mapping[Any, Any]] = None,
    time: Optional[Any] = None,
) -> Point:
    """Build a point from plain Python values."""
    name = measurement if isinstance(measurement, Key) else Key(measurement)
    tag_map: Dict[Key, str] = {}
    for k, v in (tags or {}).items():
        tag_map[k if isinstance(k, Key) else Key(k)] = str(v)
    return Point(measurement=name, fields=fields_from_mapping(fields), tags=tag_map, time=time)


def points_from_dataframe(
    df: pd.DataFrame,
    measurement: str | Key,
    tag_columns: Optional[List[str]] = None,
    field_columns: Optional[List[str]] = None,
    time_column: str = "time",
) -> List[Point]:
    """Build one point per dataframe row, keeping each column's dtype."""
    if time_column not in df.columns:
        raise ValueError("time_column must exist in dataframe")
    tag_columns = tag_columns or []
    fields = field_columns or [c for c in df.columns if c not in ([time_column] + tag_columns)]
    if not fields:
        raise ValueError("dataframe has no field columns")
    # column-wise: iterrows would upcast mixed int/float rows to float
    columns = {c: df[c].tolist() for c in [time_column, *tag_columns, *fields]}
    points = []
    for i in range(len(df)):
        points.append(
            make_point(
                measurement,
                fields={k: columns[k][i] for k in fields},
                tags={k: columns[k][i] for k in tag_columns},
                time=columns[time_column][i],
            )
        )
    return points


def chunk_points(points: Sequence[Point], batch_size: Optional[int]) -> List[List[Point]]:
    """Split points into write batches; no batch size means a single batch."""
    if batch_size is None:
        return [list(points)]
    if batch_size <= 0:
        raise ValueError("batch_size must be greater than zero")
    chunks = [list(points[i : i + batch_size]) for i in range(0, len(points), batch_size)]
    logger.debug("Split %d points into %d batches of %d", len(points), len(chunks), batch_size)
    return chunks
