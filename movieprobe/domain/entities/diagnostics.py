# movieprobe/domain/entities/diagnostics.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

DiagnosticValue = Union[float, int]


@dataclass(frozen=True)
class DiagnosticResult:
    """
    Measurements parsed from one ffmpeg filter run, in the order the filter
    logged them. dB readings are floats, everything else ints. Histogram
    buckets (e.g. volumedetect's `histogram_26db`) are kept separately as
    `(bucket_db, count)` pairs with a negative bucket.
    """
    filter_name: str
    values: Mapping[str, DiagnosticValue] = field(default_factory=dict)
    histogram: Tuple[Tuple[int, int], ...] = ()

    def __post_init__(self) -> None:
        # read-only view over a private copy
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "histogram", tuple(tuple(pair) for pair in self.histogram))

    def __hash__(self) -> int:
        return hash((self.filter_name, tuple(self.values.items()), self.histogram))

    def __getitem__(self, key: str) -> DiagnosticValue:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, key: str, default: Optional[DiagnosticValue] = None) -> Optional[DiagnosticValue]:
        return self.values.get(key, default)

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.values)
        out["histogram"] = [list(pair) for pair in self.histogram]
        return out
