"""
Data models shared by the parsing stages and the batch runner.

- NameRecord:  the immutable result of one parse
- ParseState:  per-call accumulators threaded through the stages
- Parsed / Ambiguous: tagged outcome of the decomposition, consumed by
  FullNameParser only
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Dict, List, Tuple, Union


@dataclass(frozen=True)
class NameRecord:
    full_name: str = ""
    prefix: str = ""
    first: str = ""
    middle: str = ""
    last: str = ""
    suffix: str = ""

    FIELDS: ClassVar[Tuple[str, ...]] = ("full_name", "prefix", "first", "middle", "last", "suffix")

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def to_row(self) -> List[str]:
        return [getattr(self, f) for f in self.FIELDS]

    @property
    def name(self) -> str:
        """First, middle and last joined, skipping empty parts."""
        return " ".join(p for p in (self.first, self.middle, self.last) if p)


@dataclass
class ParseState:
    full_name: str
    prefix: str = ""
    suffix: str = ""
    first: str = ""
    middle: str = ""
    last: str = ""
    cursor: int = 0

    def to_record(self) -> NameRecord:
        return NameRecord(
            full_name=self.full_name,
            prefix=self.prefix,
            first=self.first.strip(),
            middle=self.middle.strip(),
            last=self.last.strip(),
            suffix=self.suffix,
        )

    def ambiguous(self, reason: str) -> "Ambiguous":
        return Ambiguous(reason=reason, prefix=self.prefix, suffix=self.suffix)


@dataclass(frozen=True)
class Parsed:
    record: NameRecord


@dataclass(frozen=True)
class Ambiguous:
    """The tokens could not be segmented; carries what was already committed."""

    reason: str
    prefix: str = ""
    suffix: str = ""


ParseOutcome = Union[Parsed, Ambiguous]
