"""
Immutable lookup tables used by the parser.

A Dictionary is a frozen value: the ``with_*`` methods return a new instance
instead of mutating, so a parser that holds one can never see it change
underneath a parse. Tables can be replaced wholesale from code or from a YAML
file for localization:

    prefixes:
      Dr.: [dr, doctor]
      Herr: [herr]
    line_suffixes: [Jr, Sr, II, III]
    professional_suffixes: [PhD, MD, Dipl.-Ing.]
    compound_markers: [von, van, zu]

Keys that are left out keep the built-in table.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

import yaml

from fullname_parser.config import get_config
from fullname_parser.dictionary.defaults import (
    COMPOUND_MARKERS,
    LINE_SUFFIXES,
    NOT_NICKNAMES,
    PREFIX_GROUPS,
    PROFESSIONAL_SUFFIXES,
    VOWELS,
)
from fullname_parser.logging import get_logger

log = get_logger(__name__)

PrefixSpec = Union[Mapping[str, Iterable[str]], Iterable[Any]]


class DictionaryError(ValueError):
    """Raised when lookup tables are malformed."""


def prefix_key(word: str) -> str:
    """Lowercase and drop periods, the form prefixes are compared in."""
    return word.lower().replace(".", "")


def order_professional_suffixes(suffixes: Iterable[str]) -> Tuple[str, ...]:
    """
    Drop duplicates and sort longest-first.

    A longer credential must be tried before any shorter one it contains
    (BEng before BE); the sort is stable so equal lengths keep caller order.
    """
    seen = set()
    unique = []
    for s in suffixes:
        if s not in seen:
            seen.add(s)
            unique.append(s)
    return tuple(sorted(unique, key=len, reverse=True))


@dataclass(frozen=True)
class PrefixGroup:
    """
    Synonyms for one honorific.

    ``canonical`` is what ends up in the prefix field. Groups supplied without
    one (canonical=None) report the token as it was typed.
    """

    canonical: Optional[str]
    synonyms: FrozenSet[str]

    def matches(self, key: str) -> bool:
        return key in self.synonyms

    def display(self, token: str) -> str:
        return token if self.canonical is None else self.canonical


def _build_prefix_groups(spec: PrefixSpec) -> Tuple[PrefixGroup, ...]:
    groups = []
    if isinstance(spec, Mapping):
        items = list(spec.items())
    else:
        items = []
        for entry in spec:
            if isinstance(entry, PrefixGroup):
                groups.append(entry)
                continue
            if isinstance(entry, str):
                raise DictionaryError(
                    f"Prefix group must be a list of synonyms, got string {entry!r}"
                )
            if isinstance(entry, Mapping):
                items.append((entry.get("canonical"), entry.get("synonyms")))
                continue
            items.append((None, entry))

    for canonical, synonyms in items:
        if isinstance(synonyms, str):
            synonyms = [synonyms]
        keys = frozenset(prefix_key(str(s)) for s in (synonyms or []) if str(s).strip())
        if not keys:
            raise DictionaryError(f"Prefix group {canonical!r} has no synonyms")
        groups.append(PrefixGroup(canonical=canonical, synonyms=keys))
    return tuple(groups)


def _clean_tokens(values: Iterable[Any], table: str) -> Tuple[str, ...]:
    if isinstance(values, str):
        raise DictionaryError(f"{table} must be a list, got string {values!r}")
    out = []
    for v in values:
        token = str(v).strip()
        if not token:
            raise DictionaryError(f"{table} contains an empty entry")
        out.append(token)
    return tuple(out)


@dataclass(frozen=True)
class Dictionary:
    prefix_groups: Tuple[PrefixGroup, ...]
    line_suffixes: Tuple[str, ...]
    professional_suffixes: Tuple[str, ...]
    compound_markers: FrozenSet[str]
    not_nicknames: Tuple[str, ...] = NOT_NICKNAMES
    vowels: FrozenSet[str] = field(default=VOWELS, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix_groups", tuple(self.prefix_groups))
        object.__setattr__(
            self, "line_suffixes", _clean_tokens(self.line_suffixes, "line_suffixes")
        )
        object.__setattr__(
            self,
            "professional_suffixes",
            order_professional_suffixes(
                _clean_tokens(self.professional_suffixes, "professional_suffixes")
            ),
        )
        object.__setattr__(
            self,
            "compound_markers",
            frozenset(m.lower() for m in _clean_tokens(self.compound_markers, "compound_markers")),
        )
        object.__setattr__(
            self,
            "not_nicknames",
            tuple(n.lower() for n in _clean_tokens(self.not_nicknames, "not_nicknames")),
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create_default(cls) -> "Dictionary":
        return cls(
            prefix_groups=_build_prefix_groups(PREFIX_GROUPS),
            line_suffixes=LINE_SUFFIXES,
            professional_suffixes=PROFESSIONAL_SUFFIXES,
            compound_markers=COMPOUND_MARKERS,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base: Optional["Dictionary"] = None) -> "Dictionary":
        """Overlay the tables present in ``data`` on ``base`` (default tables if None)."""
        if not isinstance(data, Mapping):
            raise DictionaryError(f"Dictionary data must be a mapping, got {type(data).__name__}")

        unknown = set(data) - {
            "prefixes", "line_suffixes", "professional_suffixes", "compound_markers", "not_nicknames",
        }
        if unknown:
            raise DictionaryError(f"Unknown dictionary tables: {', '.join(sorted(unknown))}")

        d = base or cls.create_default()
        if data.get("prefixes") is not None:
            d = d.with_prefixes(data["prefixes"])
        if data.get("line_suffixes") is not None:
            d = d.with_line_suffixes(data["line_suffixes"])
        if data.get("professional_suffixes") is not None:
            d = d.with_professional_suffixes(data["professional_suffixes"])
        if data.get("compound_markers") is not None:
            d = d.with_compound_markers(data["compound_markers"])
        if data.get("not_nicknames") is not None:
            d = replace(d, not_nicknames=data["not_nicknames"])
        return d

    @classmethod
    def from_yaml(cls, path: Union[str, Path], base: Optional["Dictionary"] = None) -> "Dictionary":
        yaml_path = Path(path)
        if not yaml_path.is_file():
            raise FileNotFoundError(f"Dictionary file not found: {yaml_path}")

        with open(yaml_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise DictionaryError(f"Invalid dictionary YAML in {yaml_path}: {exc}") from exc

        log.debug("Loaded dictionary tables %s from %s", sorted(data) if isinstance(data, dict) else data, yaml_path)
        return cls.from_mapping(data, base=base)

    # ------------------------------------------------------------------
    # Immutable updates
    # ------------------------------------------------------------------

    def with_prefixes(self, groups: PrefixSpec) -> "Dictionary":
        """
        Replace the prefix table.

        Accepts ``{display: [synonyms]}`` or a list of synonym lists; groups
        given as bare lists have no display form.
        """
        return replace(self, prefix_groups=_build_prefix_groups(groups))

    def with_line_suffixes(self, suffixes: Iterable[str]) -> "Dictionary":
        return replace(self, line_suffixes=suffixes)

    def with_professional_suffixes(self, suffixes: Iterable[str]) -> "Dictionary":
        return replace(self, professional_suffixes=suffixes)

    def with_compound_markers(self, markers: Iterable[str]) -> "Dictionary":
        return replace(self, compound_markers=markers)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_prefix(self, word: str) -> Optional[PrefixGroup]:
        key = prefix_key(word)
        for group in self.prefix_groups:
            if group.matches(key):
                return group
        return None

    def is_compound(self, word: str) -> bool:
        return word.lower() in self.compound_markers

    def to_mapping(self) -> Dict[str, Any]:
        """Plain-data view, the same shape ``from_mapping`` accepts."""
        return {
            "prefixes": [
                {"canonical": g.canonical, "synonyms": sorted(g.synonyms)} for g in self.prefix_groups
            ],
            "line_suffixes": list(self.line_suffixes),
            "professional_suffixes": list(self.professional_suffixes),
            "compound_markers": sorted(self.compound_markers),
            "not_nicknames": list(self.not_nicknames),
        }


def load_dictionary(path: Union[str, Path, None] = None) -> Dictionary:
    """
    Dictionary for the current configuration.

    Uses ``path`` when given, else ``dictionary.path`` from the config file,
    else the built-in tables.
    """
    source = path or get_config().dictionary.get("path")
    if not source:
        return Dictionary.create_default()

    log.info("Loading dictionary tables from %s", source)
    return Dictionary.from_yaml(source)
