from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import pandas as pd

from .body_side import BodySide
from .exceptions import AtlasLoadError, AtlasSchemaError
from .neuron import Neuron

logger = logging.getLogger(__name__)

ATLAS_COLUMNS: Tuple[str, ...] = ("name", "x", "y", "z", "r", "g", "b")
NUMERIC_COLUMNS: Tuple[str, ...] = ATLAS_COLUMNS[1:]

WILDCARD = "*"
_QUERY_SEPARATORS = re.compile(r"[ ;,\t]")


def parse_query(text: Optional[str]) -> List[str]:
    """
    Split a search string into name patterns.

    Patterns are separated by spaces, semicolons, commas or tabs; empty
    tokens are dropped, so "AVA, RIM" gives ["AVA", "RIM"].
    """
    if not text:
        return []
    return [tok for tok in _QUERY_SEPARATORS.split(text) if tok]


def matches(neuron: Neuron, patterns: Sequence[str]) -> bool:
    """True if any pattern is the wildcard or a prefix of the neuron name."""
    return any(pat == WILDCARD or neuron.name.startswith(pat) for pat in patterns)


class NeuronAtlas:
    """
    Named collection of NeuroPAL neurons keyed by neuron name.

    Includes:
    - CSV / DataFrame loading with row-level sanitisation
    - Name-prefix search and body-side selection
    - Export back to a DataFrame
    """

    def __init__(
        self,
        name: str,
        neurons: Iterable[Neuron],
        file_path: Optional[Path] = None,
        description: str = "",
    ) -> None:
        self.name = name
        self.file_path = file_path
        self.description = description
        self._neurons: Dict[str, Neuron] = {n.name: n for n in neurons}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------
    @classmethod
    def from_csv(
        cls,
        path: Path | str,
        name: Optional[str] = None,
        description: str = "",
    ) -> NeuronAtlas:
        path = Path(path)
        if not path.is_file():
            raise AtlasLoadError(f"Atlas file not found at {path}")

        bad_lines: List[List[str]] = []

        def skip_bad_line(fields: List[str]) -> None:
            # returning None drops the line
            bad_lines.append(fields)

        try:
            df = pd.read_csv(
                path,
                dtype=str,
                skipinitialspace=True,
                engine="python",
                on_bad_lines=skip_bad_line,
            )
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise AtlasLoadError(f"Could not read atlas file {path}: {e}") from e

        atlas = cls.from_frame(
            df,
            name=name or path.stem,
            description=description,
            n_rejected=len(bad_lines),
        )
        atlas.file_path = path
        return atlas

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        name: str,
        description: str = "",
        n_rejected: int = 0,
    ) -> NeuronAtlas:
        """
        Build an atlas from a table with name,x,y,z,r,g,b columns.

        n_rejected counts rows the caller already dropped (e.g. CSV lines
        with the wrong number of fields) so they show up in the skip warning.
        """
        df = df.rename(columns=lambda c: str(c).strip().lower())

        missing = [c for c in ATLAS_COLUMNS if c not in df.columns]
        if missing:
            raise AtlasSchemaError(
                f"Atlas '{name}' is missing required columns {missing}. "
                f"Expected header: {','.join(ATLAS_COLUMNS)}"
            )

        clean = df.loc[:, list(ATLAS_COLUMNS)].copy()
        clean["name"] = clean["name"].astype("string").str.strip()
        for col in NUMERIC_COLUMNS:
            clean[col] = pd.to_numeric(clean[col], errors="coerce")

        valid = clean["name"].fillna("").ne("").astype(bool)
        valid &= clean[list(NUMERIC_COLUMNS)].notna().all(axis=1)

        n_skipped = int((~valid).sum()) + n_rejected
        if n_skipped:
            logger.warning(
                "Skipped unparsable atlas rows",
                extra={"atlas": name, "n_skipped": n_skipped},
            )

        neurons = [
            Neuron(
                name=str(row.name),
                x=float(row.x),
                y=float(row.y),
                z=float(row.z),
                r=float(row.r),
                g=float(row.g),
                b=float(row.b),
            )
            for row in clean[valid].itertuples(index=False)
        ]

        atlas = cls(name=name, neurons=neurons, description=description)
        if len(atlas) < len(neurons):
            logger.warning(
                "Duplicate neuron names in atlas; last row kept",
                extra={"atlas": name, "n_duplicates": len(neurons) - len(atlas)},
            )
        logger.info("Atlas loaded", extra={"atlas": name, "n_neurons": len(atlas)})
        return atlas

    # -------------------------------------------------------------------------
    # Mapping-ish access
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._neurons)

    def __contains__(self, name: object) -> bool:
        return name in self._neurons

    def __getitem__(self, name: str) -> Neuron:
        return self._neurons[name]

    def __iter__(self) -> Iterator[Neuron]:
        return iter(self._neurons.values())

    @property
    def names(self) -> List[str]:
        return sorted(self._neurons)

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------
    def select(self, query: Optional[str], side: BodySide = BodySide.BOTH) -> List[Neuron]:
        """
        Neurons whose name matches the search query and that lie on the
        requested body side, sorted by name.
        """
        patterns = parse_query(query)
        side = BodySide.parse(side)
        selected = [
            n for n in self._neurons.values()
            if matches(n, patterns) and side.includes(n)
        ]
        selected.sort(key=lambda n: n.name)
        return selected

    def to_frame(self, neurons: Optional[Sequence[Neuron]] = None) -> pd.DataFrame:
        if neurons is None:
            neurons = sorted(self._neurons.values(), key=lambda n: n.name)
        return pd.DataFrame(
            [n.to_dict() for n in neurons],
            columns=list(ATLAS_COLUMNS),
        )

    def __repr__(self) -> str:
        return f"NeuronAtlas(name={self.name!r}, n_neurons={len(self)})"
