"""High-score ledger persisted as a small JSON document"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import BaseModel, Field, ValidationError, conint

# Ledger location relative to the working directory
DEFAULT_LEDGER_PATH = Path(".data") / "data.json"

MAX_ENTRIES = 10

# Strict so that "7", true or 3.0 in a hand-edited file are rejected
Score = conint(strict=True, ge=0)


class LedgerError(Exception):
    """Raised when the ledger file cannot be read, parsed or written"""

    def __init__(self, message: str, path: Path):
        super().__init__(f"{message}: {path}")
        self.path = path


class LedgerFile(BaseModel):
    """On-disk ledger document"""

    scores: list[Score] = Field(
        default_factory=list,
        description="Best scores, highest first",
    )


def _top(scores: Iterable[int]) -> list[int]:
    return sorted(scores, reverse=True)[:MAX_ENTRIES]


class ScoreLedger:
    """Top-10 high-score list.

    Loaded once at startup and updated through :meth:`record`, which
    rewrites the whole file each time. Single process, single writer.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_LEDGER_PATH, scores: Iterable[int] = ()):
        self._path = Path(path)
        self._scores = _top(scores)

    @classmethod
    def load(cls, path: Union[str, Path] = DEFAULT_LEDGER_PATH) -> "ScoreLedger":
        """Load the ledger from disk.

        A missing file gives an empty ledger and creates the parent
        directory so later writes succeed.

        Raises:
            LedgerError: If the file exists but cannot be read or parsed
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise LedgerError(f"Cannot create ledger directory ({e})", path) from e
            return cls(path)
        except (OSError, ValueError) as e:
            raise LedgerError(f"Cannot read ledger ({e})", path) from e

        if not isinstance(data, dict):
            raise LedgerError("Ledger must be a JSON object", path)

        try:
            parsed = LedgerFile.model_validate(data)
        except ValidationError as e:
            raise LedgerError(f"Invalid ledger contents ({e.error_count()} errors)", path) from e

        return cls(path, parsed.scores)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def scores(self) -> tuple[int, ...]:
        """Stored scores, highest first"""
        return tuple(self._scores)

    @property
    def best(self) -> int:
        """Highest recorded score, 0 when empty"""
        return self._scores[0] if self._scores else 0

    def __len__(self) -> int:
        return len(self._scores)

    def __repr__(self) -> str:
        return f"<ScoreLedger path={str(self._path)!r} scores={self._scores}>"

    def qualifies(self, score: int) -> bool:
        """Whether recording this score would keep it in the top entries"""
        if len(self._scores) < MAX_ENTRIES:
            return True
        return score > self._scores[-1]

    def record(self, score: int) -> Optional[int]:
        """Add a score, keep the top entries and persist the full list.

        Returns:
            Zero-based row of the new entry, or None if it did not make the
            table. A score tying existing entries is placed after them.

        Raises:
            ValueError: If score is negative
            LedgerError: If the file cannot be written
        """
        if score < 0:
            raise ValueError(f"Score must be non-negative, got {score}")

        rank = sum(1 for existing in self._scores if existing >= score)
        self._scores = _top([*self._scores, score])
        self._save()
        return rank if rank < MAX_ENTRIES else None

    def clear(self) -> None:
        """Drop every stored score and persist the empty list"""
        self._scores = []
        self._save()

    def _save(self) -> None:
        data = LedgerFile(scores=self._scores).model_dump()
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise LedgerError(f"Cannot write ledger ({e})", self._path) from e
