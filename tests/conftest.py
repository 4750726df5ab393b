"""Shared test fixtures and configuration for pytest."""

import os
import random
from typing import Callable, Dict, List, Optional, Tuple

import pytest

from tango.config import settings
from tango.models import Tier
from tango.quiz import QuizSession
from tango.vocabulary import WordCatalog


def write_word_lists(
    directory: str, rows: Dict[Tier, List[Tuple[str, str]]]
) -> str:
    """Write one ``term,meaning`` CSV per tier into ``directory``."""
    for tier, pairs in rows.items():
        with open(os.path.join(directory, f"{tier.value}.csv"), "w", encoding="utf-8") as f:
            f.write("term,meaning\n")
            for term, meaning in pairs:
                f.write(f"{term},{meaning}\n")
    return directory


def numbered_pairs(count: int) -> List[Tuple[str, str]]:
    return [(f"word{i}", f"meaning{i}") for i in range(count)]


@pytest.fixture
def catalog() -> WordCatalog:
    """The word catalog shipped with the package."""
    return WordCatalog(settings.VOCAB_DIR)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def session(catalog: WordCatalog, rng: random.Random) -> QuizSession:
    return QuizSession(catalog, rng=rng)


@pytest.fixture
def make_catalog(tmp_path) -> Callable[..., WordCatalog]:
    """Build a catalog whose tiers all hold ``count`` words (or custom rows)."""

    def _make(
        count: int = 10, rows: Optional[Dict[Tier, List[Tuple[str, str]]]] = None
    ) -> WordCatalog:
        rows = rows or {tier: numbered_pairs(count) for tier in Tier}
        write_word_lists(str(tmp_path), rows)
        return WordCatalog(str(tmp_path))

    return _make
