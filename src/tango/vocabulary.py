import logging
import os
from typing import Any, Dict, List, Tuple

import pandas as pd

from .models import Tier, Word

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a tier's word list cannot be used for a quiz."""


class WordCatalog:
    """Loads the per-tier word lists and serves them read-only."""

    def __init__(self, directory: str, min_words: int = 4):
        self.directory = directory
        self.min_words = min_words
        self.word_sets: Dict[Tier, Tuple[Word, ...]] = {}
        self.load_all()

    def load_all(self):
        word_sets = {}
        for tier in Tier:
            word_sets[tier] = self._load_tier(tier)
            logger.info(f"Loaded {len(word_sets[tier])} words for {tier.value}")
        self.word_sets = word_sets

    def _load_tier(self, tier: Tier) -> Tuple[Word, ...]:
        file_path = os.path.join(self.directory, f"{tier.value}.csv")
        if not os.path.exists(file_path):
            logger.error(f"Missing word list for {tier.value}: {file_path}")
            raise CatalogError(f"No word list for tier '{tier.value}'")

        df = pd.read_csv(file_path, encoding="utf-8", dtype=str, keep_default_na=False)
        if "term" not in df.columns or "meaning" not in df.columns:
            logger.error(f"Rejecting {file_path}: Missing columns.")
            raise CatalogError(f"{file_path} needs 'term' and 'meaning' columns")

        df["term"] = df["term"].str.strip()
        df["meaning"] = df["meaning"].str.strip()
        if (df["term"] == "").any() or (df["meaning"] == "").any():
            raise CatalogError(f"{file_path} has empty terms or meanings")
        if df["meaning"].duplicated().any():
            duplicates = sorted(set(df.loc[df["meaning"].duplicated(), "meaning"]))
            raise CatalogError(f"{file_path} repeats meanings: {duplicates}")
        # Every question needs min_words - 1 distractors from the same tier.
        if len(df) < self.min_words:
            raise CatalogError(
                f"Tier '{tier.value}' has {len(df)} words, needs at least {self.min_words}"
            )

        return tuple(
            Word(term=row["term"], meaning=row["meaning"])
            for row in df.to_dict("records")
        )

    def words_for(self, tier: Tier) -> Tuple[Word, ...]:
        return self.word_sets[Tier(tier)]

    def get_tiers(self) -> List[Dict[str, Any]]:
        return [
            {"id": tier.value, "name": tier.label, "count": len(self.word_sets[tier])}
            for tier in Tier
        ]
