from __future__ import annotations

import json
from pathlib import Path

from .provider import TaxonomyProvider, VocabularySet


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, vocabularies_path: str | Path | None = None) -> None:
        path = Path(vocabularies_path) if vocabularies_path else Path(__file__).with_name("vocabularies.json")
        self._vocabularies = self._load_vocabularies(path)

    @staticmethod
    def _load_vocabularies(path: Path) -> dict[str, VocabularySet]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid vocabulary file '{path}': expected a top-level mapping.")
        return {
            str(name).strip().lower(): VocabularySet.from_terms(str(name).strip().lower(), terms or [])
            for name, terms in raw.items()
        }

    def vocabulary(self, name: str) -> VocabularySet:
        return self._vocabularies[name.strip().lower()]

    def names(self) -> list[str]:
        return list(self._vocabularies)
