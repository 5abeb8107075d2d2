from functools import lru_cache

from app.core.config import settings

from .local_taxonomy import LocalTaxonomy
from .provider import HARD_SKILLS, SOFT_SKILLS, TaxonomyProvider, VocabularySet


@lru_cache(maxsize=1)
def get_default_taxonomy_provider() -> TaxonomyProvider:
    return LocalTaxonomy(settings.ats_taxonomy_path)


__all__ = [
    "HARD_SKILLS",
    "SOFT_SKILLS",
    "TaxonomyProvider",
    "LocalTaxonomy",
    "VocabularySet",
    "get_default_taxonomy_provider",
]
