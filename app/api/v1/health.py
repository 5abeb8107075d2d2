from fastapi import APIRouter

from app.taxonomy import get_default_taxonomy_provider

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check that the scorer and its vocabularies are loaded.")
async def health_check():
    taxonomy = get_default_taxonomy_provider()
    return {
        "status": "healthy",
        "vocabularies": {name: len(taxonomy.vocabulary(name)) for name in taxonomy.names()},
    }
