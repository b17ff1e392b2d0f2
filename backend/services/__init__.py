# backend/services/__init__.py

from .search import get_search_service, RecipeSearchService, MockRecipeSearch
from .audio import get_transcriber, Transcriber, WhisperTranscriber

__all__ = [
    'get_search_service',
    'RecipeSearchService',
    'MockRecipeSearch',
    'get_transcriber',
    'Transcriber',
    'WhisperTranscriber',
]
