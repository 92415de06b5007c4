from places_autocomplete.services.cache import SuggestionCache
from places_autocomplete.services.fetch import FetchOrchestrator
from places_autocomplete.services.provider import ProviderInitializer
from places_autocomplete.services.value import ValueController

__all__ = [
    "FetchOrchestrator",
    "ProviderInitializer",
    "SuggestionCache",
    "ValueController",
]
