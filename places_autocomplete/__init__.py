"""Type-ahead state engine for asynchronous Places suggestion providers."""

from places_autocomplete.config import AutocompleteSettings, PlacesApiSettings, get_settings
from places_autocomplete.domain.models import PlacesStatus, SuggestionState
from places_autocomplete.engine import PlacesAutocomplete
from places_autocomplete.services.script import ScriptScope, default_scope
from places_autocomplete.services.storage import MemorySessionStore, default_session_store

__all__ = [
    "AutocompleteSettings",
    "MemorySessionStore",
    "PlacesApiSettings",
    "PlacesAutocomplete",
    "PlacesStatus",
    "ScriptScope",
    "SuggestionState",
    "default_scope",
    "default_session_store",
    "get_settings",
]

__version__ = "0.1.0"
