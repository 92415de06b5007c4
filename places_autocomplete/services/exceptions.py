"""Domain-specific exceptions.

These are raised by collaborators (stores, provider adapters) and caught by the
engine; none of them escape the public ``PlacesAutocomplete`` surface.
"""


class ServiceError(Exception):
    pass


class StorageError(ServiceError):
    pass


class StorageQuotaExceeded(StorageError):
    pass


class ProviderError(ServiceError):
    pass
