"""Error taxonomy shared by use cases and adapters."""


class LeadflowError(Exception):
    """Base class for all application errors."""


class ConfigurationError(LeadflowError):
    """Missing or invalid credentials/configuration. Not retryable."""


class UpstreamError(LeadflowError):
    """The CRM could not be reached or answered with a failure."""


class StorageError(LeadflowError):
    """Roster, settings or event storage failed. Fatal to the current operation."""
