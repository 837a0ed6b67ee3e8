class ConfigurationError(Exception):
    """A required setting is missing or an input failed validation."""
