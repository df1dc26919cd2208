class LyricFinderError(RuntimeError):
    pass


class ValidationError(LyricFinderError):
    """Artist or song is missing or blank."""


class ProviderError(LyricFinderError):
    """The lyrics provider could not be reached or answered with garbage."""
