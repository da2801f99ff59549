"""Exceptions raised on caller contract violations."""


class MalformedSymbolError(ValueError):
    """A Symbol carries a digest of the wrong width or type."""


class ManifestError(ValueError):
    """A scene manifest could not be turned into entity instances."""
