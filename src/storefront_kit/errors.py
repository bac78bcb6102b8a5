class StorefrontKitError(Exception):
    pass


class CatalogError(StorefrontKitError):
    """The catalog input could not be read as a product export."""


class StructureMismatchError(StorefrontKitError):
    """Source and clone trees diverged during the lock-step style walk."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Clone structure mismatch at {path}: {detail}")


class PseudoElementUnavailable(StorefrontKitError):
    """The style engine refused to report a pseudo-element's computed style."""


class InvalidSelectorError(StorefrontKitError):
    """The style engine rejected a CSS selector as malformed."""
