# beancomp.exceptions - Exception hierarchy
"""beancomp exception hierarchy.

All beancomp exceptions inherit from BeancompError and support cause chaining.
"""


class BeancompError(Exception):
    """Base exception for all beancomp errors.

    Wraps original errors as __cause__ for proper exception chaining.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class SnapshotError(BeancompError):
    """Raised when a request names a document the snapshot does not hold.

    Examples: URI missing from the parsed trees, the document texts
    or the knowledge base.
    """

    def __init__(self, uri: str, missing: list[str]):
        super().__init__(
            f"Document {uri!r} missing from snapshot: {', '.join(missing)}"
        )
        self.uri = uri
        self.missing = missing


class LedgerParseError(BeancompError):
    """Raised when the ledger parser cannot produce a syntax tree."""

    pass


class ConfigError(BeancompError):
    """Raised when a config file exists but cannot be read."""

    pass
