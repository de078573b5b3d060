"""
Errors raised by the audit engine on caller misuse.

These carry no HTTP semantics; the engine modules stay importable without
the web stack.
"""


class UnknownCategoryError(LookupError):
    """Lookup of a category the engine does not score or analyze."""

    def __init__(self, category: str):
        super().__init__(f"Unknown audit category: {category!r}")
        self.category = category


class InvalidSeverityError(LookupError):
    """Lookup of an issue severity tier that does not exist."""

    def __init__(self, severity: str):
        super().__init__(f"Invalid issue severity: {severity!r}")
        self.severity = severity
