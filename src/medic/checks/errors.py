"""Errors raised for misconfigured check catalogs.

Check outcomes are never exceptions; these signal programming errors in the
catalog and are allowed to end the run.
"""


class MedicError(Exception):
    """Base class for medic errors."""


class UnknownCheckError(MedicError, LookupError):
    """No check is registered for a category and operation."""

    def __init__(self, category: str, operation: str):
        self.category = category
        self.operation = operation
        super().__init__(f"No check registered for {category}.{operation}")


class DuplicateCheckError(MedicError):
    """A check is already registered for a category and operation."""

    def __init__(self, category: str, operation: str):
        self.category = category
        self.operation = operation
        super().__init__(f"Check {category}.{operation} is already registered")


class InvalidResultError(MedicError, TypeError):
    """A check returned something other than a check result."""

    def __init__(self, category: str, operation: str, value: object):
        self.category = category
        self.operation = operation
        self.value = value
        super().__init__(
            f"Check {category}.{operation} returned {value!r}, "
            "expected Ok, Skipped, Warn or Error"
        )
