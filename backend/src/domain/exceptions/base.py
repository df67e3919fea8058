"""
DomainError - Common base for every business rule violation.
The presentation layer maps each subclass to an HTTP status code.
"""


class DomainError(Exception):
    """Base class for domain exceptions. Carries a short, caller-safe reason."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
