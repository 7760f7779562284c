"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Input is degenerate for a calculation (zero income, negative years, ...)"""

    pass


class InvalidCSVError(DomainException):
    """Uploaded expense CSV is malformed or has an invalid row"""

    pass
