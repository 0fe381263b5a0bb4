"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Input is malformed or a required field is missing"""

    pass


class NotFoundError(DomainException):
    """Referenced user record (e.g. tax profile) does not exist"""

    pass


class UpstreamError(DomainException):
    """Record store lookup failed or returned unusable data"""

    pass
