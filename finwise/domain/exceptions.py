"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Input violates a data model invariant"""

    pass


class InvalidTransactionDataError(InvalidInputError):
    """Transaction data is malformed or invalid"""

    pass


class InvalidProfileError(InvalidInputError):
    """User financial profile is malformed or invalid"""

    pass


class InvalidGoalError(InvalidInputError):
    """Financial goal is malformed or invalid"""

    pass


class InvalidPeriodError(InvalidInputError):
    """Unknown analysis period"""

    pass


class DataAPIError(DomainException):
    """Finance data API returned an error or is unavailable"""

    pass


class UserNotFoundError(DataAPIError):
    """Finance data API has no record of the user"""

    pass
