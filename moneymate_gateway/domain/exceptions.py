"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AdvisorAPIError(DomainException):
    """LLM advisor API returned an error or is unavailable"""

    pass


class ProfileNotFoundError(DomainException):
    """User has not completed the profile questionnaire"""

    pass


class RecordNotFoundError(DomainException):
    """Transaction or debt does not exist for this user"""

    pass
