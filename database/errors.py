# errors.py


class RecruitmentError(Exception):
    """Base class for every error the recruitment tool reports to the user."""


class ConfigError(RecruitmentError):
    pass


class HashingError(RecruitmentError):
    pass


class ValidationError(RecruitmentError):
    pass


class DuplicateUserError(RecruitmentError):
    pass


class NotFoundError(RecruitmentError):
    pass


class InvalidCredentialsError(RecruitmentError):
    pass


class StorageError(RecruitmentError):
    pass


class SchemaError(RecruitmentError):
    pass
