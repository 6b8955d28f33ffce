from .errors import ApiError, ValidationError, InternalError
