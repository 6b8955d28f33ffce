class ApiError(Exception):

    default_message = "Error"
    default_status  = 400

    def __init__ ( self, message: str = None, status: int = None ):

        self.message = message or self.default_message
        self.status  = status or self.default_status

        super().__init__(self.message)

class ValidationError(ApiError):
    default_message = "Validation failed"
    default_status  = 400

class InternalError(ApiError):
    default_message = "Internal server error"
    default_status  = 500
