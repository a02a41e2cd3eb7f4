class AppError(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(AppError):
    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} '{resource_id}' not found", code="NOT_FOUND")


class ValidationError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class MalformedResponseError(AppError):
    """The model did not return parsable JSON."""

    def __init__(self, raw_text: str):
        self.raw_text = raw_text
        super().__init__(
            "Invalid response format from AI model. Please try again.",
            code="MALFORMED_RESPONSE",
        )


class InvalidSchemaError(AppError):
    """The JSON parsed but does not describe a valid analysis."""

    def __init__(self, field: str, detail: str = ""):
        self.field = field
        self.detail = detail
        message = f"Invalid data structure received from AI model: '{field}'"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, code="INVALID_SCHEMA")


class TransportError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="TRANSPORT_FAILURE")
