class ChatError(Exception):
    """Terminal failure for one chat request; rendered as {"error": message}."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ClientInputError(ChatError):
    status_code = 400
    message = "Invalid request body"


class MethodNotAllowedError(ChatError):
    status_code = 405
    message = "Method not allowed"


class ConfigurationError(ChatError):
    status_code = 500
    message = "AI service not configured"


class UpstreamRateLimitError(ChatError):
    status_code = 429
    message = "Service is busy. Please try again in a moment."


class UpstreamGenericError(ChatError):
    status_code = 500
    message = "Failed to generate response. Please try again."
