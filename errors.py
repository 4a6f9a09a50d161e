class ChatError(Exception):
    """Base error for the chat dispatch path. Carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ChatError):
    status_code = 400

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)


class UnsupportedProviderError(ChatError):
    status_code = 400

    def __init__(self, provider: str | None = None):
        super().__init__("Invalid provider")
        self.provider = provider


class MissingCredentialError(ChatError):
    def __init__(self, env_name: str):
        super().__init__(f"{env_name} is not defined")
        self.env_name = env_name


class ProviderCallError(ChatError):
    def __init__(self, provider: str, message: str):
        super().__init__(message)
        self.provider = provider
