from typing import Optional


class GitUrlParseError(ValueError):
    message = "Unexpected error occurred during parsing"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class FoundNullBytes(GitUrlParseError):
    message = "Found null bytes within input url before parsing"


class InvalidPathEmpty(GitUrlParseError):
    message = "Git Url must have a path"


class InvalidPortNumber(GitUrlParseError):
    message = "Invalid port number"


class InvalidPathSeparator(InvalidPortNumber):
    message = "Only sshlike url paths start with ':'"


class InvalidTokenUnsupported(GitUrlParseError):
    message = "Token (password) only supported by httplike urls"


InvalidPasswordUnsupported = InvalidTokenUnsupported


class InvalidFilePattern(GitUrlParseError):
    message = "Filelike urls expect only scheme and/or path"


class ProviderUnsupported(GitUrlParseError):
    message = "GitUrl not supported by provider"


class ProviderParseFail(GitUrlParseError):
    message = "Provider info parse failed"

    def __init__(self, reason: str):
        super().__init__(f"{self.message}: {reason}")
        self.reason = reason


class UrlParseError(GitUrlParseError):
    message = "Error from url validation"

    def __init__(self, cause: Exception):
        super().__init__(f"{self.message}: {cause}")
        self.cause = cause
