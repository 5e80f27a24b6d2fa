from .azure_devops_provider import AzureDevOpsProvider
from .errors import (
    FoundNullBytes,
    GitUrlParseError,
    InvalidFilePattern,
    InvalidPasswordUnsupported,
    InvalidPathEmpty,
    InvalidPathSeparator,
    InvalidPortNumber,
    InvalidTokenUnsupported,
    ProviderParseFail,
    ProviderUnsupported,
    UrlParseError,
)
from .generic_provider import GenericProvider
from .git_provider import GitProvider, build_git_provider
from .git_url import GitUrl
from .gitlab_provider import GitLabProvider
from .hint import GitUrlParseHint, classify_hint

__all__ = [
    "AzureDevOpsProvider",
    "FoundNullBytes",
    "GenericProvider",
    "GitLabProvider",
    "GitProvider",
    "GitUrl",
    "GitUrlParseError",
    "GitUrlParseHint",
    "InvalidFilePattern",
    "InvalidPasswordUnsupported",
    "InvalidPathEmpty",
    "InvalidPathSeparator",
    "InvalidPortNumber",
    "InvalidTokenUnsupported",
    "ProviderParseFail",
    "ProviderUnsupported",
    "UrlParseError",
    "build_git_provider",
    "classify_hint",
]
