from abc import ABC, abstractmethod
from typing import TypeVar

from yarl import URL

from .git_url import GitUrl

T = TypeVar("T", bound="GitProvider")

AZURE_DEVOPS_HOSTS = ["dev.azure.com", "ssh.dev.azure.com"]


class GitProvider(ABC):
    """Hosting provider info extracted from the path of a url.

    Subclass it to support another provider's path layout, then pass the
    subclass to :meth:`GitUrl.provider_info`.
    """

    @classmethod
    @abstractmethod
    def from_git_url(cls: type[T], url: GitUrl) -> T: ...

    @classmethod
    @abstractmethod
    def from_url(cls: type[T], url: URL) -> T: ...

    @abstractmethod
    def fullname(self) -> str: ...


def build_git_provider(git_url: GitUrl) -> GitProvider:
    host = (git_url.host or "").lower()

    if host in AZURE_DEVOPS_HOSTS:
        # Imported lazily to avoid mixing provider-specific logic in this module
        from .azure_devops_provider import AzureDevOpsProvider

        return AzureDevOpsProvider.from_git_url(git_url)

    if "gitlab" in host:
        # Imported lazily to avoid mixing provider-specific logic in this module
        from .gitlab_provider import GitLabProvider

        return GitLabProvider.from_git_url(git_url)

    from .generic_provider import GenericProvider

    return GenericProvider.from_git_url(git_url)
