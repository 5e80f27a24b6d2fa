from dataclasses import dataclass

from yarl import URL

from .errors import ProviderParseFail
from .git_provider import GitProvider
from .git_url import GitUrl
from .hint import GitUrlParseHint


@dataclass
class AzureDevOpsProvider(GitProvider):
    """Azure DevOps paths.

    - ``https://dev.azure.com/org/project/_git/repo``
    - ``git@ssh.dev.azure.com:v3/org/project/repo``
    """

    org: str
    project: str
    repo: str

    @classmethod
    def from_git_url(cls, url: GitUrl) -> "AzureDevOpsProvider":
        if url.hint == GitUrlParseHint.HTTPLIKE:
            return cls.parse_http_path(url.path)
        return cls.parse_ssh_path(url.path)

    @classmethod
    def from_url(cls, url: URL) -> "AzureDevOpsProvider":
        if "http" in url.scheme:
            return cls.parse_http_path(url.path)
        return cls.parse_ssh_path(url.path)

    @classmethod
    def parse_http_path(cls, path: str) -> "AzureDevOpsProvider":
        parts = path.removeprefix("/").split("/")

        if len(parts) == 4 and parts[2] == "_git":
            org, project, _, repo = parts
        elif len(parts) == 3:
            org, project, repo = parts
        else:
            raise ProviderParseFail(f"Expected '/org/project/_git/repo', got {path!r}")

        return cls.build(org, project, repo, path)

    @classmethod
    def parse_ssh_path(cls, path: str) -> "AzureDevOpsProvider":
        parts = path.removeprefix("/").split("/")

        # leading "v3/" or other prefix
        if len(parts) == 4:
            parts = parts[1:]
        if len(parts) != 3:
            raise ProviderParseFail(f"Expected 'v3/org/project/repo', got {path!r}")

        org, project, repo = parts
        return cls.build(org, project, repo.removesuffix(".git"), path)

    @classmethod
    def build(cls, org: str, project: str, repo: str, path: str) -> "AzureDevOpsProvider":
        if not (org and project and repo):
            raise ProviderParseFail(f"Empty segment in {path!r}")
        return cls(org=org, project=project, repo=repo)

    def fullname(self) -> str:
        return f"{self.org}/{self.project}/{self.repo}"
