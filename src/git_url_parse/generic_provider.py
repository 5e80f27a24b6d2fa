from dataclasses import dataclass

from yarl import URL

from .errors import ProviderParseFail, ProviderUnsupported
from .git_provider import GitProvider
from .git_url import GitUrl
from .hint import GitUrlParseHint


@dataclass
class GenericProvider(GitProvider):
    """``owner/repo`` paths, as used by GitHub, Bitbucket, Gitea and most self-hosted services."""

    owner: str
    repo: str

    @classmethod
    def from_git_url(cls, url: GitUrl) -> "GenericProvider":
        # A filesystem path has no owner
        if url.hint == GitUrlParseHint.FILELIKE:
            raise ProviderUnsupported()
        return cls.parse_path(url.path)

    @classmethod
    def from_url(cls, url: URL) -> "GenericProvider":
        if url.scheme == "file":
            raise ProviderUnsupported()
        return cls.parse_path(url.path)

    @classmethod
    def parse_path(cls, path: str) -> "GenericProvider":
        segments = [segment for segment in path.split("/") if segment]
        if len(segments) < 2:
            raise ProviderParseFail(f"Path needs at least 2 parts: ex. 'owner/repo', got {path!r}")

        owner = segments[-2]
        repo = segments[-1].removesuffix(".git")
        if not repo:
            raise ProviderParseFail(f"Empty repo name in {path!r}")

        return cls(owner=owner, repo=repo)

    def fullname(self) -> str:
        return f"{self.owner}/{self.repo}"
