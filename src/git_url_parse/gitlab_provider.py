from dataclasses import dataclass
from typing import Optional

from yarl import URL

from .errors import ProviderParseFail
from .git_provider import GitProvider
from .git_url import GitUrl


@dataclass
class GitLabProvider(GitProvider):
    """GitLab paths, where any number of subgroups sit between owner and repo.

    - ``https://gitlab.com/owner/repo.git``
    - ``git@gitlab.com:owner/subgroup1/subgroup2/repo.git``
    """

    owner: str
    repo: str
    subgroup: Optional[list[str]] = None

    @classmethod
    def from_git_url(cls, url: GitUrl) -> "GitLabProvider":
        return cls.parse_path(url.path)

    @classmethod
    def from_url(cls, url: URL) -> "GitLabProvider":
        return cls.parse_path(url.path)

    @classmethod
    def parse_path(cls, path: str) -> "GitLabProvider":
        trimmed = path.strip("/").removesuffix(".git")
        parts = [part for part in trimmed.split("/") if part]

        if len(parts) < 2:
            raise ProviderParseFail("Path needs at least 2 parts: ex. '/owner/repo'")

        subgroup = parts[1:-1] or None
        return cls(owner=parts[0], repo=parts[-1], subgroup=subgroup)

    def fullname(self) -> str:
        return "/".join([self.owner, *(self.subgroup or []), self.repo])
