import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional, TypeVar

from yarl import URL

from .errors import (
    FoundNullBytes,
    InvalidFilePattern,
    InvalidPathEmpty,
    InvalidPathSeparator,
    InvalidTokenUnsupported,
    UrlParseError,
)
from .grammar import is_windows_path, parse_url_spec
from .hint import GitUrlParseHint, classify_hint

if TYPE_CHECKING:
    from .git_provider import GitProvider

    P = TypeVar("P", bound=GitProvider)

logger = logging.getLogger(__name__)

SHORT_GIT_PREFIX = "git:"


@dataclass(frozen=True)
class GitUrl:
    """A parsed url used by git (e.g. ``git clone <url>``).

    Only created by :meth:`GitUrl.parse`. Parsing is inspired by RFC 3986 but
    adapted to the ssh and filesystem forms git accepts, and the result is
    finally checked against a conformant url parser.
    """

    scheme: Optional[str] = None
    user: Optional[str] = None
    # password userinfo, usually an oauth token
    token: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    path: str = ""
    # whether the input spelled out "scheme://"
    print_scheme: bool = False
    hint: GitUrlParseHint = GitUrlParseHint.UNKNOWN

    @property
    def password(self) -> Optional[str]:
        return self.token

    @classmethod
    def parse(cls, text: str) -> "GitUrl":
        git_url = cls.parse_unchecked(text)
        git_url.check_url_compat()
        return git_url

    from_str = parse

    @classmethod
    def parse_unchecked(cls, text: str) -> "GitUrl":
        """Parse and validate ``text`` without the final conformant url check."""
        if "\0" in text:
            raise FoundNullBytes()

        print_scheme = False
        if text.startswith(SHORT_GIT_PREFIX) and not text.startswith("git://"):
            logger.debug("Expanding short form %r", text)
            text = "git://" + text[len(SHORT_GIT_PREFIX) :]
            print_scheme = True

        spec = parse_url_spec(text)
        authority = spec.hier_part.authority
        scheme = spec.scheme
        user = authority.userinfo.user
        token = authority.userinfo.token
        host = authority.host
        port = authority.port
        path = spec.hier_part.path

        hint = classify_hint(scheme, user, token, host, port, path)
        logger.debug("Url classified as %s", hint.value)

        if hint == GitUrlParseHint.SSHLIKE:
            # The separator that marked the url as ssh is not part of the path
            scheme = "ssh"
            path = path[1:]
        elif hint == GitUrlParseHint.FILELIKE:
            scheme = "file"

        git_url = cls(
            scheme=scheme,
            user=user,
            token=token,
            host=host,
            port=port,
            path=path,
            print_scheme=print_scheme or spec.scheme is not None,
            hint=hint,
        )
        git_url.validate()
        return git_url

    @classmethod
    def parse_to_url(cls, text: str) -> URL:
        return cls.parse_unchecked(text).to_url()

    @classmethod
    def from_url(cls, url: URL) -> "GitUrl":
        return cls.parse(str(url))

    def validate(self):
        if not self.path:
            raise InvalidPathEmpty()

        if self.path.startswith(":") and self.hint != GitUrlParseHint.SSHLIKE:
            logger.debug("Only sshlike url path starts with ':' %r", self)
            raise InvalidPathSeparator()

        if self.token is not None and self.hint != GitUrlParseHint.HTTPLIKE:
            logger.debug("Token only supported for httplike url %r", self)
            raise InvalidTokenUnsupported()

        if self.hint == GitUrlParseHint.FILELIKE and (
            self.user is not None
            or self.token is not None
            or self.host is not None
            or self.port is not None
            or not self.path
        ):
            logger.debug("Only scheme and path expected for filelike url %r", self)
            raise InvalidFilePattern()

    def check_url_compat(self):
        # The grammar above is looser than RFC 3986 (hosts, ports), so the
        # compatible rendering has to survive a conformant parser as well.
        url = self.to_url()
        if not url.scheme:
            raise UrlParseError(ValueError(f"relative URL without a base: {url}"))

    def to_url(self) -> URL:
        text = self.to_string(url_compat=True)
        try:
            if self.hint == GitUrlParseHint.FILELIKE:
                url = self.file_url()
            else:
                url = URL(text)
            # netloc is split lazily by some yarl releases
            if url.explicit_port is not None and not url.raw_host:
                raise ValueError(f"port without host: {text}")
        except ValueError as error:
            raise UrlParseError(error) from error
        return url

    def file_url(self) -> URL:
        # Drive letters would be read as a host and port
        if is_windows_path(self.path, 0):
            raise ValueError(f"windows drive path has no file url: {self.path}")
        return URL.build(scheme="file", path=self.path)

    def to_string(self, url_compat: bool = False) -> str:
        """Rebuild the url from its fields.

        ``url_compat`` renders a form a conformant url parser understands:
        the scheme is always printed and ssh paths never use ":".
        """
        scheme = ""
        if self.scheme and (self.print_scheme or url_compat):
            scheme = f"{self.scheme}://"

        if self.user is not None and self.token is not None:
            auth_info = f"{self.user}:{self.token}@"
        elif self.user is not None:
            auth_info = f"{self.user}@"
        elif self.token is not None:
            auth_info = f"{self.token}@"
        else:
            auth_info = ""

        host = self.host or ""
        port = f":{self.port}" if self.port is not None else ""

        if self.hint == GitUrlParseHint.HTTPLIKE:
            path = self.path
            # Only one "/" after the port, so the result parses back the same
            if port and not path.startswith("/"):
                path = f"/{path}"
        elif self.hint == GitUrlParseHint.SSHLIKE:
            if port or url_compat:
                path = f"/{self.path}"
            else:
                path = f":{self.path}"
        elif self.hint == GitUrlParseHint.FILELIKE:
            path = self.path
        else:
            port = path = ""

        return f"{scheme}{auth_info}{host}{port}{path}"

    def __str__(self) -> str:
        return self.to_string()

    def trim_auth(self) -> "GitUrl":
        """Copy without ``user`` and ``token``, for printing without credentials."""
        return replace(self, user=None, token=None)

    def provider_info(self, provider: "type[P]") -> "P":
        return provider.from_git_url(self)
