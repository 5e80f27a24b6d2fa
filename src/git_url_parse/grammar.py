"""Recognizers for the url grammar accepted by ``git clone``.

The grammar is based on RFC 3986 but does not strictly cover it.

No support for:
    * query, fragment, percent-encoding
    * ip literals (ipv6, ipvfuture)

Added support for:
    * ssh urls that use ":" as the delimiter between authority and path
    * userinfo split into user:token
    * bare unix and windows filesystem paths

Every recognizer takes the full input and a cursor position, and returns the
position after what it consumed along with the recognized value.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from . import chars
from .errors import InvalidPortNumber

logger = logging.getLogger(__name__)

MAX_PORT = 65535


class GrammarError(Exception):
    def __init__(self, reason: str, position: int):
        super().__init__(f"{reason} at position {position}")
        self.reason = reason
        self.position = position


@dataclass(frozen=True)
class UserInfo:
    user: Optional[str] = None
    # Not part of RFC 3986 (deprecated password field)
    token: Optional[str] = None


@dataclass(frozen=True)
class Authority:
    userinfo: UserInfo = field(default_factory=UserInfo)
    host: Optional[str] = None
    port: Optional[int] = None


@dataclass(frozen=True)
class HierPart:
    authority: Authority = field(default_factory=Authority)
    path: str = ""


@dataclass(frozen=True)
class UrlSpec:
    scheme: Optional[str] = None
    hier_part: HierPart = field(default_factory=HierPart)


def take_while(text: str, pos: int, predicate: Callable[[str], bool]) -> int:
    end = pos
    while end < len(text) and predicate(text[end]):
        end += 1
    return end


def parse_url_spec(text: str) -> UrlSpec:
    pos, scheme = parse_scheme(text, 0)

    try:
        pos, hier_part = parse_hier_part(text, pos)
    except GrammarError as error:
        logger.debug("hier-part parse failed: %s", error)
        hier_part = HierPart()

    if pos < len(text):
        logger.debug("Unparsed remainder ignored: %r", text[pos:])

    return UrlSpec(scheme=scheme, hier_part=hier_part)


def parse_scheme(text: str, pos: int) -> tuple[int, Optional[str]]:
    logger.debug("Looking ahead before parsing for scheme")

    if pos >= len(text) or not (text[pos].isascii() and text[pos].isalpha()):
        logger.debug("Look ahead check for scheme failed")
        return pos, None

    end = take_while(text, pos + 1, chars.scheme_tail)

    # RFC 3986 leaves "//" to the hier-part. Consuming it here keeps the
    # scheme optional without the authority parser having to know about it.
    if not text.startswith("://", end):
        logger.debug("Look ahead check for scheme failed")
        return pos, None

    scheme = text[pos:end]
    logger.debug("scheme found: %r", scheme)
    return end + 3, scheme


def parse_hier_part(text: str, pos: int) -> tuple[int, HierPart]:
    logger.debug("Parsing for hier-part")

    pos, authority = parse_authority(text, pos)

    for name, recognizer in PATH_RECOGNIZERS:
        end = recognizer(text, pos)
        if end is not None:
            logger.debug("path matched %s: %r", name, text[pos:end])
            break
    else:
        end = pos

    if end == pos:
        raise GrammarError("empty path", pos)

    return end, HierPart(authority=authority, path=text[pos:end])


def parse_authority(text: str, pos: int) -> tuple[int, Authority]:
    logger.debug("Parsing for authority")

    pos, userinfo = parse_userinfo(text, pos)

    if is_windows_path(text, pos):
        logger.debug("Found potential windows-style path while looking for host")
        return pos, Authority()

    pos, host = parse_host(text, pos)
    pos, port = parse_port(text, pos)

    authority = Authority(userinfo=userinfo, host=host, port=port)
    logger.debug("%r", authority)
    return pos, authority


def parse_userinfo(text: str, pos: int) -> tuple[int, UserInfo]:
    end = take_while(text, pos, chars.userinfo)

    if not text.startswith("@", end) or end == pos:
        logger.debug("Userinfo check failed")
        return pos, UserInfo()

    userinfo = text[pos:end]
    if ":" not in userinfo:
        return end + 1, UserInfo(user=userinfo)

    user, _, token = userinfo.partition(":")
    if not user or not token:
        raise GrammarError("userinfo needs both user and token around ':'", pos)

    return end + 1, UserInfo(user=user, token=token)


def is_windows_path(text: str, pos: int) -> bool:
    end = take_while(text, pos, lambda c: chars.reg_name(c) and c != "\\")
    return text.startswith(":\\", end)


def parse_host(text: str, pos: int) -> tuple[int, Optional[str]]:
    end = take_while(text, pos, chars.reg_name)
    host = text[pos:end]

    # Rejects hosts made only of punctuation, like ".." in "file://../repo"
    if not host or not host[0].isalnum():
        logger.debug("No host found")
        return pos, None

    logger.debug("host found: %r", host)
    return end, host


def parse_port(text: str, pos: int) -> tuple[int, Optional[int]]:
    if not text.startswith(":", pos):
        return pos, None

    end = take_while(text, pos + 1, chars.reg_name)
    digits = text[pos + 1 : end]

    # Anything else after ":" is left for the ssh path separator
    if not (digits.isascii() and digits.isdigit()):
        return pos, None

    port = int(digits)
    if port > MAX_PORT:
        raise InvalidPortNumber(f"Invalid port number: {digits} is out of range")

    logger.debug("port found: %d", port)
    return end, port


def _segments(text: str, pos: int) -> int:
    while text.startswith("/", pos):
        pos = take_while(text, pos + 1, chars.pchar)
    return pos


def path_abempty(text: str, pos: int) -> Optional[int]:
    end = _segments(text, pos)
    return end if end > pos else None


def path_rootless(text: str, pos: int) -> Optional[int]:
    end = take_while(text, pos, chars.pchar)
    if end == pos:
        return None
    return _segments(text, end)


def path_ssh(text: str, pos: int) -> Optional[int]:
    """Not part of RFC 3986: ``:path/to/repo`` after a bare host."""
    if not text.startswith(":", pos):
        return None
    end = take_while(text, pos + 1, chars.pchar)
    if not text.startswith("/", end):
        return None
    return _segments(text, end)


PATH_RECOGNIZERS = (
    ("path-abempty", path_abempty),
    ("path-rootless", path_rootless),
    ("path-ssh", path_ssh),
)
