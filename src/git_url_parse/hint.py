from enum import Enum
from typing import Optional


class GitUrlParseHint(Enum):
    """Label assigned during parsing for the style of url that was found.

    Formatting and provider parsing are influenced by this label.
    """

    UNKNOWN = "unknown"
    # "ssh" is in the scheme, or ":" is the initial path separator
    SSHLIKE = "sshlike"
    # "file" scheme, or a bare filesystem path
    FILELIKE = "filelike"
    # Any other network scheme, or a userinfo with a token
    HTTPLIKE = "httplike"


def classify_hint(
    scheme: Optional[str],
    user: Optional[str],
    token: Optional[str],
    host: Optional[str],
    port: Optional[int],
    path: str,
) -> GitUrlParseHint:
    if scheme is not None:
        if "ssh" in scheme:
            return GitUrlParseHint.SSHLIKE
        if scheme.lower() == "file":
            return GitUrlParseHint.FILELIKE
        return GitUrlParseHint.HTTPLIKE

    # Must be checked before the ":" prefix below: a lone path is a file path
    if user is None and token is None and host is None and port is None and path:
        return GitUrlParseHint.FILELIKE

    if user is not None and token is not None:
        return GitUrlParseHint.HTTPLIKE

    if path.startswith(":"):
        return GitUrlParseHint.SSHLIKE

    return GitUrlParseHint.UNKNOWN
