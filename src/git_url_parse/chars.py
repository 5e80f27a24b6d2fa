SUB_DELIMS = frozenset("!$&'()*+,;=\\")


def unreserved(c: str) -> bool:
    return c.isalnum() or c in "-._~"


def sub_delim(c: str) -> bool:
    # "\" is not a sub-delim, but windows paths need it
    return c in SUB_DELIMS


def pchar(c: str) -> bool:
    # pct-encoded is not supported
    return unreserved(c) or sub_delim(c) or c in ":@"


def reg_name(c: str) -> bool:
    return unreserved(c) or sub_delim(c)


def userinfo(c: str) -> bool:
    return unreserved(c) or sub_delim(c) or c == ":"


def scheme_tail(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c in "+-.")
