"""Path display helpers."""

ELLIPSIS = "..."


def _separator(path: str) -> str:
    if "\\" in path and "/" not in path:
        return "\\"
    return "/"


def limit_path(path: str, max_length: int) -> str:
    """
    Shorten path to at most max_length characters for display.
    Middle directories are replaced by '...' while the first directory and the
    file name are kept (/home/.../image.tif). If that is still too long, only
    the tail is kept with a leading '...'.
    """
    if len(path) <= max_length:
        return path
    if max_length <= len(ELLIPSIS):
        return path[len(path) - max_length:]

    sep = _separator(path)
    parts = path.split(sep)
    # Absolute paths: keep the leading separator attached to the first directory
    if parts[0] == "" and len(parts) > 2:
        head, tail = sep + parts[1], parts[2:]
    else:
        head, tail = parts[0], parts[1:]

    while len(tail) > 1:
        tail = tail[1:]
        candidate = sep.join([head, ELLIPSIS] + tail)
        if len(candidate) <= max_length:
            return candidate

    return ELLIPSIS + path[-(max_length - len(ELLIPSIS)):]
