from pathlib import PurePosixPath

_KB = 1024
_MB = _KB * 1024


def file_name_from_path(path: str) -> str:
    """Return the last path segment without its extension (``./packages/foo-1.2.3.tgz`` -> ``foo-1.2.3``).

    The extension starts at the last dot, so a dotfile such as ``.hidden`` has an empty name.
    """
    filename = PurePosixPath(path).name
    dot = filename.rfind(".")
    return filename[:dot] if dot >= 0 else filename


def human_readable_size(size: int) -> str:
    if size < _KB:
        return f"{size:.2f} B"
    if size < _MB:
        return f"{size / _KB:.2f} KB"
    return f"{size / _MB:.2f} MB"
