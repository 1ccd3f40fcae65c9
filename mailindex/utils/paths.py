"""
Path helpers for the mail archive location
"""

import os


class PathResolutionError(Exception):
    """Raised when a relative path cannot be made absolute"""


def make_path_absolute(path: str) -> str:
    """
    Anchor a relative path at the current working directory.

    Purely syntactic: the result is not checked for existence and is not
    normalized ("..", "~" and duplicate separators are left as typed).

    Args:
        path: Path as entered by the user

    Returns:
        The path unchanged if it already starts at the root, otherwise
        the working directory joined with it

    Raises:
        PathResolutionError: If the working directory cannot be determined
    """
    if path.startswith(os.sep):
        return path

    try:
        cwd = os.getcwd()
        return os.path.join(cwd, path)
    except MemoryError as e:
        raise PathResolutionError("Out of memory.") from e
    except OSError as e:
        raise PathResolutionError(
            f"Cannot determine the current directory: {e.strerror or e}"
        ) from e
