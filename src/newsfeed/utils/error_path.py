"""Get the path to the error handler module."""

import traceback

from newsfeed.common.app_error import AppError


def get_error_path(err: AppError | Exception) -> str:
    """Extract formatted source location from an exception traceback.

    Focuses on the newsfeed package path and formats the output as a path
    string with file location, line number and function name.

    Args:
        err: The raised exception.

    Returns:
        The location in the format "filename:line (fn:function_name)", or
        "unknown" when the exception carries no traceback.
    """
    frames = traceback.extract_tb(err.__traceback__)
    if not frames:
        return "unknown"
    filename, line, func, _ = frames[-1]

    if "newsfeed" in filename:
        filename = f"newsfeed{filename.split('newsfeed')[-1]}"
    return f"{filename}:{line} (fn:{func})"
