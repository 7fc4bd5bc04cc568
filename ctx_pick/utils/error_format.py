"""Safe error message formatting utilities.

File errors reach the user in two places: the per-file error block in the
payload and the status lines on stderr. Both want the short OS reason
("Permission denied"), not the errno-prefixed repr, and never an empty string.
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup

# Fallbacks for exceptions raised without a message
FRIENDLY_MESSAGES: dict[type, str] = {
    PermissionError: "Permission denied.",
    FileNotFoundError: "File no longer exists.",
    IsADirectoryError: "Expected a file but found a directory.",
    KeyboardInterrupt: "Operation interrupted by user.",
}


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a useful display message.

    Args:
        e: The exception to format
        include_type: Whether to prefix the exception type name

    Returns:
        A non-empty, user-friendly error message

    Examples:
        >>> format_error_message(ValueError("invalid input"))
        'ValueError: invalid input'

        >>> format_error_message(FileNotFoundError(2, "No such file or directory", "a.txt"))
        'FileNotFoundError: No such file or directory'

        >>> format_error_message(PermissionError(), include_type=False)
        'Permission denied.'
    """
    error_type = type(e).__name__
    message = _describe(e)
    if include_type and not message.startswith(error_type):
        return f"{error_type}: {message}"
    return message


def _describe(e: BaseException) -> str:
    # OSError.__str__ is "[Errno N] reason: 'filename'"; the caller already shows the file
    if isinstance(e, OSError) and e.strerror:
        return e.strerror

    if isinstance(e, UnicodeDecodeError):
        return f"not valid {e.encoding} text (byte 0x{e.object[e.start]:02x} at offset {e.start})"

    message = str(e)
    if message:
        return message

    for exc_type, friendly_msg in FRIENDLY_MESSAGES.items():
        if isinstance(e, exc_type):
            return friendly_msg
    return "(no additional details)"


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings.

    File paths and glob patterns routinely contain ``[`` and ``]``, which
    Rich would otherwise read as style tags.
    """
    return _escape_markup(str(value))
