"""Secret redaction helpers for prompts and listings."""

from aliyun_configure.core.constants import MASK_CHAR


def mosaic_string(s: str, last_chars: int) -> str:
    """Hide all but the last ``last_chars`` characters of ``s``.

    A value no longer than ``last_chars`` is hidden entirely rather than
    shown in full.

    >>> mosaic_string("ABCDEFGHIJ", 3)
    '*******HIJ'
    >>> mosaic_string("AB", 3)
    '**'
    """
    hidden = len(s) - last_chars
    if hidden > 0:
        return MASK_CHAR * hidden + s[hidden:]
    return MASK_CHAR * len(s)


def get_last_chars(s: str, last_chars: int) -> str:
    """Return only the last ``last_chars`` characters of ``s``.

    Short values come back fully masked (``len(s)`` mask characters), which
    differs from :func:`mosaic_string` only in what is returned for long
    values.

    >>> get_last_chars("ABCDEFGHIJ", 3)
    'HIJ'
    >>> get_last_chars("AB", 3)
    '**'
    """
    hidden = len(s) - last_chars
    if hidden > 0:
        return s[hidden:]
    return MASK_CHAR * len(s)
