import logging
from typing import List, NamedTuple

from randomfile.constants import MAX_FILE_SIZE, OVERWRITE_FLAG


logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")


class ArgumentError(Exception):
    pass


class InsufficientArgumentsError(ArgumentError):
    pass


class SizeTooLargeError(ArgumentError):
    pass


class FileConfig(NamedTuple):
    filename: str
    size: int
    overwrite: bool


def is_numeric_positive(text: str) -> bool:
    """True if text is made only of ASCII digits and is not all zeros."""
    only_zero = True
    for c in text:
        if c not in DIGITS:
            return False
        if c != "0":
            only_zero = False
    return not only_zero


def parse_size(text: str) -> int:
    if not is_numeric_positive(text):
        raise InsufficientArgumentsError(f"not a positive byte count: {text!r}")
    size = int(text)
    if size > MAX_FILE_SIZE:
        raise SizeTooLargeError(f"size {text} exceeds {MAX_FILE_SIZE}")
    return size


def check_arguments(args: List[str]) -> FileConfig:
    """
    Build a FileConfig from an argument vector (program name excluded).

    The first entry is the filename, the second the size in bytes. The
    overwrite flag may appear anywhere; further entries are ignored.
    """
    if len(args) < 2:
        raise InsufficientArgumentsError(f"expected filename and size, got {len(args)} argument(s)")

    filename, size_text = args[0], args[1]
    overwrite = OVERWRITE_FLAG in args
    size = parse_size(size_text)
    logger.debug("CONFIG,CHECK,END,filename=%s,size=%d,overwrite=%s", filename, size, overwrite)
    return FileConfig(filename, size, overwrite)
