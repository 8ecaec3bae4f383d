# randomfile/cli.py

import argparse
import logging
import re
import sys
from pathlib import Path

from randomfile.config import InsufficientArgumentsError, SizeTooLargeError, check_arguments
from randomfile.constants import CONFIRM_PATTERN, OVERWRITE_FLAG
from randomfile.progress import ProgressBar
from randomfile.writer import create_random_file


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="randomfile",
        description="Create a file of the given size filled with random bytes.")
    # optional at parser level; check_arguments reports missing values
    parser.add_argument('filename', nargs='?', help='Name of the file to create in the current directory')
    parser.add_argument('size', nargs='?', help='Size of the file in bytes')
    parser.add_argument(OVERWRITE_FLAG, '--overwrite', action='store_true',
                        help='Overwrite an existing file without asking')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (optional; for reproducible content)')
    return parser


def confirm_overwrite() -> bool:
    print("The file you are trying to create already exists. Overwrite? [Y/n]")
    try:
        response = input()
    except EOFError:
        return False
    return re.match(CONFIRM_PATTERN, response.strip()) is not None


def describe_io_error(e: OSError, filename: str) -> str:
    if isinstance(e, FileNotFoundError):
        return f'The file "{filename}" could not be created in the current directory.'
    if isinstance(e, PermissionError):
        return f'Missing privileges to write to "{filename}" in the current directory.'
    return f"An unexpected error occurred: {e}"


def format_elapsed(millis: float) -> str:
    secs, rem = divmod(int(millis), 1000)
    return f"Time taken: {secs}s {rem}ms"


def main(argv=None) -> int:
    # unknown trailing entries are ignored, like any extra positional
    args, extra = build_parser().parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s,%(levelname)s,%(name)s,%(message)s",
    )

    vector = [a for a in (args.filename, args.size) if a is not None] + extra
    if args.overwrite:
        vector.append(OVERWRITE_FLAG)

    try:
        conf = check_arguments(vector)
    except SizeTooLargeError as e:
        logger.debug("CLI,ARGS,ERROR,%s", e)
        print("The number you entered is too big.")
        return 1
    except InsufficientArgumentsError as e:
        logger.debug("CLI,ARGS,ERROR,%s", e)
        print("The entered arguments do not provide sufficient information about the file.")
        return 1

    print(f'File with name "{conf.filename}" and size {conf.size}B will be created in this directory.')

    # always relative to the working directory, even for absolute names
    path = Path(f"./{conf.filename}")
    if path.is_file() and not conf.overwrite:
        if not confirm_overwrite():
            logger.debug("CLI,CREATE,ABORT,path=%s", path)
            print("Aborting...")
            return 0

    logger.debug("CLI,CREATE,START,path=%s,size=%d", path, conf.size)
    try:
        millis = create_random_file(path, conf.size, progress=ProgressBar(conf.size), seed=args.seed)
    except OSError as e:
        # the progress line may still be open
        print()
        logger.debug("CLI,CREATE,ERROR,path=%s,%s", path, e)
        print(describe_io_error(e, conf.filename))
        return 1

    print(format_elapsed(millis))
    logger.debug("CLI,CREATE,END,path=%s,time_ms=%.3f", path, millis)
    return 0


if __name__ == '__main__':
    sys.exit(main())
