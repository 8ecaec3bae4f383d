from randomfile.config import FileConfig, check_arguments
from randomfile.progress import ProgressBar
from randomfile.writer import create_random_file, write_random_bytes

__all__ = [
    "FileConfig",
    "check_arguments",
    "ProgressBar",
    "create_random_file",
    "write_random_bytes",
]
