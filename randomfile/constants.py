BUFFER_SIZE = 1_000_000                # write in 1 MB chunks
PROGRESS_BAR_LENGTH = 20
MAX_FILE_SIZE = 2 ** 64 - 1            # largest size accepted on the command line
OVERWRITE_FLAG = "-o"
CONFIRM_PATTERN = r"^[yYjJ]$"
