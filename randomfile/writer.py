import logging
import time
from pathlib import Path
from random import Random
from typing import BinaryIO, Optional, Union

from randomfile.constants import BUFFER_SIZE
from randomfile.progress import ProgressBar
from randomfile.utils.data import human, random_chunk


logger = logging.getLogger(__name__)


def _ms(ns_start: int) -> float:
    return (time.perf_counter_ns() - ns_start) / 1e6


class ShortWriteError(OSError):
    pass


def write_random_bytes(
    fileobj: BinaryIO,
    size: int,
    progress: Optional[ProgressBar] = None,
    rng: Optional[Random] = None,
    chunk_size: int = BUFFER_SIZE,
) -> int:
    """
    Write size random bytes to fileobj, chunk_size at a time.

    fileobj.write may accept fewer bytes than offered (raw, unbuffered files
    do); only the accepted count is credited and the rest of that chunk is
    dropped. Returns the number of bytes written.
    """
    rng = rng or Random()
    written = 0
    chunks = 0
    while written < size:
        chunk = random_chunk(min(chunk_size, size - written), rng)
        n = fileobj.write(chunk)
        if not n:
            raise ShortWriteError(f"write accepted no bytes at offset {written} of {size}")
        if n < len(chunk):
            logger.debug("WRITER,CHUNK,PARTIAL,offset=%d,offered=%d,accepted=%d", written, len(chunk), n)
        written += n
        chunks += 1
        if progress is not None:
            progress.update(written)
    if progress is not None:
        progress.finish()
    logger.debug("WRITER,LOOP,END,bytes=%d,chunks=%d", written, chunks)
    return written


def create_random_file(
    path: Union[str, Path],
    size: int,
    progress: Optional[ProgressBar] = None,
    seed: Optional[int] = None,
) -> float:
    """Create (or truncate) path, fill it with size random bytes and return the elapsed ms."""
    path = Path(path)
    logger.debug("WRITER,CREATE,START,path=%s,size=%d,seed=%s", path, size, seed)
    with path.open("wb", buffering=0) as f:
        t0 = time.perf_counter_ns()
        written = write_random_bytes(f, size, progress=progress, rng=Random(seed))
        elapsed_ms = _ms(t0)
    rate = written / (elapsed_ms / 1000) if elapsed_ms > 0 else 0.0
    logger.debug("WRITER,CREATE,END,path=%s,bytes=%d,time_ms=%.3f,rate=%s/s",
                 path, written, elapsed_ms, human(rate))
    return elapsed_ms
