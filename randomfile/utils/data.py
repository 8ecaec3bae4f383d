from random import Random

UNITS = ("KB", "MB", "GB", "TB")


def human(n: float) -> str:
    """Format a byte count with binary (1024) steps, e.g. 2048 -> '2.00 KB'."""
    if n < 1024:
        return f"{int(n)} B"
    value = float(n)
    for unit in UNITS:
        value /= 1024
        if value < 1024 or unit == UNITS[-1]:
            break
    return f"{value:.2f} {unit}"


def random_chunk(size: int, rng: Random) -> bytes:
    """Return size random bytes covering the full 0..255 range."""
    if size <= 0:
        return b""
    return rng.randbytes(size)
