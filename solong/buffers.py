"""Byte-buffer operations on bytearrays, with NUL-terminated string copies."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_span(length: int, start: int, n: int, name: str) -> None:
    if n < 0 or start < 0:
        raise ValueError(f"{name}: negative offset or length")
    if start + n > length:
        raise ValueError(f"{name}: span of {n} bytes at {start} exceeds buffer of {length}")


def _cstr(data: bytes | bytearray) -> bytes:
    """Bytes up to, not including, the first NUL."""
    end = data.find(0)
    return bytes(data if end < 0 else data[:end])


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (taken modulo 256)."""
    _check_span(len(buf), 0, n, "memset")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer for nmemb items of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("calloc: negative count or size")
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError("calloc: requested size overflows")
    return bytearray(total)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to c in the first n bytes, or None."""
    _check_span(len(data), 0, n, "memchr")
    index = data.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first unequal bytes within n, or 0 if all equal."""
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into dest."""
    _check_span(len(dest), 0, n, "memcpy")
    _check_span(len(src), 0, n, "memcpy")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buf from offset src to offset dst; overlap is safe."""
    _check_span(len(buf), dst, n, "memmove")
    _check_span(len(buf), src, n, "memmove")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy src into dst, at most size-1 bytes plus a NUL; return len(src)."""
    text = _cstr(src)
    if size <= 0:
        return len(text)
    count = min(len(text), size - 1)
    _check_span(len(dst), 0, count + 1, "strlcpy")
    dst[:count] = text[:count]
    dst[count] = 0
    return len(text)


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append src to the string in dst within size bytes in total.

    Returns the length of the string it tried to build; if dst holds no
    NUL within size, returns len(src) + size and leaves dst unchanged.
    """
    text = _cstr(src)
    start = len(_cstr(dst))
    if start >= size:
        return len(text) + size
    count = min(len(text), size - 1 - start)
    _check_span(len(dst), start, count + 1, "strlcat")
    dst[start:start + count] = text[:count]
    dst[start + count] = 0
    return start + len(text)