"""
tail.py: Return the last N lines of a file, like 'tail -n'.

The file is walked backwards in BUFFER_SIZE chunks, counting newline bytes,
until one more newline than requested has been seen or the start of the file
is reached. Everything after that newline is then read forwards and decoded.
Only the tail of the file is ever read.
"""

import codecs
import os

# Chunk of bytes to read at any one time
BUFFER_SIZE = 4096

# Number of lines returned when no count is given
DEFAULT_N_LINES = 10

NEWLINE = ord("\n")


class ShortReadError(OSError):
    """Raised when a read returns fewer bytes than the file length promised."""

    def __init__(self, position: int, expected: int, received: int):
        super().__init__(
            f"short read at offset {position}: expected {expected} bytes, got {received}"
        )
        self.position = position
        self.expected = expected
        self.received = received


def tailog(path, n_lines: int = DEFAULT_N_LINES, *, encoding: str = "utf-8",
           errors: str = "replace", buffer_size: int = BUFFER_SIZE) -> str:
    """
    Return the last n_lines lines of text from a file.

    A negative count is treated as its absolute value. A path of None or "",
    or a count of zero, returns an empty string without opening anything.

    Args:
        path: File to read (str or path-like)
        n_lines: Number of lines to return (default: 10)
        encoding: Text encoding used to decode the result
        errors: Decoding error handler, as for bytes.decode()
        buffer_size: Chunk size in bytes for both scan directions

    Returns:
        The last lines of the file with their newlines preserved.

    Raises:
        OSError: If the file cannot be opened, sought or fully read.
    """
    if buffer_size < 1:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    n_lines = abs(n_lines)
    if n_lines == 0 or path is None:
        return ""
    path = os.fspath(path)
    if not path:
        return ""

    with open(path, "rb") as handle:
        file_length = handle.seek(0, os.SEEK_END)
        start = locate_start(handle, file_length, n_lines, buffer_size)
        return read_from(handle, start, file_length, encoding=encoding,
                         errors=errors, buffer_size=buffer_size)


def locate_start(handle, file_length: int, n_lines: int,
                 buffer_size: int = BUFFER_SIZE) -> int:
    """
    Find the byte offset at which the last n_lines lines begin.

    The returned offset is one past a newline byte, or 0 when the file holds
    n_lines lines or fewer.
    """
    line_count = 0
    current_position = 0
    previous_position = file_length

    while True:
        current_position = previous_position - buffer_size
        chunk_size = buffer_size
        if current_position < 0:
            current_position = 0
            chunk_size = previous_position

        buffer = _read_exactly(handle, current_position, chunk_size)

        # An unterminated last line still counts as a line
        if previous_position == file_length and buffer and buffer[-1] != NEWLINE:
            line_count += 1

        for index in range(len(buffer) - 1, -1, -1):
            if buffer[index] == NEWLINE:
                line_count += 1
                if line_count > n_lines:
                    current_position += index + 1
                    break

        previous_position = current_position
        if line_count > n_lines or current_position <= 0:
            return current_position


def read_from(handle, start_position: int, file_length: int, *,
              encoding: str = "utf-8", errors: str = "replace",
              buffer_size: int = BUFFER_SIZE) -> str:
    """Read and decode everything from start_position up to file_length."""
    decoder = codecs.getincrementaldecoder(encoding)(errors=errors)
    parts = []

    position = start_position
    while position < file_length:
        chunk_size = min(buffer_size, file_length - position)
        parts.append(decoder.decode(_read_exactly(handle, position, chunk_size)))
        position += chunk_size

    parts.append(decoder.decode(b"", final=True))
    return "".join(parts)


def _read_exactly(handle, position: int, size: int) -> bytes:
    handle.seek(position)
    data = handle.read(size)
    if len(data) != size:
        raise ShortReadError(position, size, len(data))
    return data
