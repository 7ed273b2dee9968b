"""Line reader — pulls one line at a time from a byte or text stream."""

from typing import BinaryIO, Generator, TextIO


def read_lines(stream: BinaryIO | TextIO) -> Generator[str, None, None]:
    """Yield each line of *stream* with its trailing newline removed.

    Byte streams are decoded as strict UTF-8 one line at a time, so an
    undecodable line raises UnicodeDecodeError only after every line
    before it has been yielded. Both ``\\n`` and ``\\r\\n`` terminators are
    stripped. Errors raised while reading (OSError, UnicodeDecodeError,
    reads on a closed stream) propagate to the caller unchanged.
    """
    while True:
        line = stream.readline()
        if not line:
            return
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line
