"""
Streaming a file
================

Hashes a file of any size in bounded memory, with two families side by side.
A native streaming hasher holds only its state. A buffering hasher (CityHash)
has to keep every byte, so for it the file is read in chunks but memory still
grows with the file size.

How to run:
    python examples/stream_file.py path/to/file
"""

import logging
import sys

from fasthash_sdk import StreamConfig, StreamReadError, city, consume_stream, xxh3


def main(path: str) -> int:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s")

    streaming = xxh3.Hasher128()
    buffering = city.Hasher64()
    config = StreamConfig(chunk_size=1 << 20)

    try:
        with open(path, "rb") as f:
            size = consume_stream(streaming, f, config)
        with open(path, "rb") as f:
            consume_stream(buffering, f, config)
    except StreamReadError as exc:
        print(f"read failed after {exc.bytes_consumed} bytes: {exc}", file=sys.stderr)
        return 1

    print(f"{size} bytes")
    print(f"xxh3_128 {streaming.hexdigest()}")
    print(f"city64   {buffering.hexdigest()}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__.strip().splitlines()[-1].strip(), file=sys.stderr)
        sys.exit(2)
    sys.exit(main(sys.argv[1]))
