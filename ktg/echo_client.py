"""A client that sends numbered greetings to the echo server."""

from __future__ import annotations

import argparse
import itertools
import socket
import sys
import time
from typing import Iterable, Optional


def format_message(index: int) -> bytes:
    """Return the NUL-terminated wire message for greeting number ``index``."""
    return f"hello world: {index}\n".encode("utf-8") + b"\0"


def run_client(
    host: str = "127.0.0.1",
    port: int = 9999,
    count: Optional[int] = None,
    interval: float = 1.0,
) -> list[bytes]:
    """Send ``count`` greetings (forever if None), printing and returning each reply."""
    replies: list[bytes] = []
    indices: Iterable[int] = itertools.count() if count is None else range(count)
    with socket.create_connection((host, port)) as sock:
        for index in indices:
            sock.sendall(format_message(index))
            reply = sock.recv(1024)
            if not reply:
                raise ConnectionError("server closed the connection")
            replies.append(reply)
            text = reply.split(b"\0", 1)[0].decode("utf-8", errors="replace")
            print(f"recv buf: {text}")
            time.sleep(interval)
    return replies


def main(argv: Optional[list[str]] = None) -> int:
    """Run the echo client from the command line."""
    parser = argparse.ArgumentParser(description="Send greetings to the echo server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=9999)
    parser.add_argument("--count", type=int, default=None)
    parser.add_argument("--interval", type=float, default=1.0)
    args = parser.parse_args(argv)
    try:
        run_client(args.host, args.port, args.count, args.interval)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"client error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())