"""A select-driven TCP echo server that reads in small chunks."""

from __future__ import annotations

import argparse
import selectors
import socket
import sys
from typing import Any, Optional


class EchoServer:
    """Echoes each chunk it reads back to the sender.

    Data is read ``chunk_size`` bytes at a time.  Each chunk is treated as a
    NUL-terminated string: the text before the first NUL is printed and sent
    back followed by a single NUL byte.
    """

    def __init__(self, host: str = "0.0.0.0", port: int = 9999, chunk_size: int = 10) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size
        self._clients: set[socket.socket] = set()
        self._closed = False
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._listener.bind((host, port))
            self._listener.listen(128)
            self._listener.setblocking(False)
        except OSError:
            self._listener.close()
            raise
        self._selector = selectors.DefaultSelector()
        self._selector.register(self._listener, selectors.EVENT_READ, self._accept)

    def address(self) -> tuple[str, int]:
        """Return the (host, port) the server listens on."""
        return self._listener.getsockname()

    def poll(self, timeout: Optional[float] = None) -> int:
        """Wait for readiness once, handle it and return the number of events."""
        events = self._selector.select(timeout)
        for key, _ in events:
            key.data(key.fileobj)
        return len(events)

    def serve_forever(self) -> None:
        """Handle connections until interrupted."""
        while True:
            self.poll()

    def close(self) -> None:
        """Close every client connection and the listening socket."""
        if self._closed:
            return
        self._closed = True
        for conn in list(self._clients):
            self._drop(conn)
        self._selector.unregister(self._listener)
        self._listener.close()
        self._selector.close()

    def __enter__(self) -> "EchoServer":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _accept(self, listener: socket.socket) -> None:
        try:
            conn, _ = listener.accept()
        except BlockingIOError:
            return
        conn.setblocking(True)
        self._clients.add(conn)
        self._selector.register(conn, selectors.EVENT_READ, self._read)

    def _drop(self, conn: socket.socket) -> None:
        self._clients.discard(conn)
        self._selector.unregister(conn)
        conn.close()

    def _read(self, conn: socket.socket) -> None:
        try:
            data = conn.recv(self._chunk_size)
        except OSError as exc:
            print(f"read: {exc}", file=sys.stderr)
            self._drop(conn)
            return
        if not data:
            print("client closed the connection...")
            self._drop(conn)
            return
        text = data.split(b"\0", 1)[0]
        print(text.decode("utf-8", errors="replace"))
        try:
            conn.sendall(text + b"\0")
        except OSError as exc:
            print(f"write: {exc}", file=sys.stderr)
            self._drop(conn)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the echo server from the command line."""
    parser = argparse.ArgumentParser(description="Select-driven TCP echo server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=9999)
    parser.add_argument("--chunk-size", type=int, default=10)
    args = parser.parse_args(argv)
    try:
        with EchoServer(args.host, args.port, args.chunk_size) as server:
            server.serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())