import socket
import time

import pytest

from ktg.echo_server import EchoServer


@pytest.fixture
def server():
    with EchoServer("127.0.0.1", 0) as srv:
        yield srv


def _connect(srv):
    client = socket.create_connection(srv.address(), timeout=2)
    client.settimeout(0.05)
    return client


def _exchange(srv, client, expected_len, deadline=3.0):
    received = b""
    end = time.monotonic() + deadline
    while len(received) < expected_len and time.monotonic() < end:
        srv.poll(0.05)
        try:
            chunk = client.recv(1024)
        except socket.timeout:
            continue
        if not chunk:
            break
        received += chunk
    return received


def test_address_reports_bound_port(server):
    host, port = server.address()
    assert host == "127.0.0.1"
    assert port > 0


def test_short_message_is_echoed(server, capsys):
    client = _connect(server)
    try:
        client.sendall(b"hello\0")
        assert _exchange(server, client, 6) == b"hello\0"
    finally:
        client.close()
    assert "hello" in capsys.readouterr().out


def test_long_message_is_echoed_in_chunks(server):
    client = _connect(server)
    try:
        client.sendall(b"hello world: 0\n\0")
        reply = _exchange(server, client, 17)
    finally:
        client.close()
    assert reply == b"hello worl\0d: 0\n\0"


def test_custom_chunk_size():
    with EchoServer("127.0.0.1", 0, 4) as srv:
        client = _connect(srv)
        try:
            client.sendall(b"abcdefgh")
            reply = _exchange(srv, client, 10)
        finally:
            client.close()
    assert reply.split(b"\0")[:2] == [b"abcd", b"efgh"]


def test_client_close_is_reported(server, capsys):
    client = _connect(server)
    end = time.monotonic() + 1.0
    while time.monotonic() < end:
        if server.poll(0.05):
            break
    client.close()
    end = time.monotonic() + 2.0
    output = ""
    while time.monotonic() < end and "client closed" not in output:
        server.poll(0.05)
        output += capsys.readouterr().out
    assert "client closed the connection" in output


def test_several_clients_are_served(server):
    first = _connect(server)
    second = _connect(server)
    try:
        first.sendall(b"one\0")
        second.sendall(b"two\0")
        assert _exchange(server, first, 4) == b"one\0"
        assert _exchange(server, second, 4) == b"two\0"
    finally:
        first.close()
        second.close()


def test_closed_server_refuses_connections():
    with EchoServer("127.0.0.1", 0) as srv:
        address = srv.address()
    with pytest.raises(ConnectionRefusedError):
        socket.create_connection(address, timeout=1)


def test_close_is_idempotent():
    srv = EchoServer("127.0.0.1", 0)
    address = srv.address()
    srv.close()
    srv.close()
    with pytest.raises(ConnectionRefusedError):
        socket.create_connection(address, timeout=1)


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        EchoServer("127.0.0.1", 0, 0)