import socket

import pytest

from rqstore.transport import Listener, Transport


class RecordingListener(Listener):
    def __init__(self):
        self.calls = []
        self.closed = False

    def dial(self, address, timeout):
        self.calls.append(("dial", address, timeout))
        return ("conn-to", address)

    def accept(self):
        self.calls.append(("accept",))
        return "incoming"

    def close(self):
        self.closed = True

    def addr(self):
        return ("127.0.0.1", 4002)


class TcpListener(Listener):
    def __init__(self):
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen()

    def dial(self, address, timeout):
        host, port = address.rsplit(":", 1)
        return socket.create_connection((host, int(port)), timeout=timeout)

    def accept(self):
        conn, _ = self._sock.accept()
        return conn

    def close(self):
        self._sock.close()

    def addr(self):
        return self._sock.getsockname()


def test_new_transport_without_listener():
    transport = Transport(None)
    assert transport.listener is None


def test_listener_is_abstract():
    with pytest.raises(TypeError):
        Listener()


def test_dial_delegates_with_string_address():
    listener = RecordingListener()
    transport = Transport(listener)
    assert transport.dial("localhost:4002", 10.0) == ("conn-to", "localhost:4002")
    assert listener.calls == [("dial", "localhost:4002", 10.0)]


def test_accept_close_and_addr_delegate():
    listener = RecordingListener()
    transport = Transport(listener)
    assert transport.accept() == "incoming"
    assert transport.addr() == ("127.0.0.1", 4002)
    transport.close()
    assert listener.closed is True


def test_real_tcp_round_trip():
    listener = TcpListener()
    transport = Transport(listener)
    try:
        host, port = transport.addr()
        client = transport.dial(f"{host}:{port}", 5.0)
        server = transport.accept()
        try:
            client.sendall(b"ping")
            assert server.recv(4) == b"ping"
        finally:
            client.close()
            server.close()
    finally:
        transport.close()