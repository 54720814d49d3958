import socket

from config import ENCODING, ENCODING_ERRORS, RECV_BYTES

# Newline-delimited text framing: each message is one line terminated by '\n'.
LINE_TERMINATOR = b"\n"


def send_line(sock: socket.socket, text: str):
    sock.sendall(text.encode(ENCODING) + LINE_TERMINATOR)


class LineReader:
    """Buffers socket reads and hands back one line at a time."""

    def __init__(self, sock: socket.socket, recv_bytes: int = RECV_BYTES):
        self.sock = sock
        self.recv_bytes = recv_bytes
        self._buf = bytearray()
        self._eof = False

    def read_line(self) -> str | None:
        """Next line without its terminator, or None once the peer has closed."""
        while LINE_TERMINATOR not in self._buf:
            if self._eof:
                return self._drain()
            chunk = self.sock.recv(self.recv_bytes)
            if not chunk:
                self._eof = True
                continue
            self._buf.extend(chunk)

        end = self._buf.index(LINE_TERMINATOR)
        raw = bytes(self._buf[:end])
        del self._buf[:end + 1]
        return _decode(raw)

    def _drain(self) -> str | None:
        if not self._buf:
            return None
        raw = bytes(self._buf)
        self._buf.clear()
        return _decode(raw)

    def __iter__(self):
        while (line := self.read_line()) is not None:
            yield line


def _decode(raw: bytes) -> str:
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw.decode(ENCODING, errors=ENCODING_ERRORS)
