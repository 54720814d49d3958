import argparse
import socket
import sys
from typing import List, Optional

from caesar_enigma import CaesarEnigma
from cipher_config import load_engine
from config import HOST, PORT, BACKLOG
from errors import CipherError
from logging_util import setup_logger, setup_transcript_logger, set_verbose
from messages import ChatRecord
from protocol import LineReader
from utils import is_close_command, close_quietly


class Server:
    """Accepts a single client and prints every line it sends, decrypted."""

    def __init__(self, engine: CaesarEnigma, host=HOST, port=PORT):
        self.engine = engine
        self.host = host
        self.port = port
        self.logger = setup_logger("server")
        self.transcript = setup_transcript_logger()
        self.server_socket: Optional[socket.socket] = None
        self.client_socket: Optional[socket.socket] = None
        self.history: List[ChatRecord] = []

    def listen(self):
        self.logger.info(f"Opening port {self.port}")
        self.server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.server_socket.bind((self.host, self.port))
        self.server_socket.listen(BACKLOG)
        # port 0 asks the OS for a free port
        self.port = self.server_socket.getsockname()[1]
        return self.port

    def accept(self):
        self.client_socket, client_address = self.server_socket.accept()
        self.logger.info(f"New connection from {client_address}")

    def start(self):
        if self.server_socket is None:
            self.listen()
        self.accept()
        self.process_communications()

    def process_communications(self):
        for encrypted_message in LineReader(self.client_socket):
            record = ChatRecord(encrypted_message, self.engine.decrypt(encrypted_message))
            self.history.append(record)
            self.transcript.info(record.render())

            if is_close_command(record.plaintext):
                self.logger.info("Closing Socket...")
                break
        else:
            self.logger.info("Client disconnected")
        self.stop()

    def stop(self):
        close_quietly(self.client_socket, self.logger, "client socket")
        close_quietly(self.server_socket, self.logger, "server socket")
        self.client_socket = None
        self.server_socket = None

    def __repr__(self):
        return f"Server(host={self.host!r}, port={self.port}, engine={self.engine!r})"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Caesar-Enigma Chat Server")
    parser.add_argument("config", help="Path to the cipher configuration file")
    parser.add_argument("--host", default=HOST, help="Host to bind")
    parser.add_argument("--port", type=int, default=PORT, help="Port to listen on")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logger("server")
    if args.verbose:
        set_verbose(logger)

    server = None
    try:
        engine = load_engine(args.config)
        logger.debug(f"Cipher configured: {engine!r}")
        server = Server(engine, host=args.host, port=args.port)
        server.start()
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        return 1
    except CipherError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except OSError as e:
        logger.exception(f"IO Error: {e}")
        return 1
    finally:
        if server is not None:
            server.stop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
