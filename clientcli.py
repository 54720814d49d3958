import argparse
import socket
import sys
from typing import Iterable, Optional

from caesar_enigma import CaesarEnigma
from cipher_config import load_engine
from config import HOST, PORT, CLOSE_COMMAND
from errors import CipherError
from logging_util import setup_logger, set_verbose
from protocol import send_line
from utils import is_close_command, close_quietly


class Client:
    def __init__(self, engine: CaesarEnigma, host=HOST, port=PORT):
        self.engine = engine
        self.host = host
        self.port = port
        self.logger = setup_logger("client")
        self.client_socket: Optional[socket.socket] = None

    def connect(self):
        self.client_socket = socket.create_connection((self.host, self.port))
        self.logger.info(f"Connected to server at {self.host}:{self.port}")

    def send_message(self, message: str):
        encrypted_message = self.engine.encrypt(message)
        self.logger.debug(f"Sending ({encrypted_message})")
        send_line(self.client_socket, encrypted_message)

    def send_close_command(self):
        self.send_message(CLOSE_COMMAND)

    def run(self, lines: Iterable[str]) -> int:
        """Send each line until a close command or the input runs out.

        Returns the number of chat lines sent, not counting the close command.
        """
        sent = 0
        for line in lines:
            message = line.rstrip("\r\n")
            if is_close_command(message):
                self.send_close_command()
                break
            self.send_message(message)
            sent += 1
        return sent

    def stop(self):
        close_quietly(self.client_socket, self.logger, "client socket")
        self.client_socket = None
        self.logger.info("Disconnected from server")

    def __repr__(self):
        return f"Client(host={self.host!r}, port={self.port}, engine={self.engine!r})"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Caesar-Enigma Chat Client")
    parser.add_argument("config", help="Path to the cipher configuration file")
    parser.add_argument("--host", default=HOST, help="Server host")
    parser.add_argument("--port", type=int, default=PORT, help="Server port")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None, stdin=None) -> int:
    args = parse_args(argv)
    logger = setup_logger("client")
    if args.verbose:
        set_verbose(logger)

    client = None
    try:
        engine = load_engine(args.config)
        client = Client(engine, host=args.host, port=args.port)
        client.connect()
        logger.info("Client started. Start typing your messages")
        client.run(stdin if stdin is not None else sys.stdin)
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
        if client is not None:
            client.stop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
