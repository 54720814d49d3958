import io
import threading

import pytest

from alphabet import CharClass
from caesar_enigma import CaesarEnigma
from clientcli import Client
import clientcli
import server as server_module
from server import Server
from utils import close_quietly, is_close_command


def make_engine():
    engine = CaesarEnigma()
    engine.configure({CharClass.UPPER, CharClass.DIGITS, CharClass.PUNCTUATION},
                     9, 1, 20, 2, 0, 4, "{'E':'K', 'K':'E'}")
    return engine


def serve_in_background(srv):
    srv.listen()
    thread = threading.Thread(target=srv.start, daemon=True)
    thread.start()
    return thread


def test_client_messages_are_decrypted_by_server():
    srv = Server(make_engine(), host="127.0.0.1", port=0)
    thread = serve_in_background(srv)

    client = Client(make_engine(), host="127.0.0.1", port=srv.port)
    client.connect()
    sent = client.run(io.StringIO("hello there\nMEET AT 5!\nbye\nnever sent\n"))
    thread.join(timeout=5)
    client.stop()

    assert sent == 2
    assert not thread.is_alive()
    assert [r.plaintext for r in srv.history] == ["HELLO THERE", "MEET AT 5!", "BYE"]
    assert srv.history[0].ciphertext != "HELLO THERE"
    assert srv.server_socket is None


def test_server_stops_when_client_disconnects():
    srv = Server(make_engine(), host="127.0.0.1", port=0)
    thread = serve_in_background(srv)

    client = Client(make_engine(), host="127.0.0.1", port=srv.port)
    client.connect()
    client.send_message("ONE")
    client.stop()
    thread.join(timeout=5)

    assert not thread.is_alive()
    assert [r.plaintext for r in srv.history] == ["ONE"]


def test_transcript_lines_are_logged(caplog):
    srv = Server(make_engine(), host="127.0.0.1", port=0)
    thread = serve_in_background(srv)

    client = Client(make_engine(), host="127.0.0.1", port=srv.port)
    client.connect()
    with caplog.at_level("INFO"):
        client.run(["ping", "BYE"])
        thread.join(timeout=5)
    client.stop()

    transcript = [r.getMessage() for r in caplog.records if r.name == "transcript"]
    assert len(transcript) == 2
    assert transcript[0].endswith(") PING")
    assert "message received: (" in transcript[1]
    assert any("Closing Socket" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("text,expected", [("BYE", True), ("bye", True), ("Bye", True),
                                           ("BYE ", False), ("GOODBYE", False)])
def test_is_close_command(text, expected):
    assert is_close_command(text) is expected


def test_close_quietly_logs_errors(caplog):
    class Broken:
        def close(self):
            raise OSError("boom")

    close_quietly(None, server_module.setup_logger("server"), "nothing")
    with caplog.at_level("ERROR"):
        close_quietly(Broken(), server_module.setup_logger("server"), "socket")
    assert "Error closing socket: boom" in caplog.text


def test_main_reports_missing_config(tmp_path, caplog):
    missing = str(tmp_path / "nope.xml")
    with caplog.at_level("ERROR"):
        assert server_module.main([missing]) == 1
        assert clientcli.main([missing], stdin=io.StringIO("")) == 1
    assert "Configuration file not found" in caplog.text


def test_main_reports_invalid_config(tmp_path, caplog):
    path = tmp_path / "bad.xml"
    path.write_text("<configuration><alphabet>UPPER</alphabet>"
                    "<encryption-key min-value='0' max-value='1'>5</encryption-key>"
                    "<increment-factor min-value='0' max-value='1'>0</increment-factor>"
                    "<plugboard>{}</plugboard></configuration>", encoding="utf-8")
    with caplog.at_level("ERROR"):
        assert clientcli.main([str(path)], stdin=io.StringIO("")) == 1
    assert "Invalid configuration" in caplog.text
