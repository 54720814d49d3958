from pathlib import Path

import pytest

from alphabet import CharClass
from cipher_config import load_cipher_config, load_engine, parse_cipher_config
from errors import ConfigurationError, RangeError

VALID = """<?xml version="1.0"?>
<configuration>
    <alphabet>UPPER DIGITS</alphabet>
    <encryption-key min-value="0" max-value="10">3</encryption-key>
    <increment-factor min-value="0" max-value="5"> 1 </increment-factor>
    <plugboard>
        {'Q':'W', 'W':'Q'}
    </plugboard>
</configuration>
"""


def test_parse_valid_document():
    cfg = parse_cipher_config(VALID)
    assert cfg.char_classes == {CharClass.UPPER, CharClass.DIGITS}
    assert cfg.encryption_key.value == 3
    assert (cfg.encryption_key.minimum, cfg.encryption_key.maximum) == (0, 10)
    assert cfg.increment_factor.value == 1
    assert cfg.plugboard == "{'Q':'W', 'W':'Q'}"


def test_load_engine_from_file(tmp_path):
    path = tmp_path / "cipher.xml"
    path.write_text(VALID, encoding="utf-8")
    engine = load_engine(path)
    assert engine.encrypt("AB") == "DF"
    assert engine.decrypt("DF") == "AB"


def test_shipped_example_config_loads():
    engine = load_engine(Path(__file__).parent / "chat_config.xml")
    message = "MEET ME AT 10:30?"
    assert engine.decrypt(engine.encrypt(message)) == message


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_cipher_config(tmp_path / "missing.xml")


def test_missing_element():
    document = VALID.replace("<plugboard>", "<plug>").replace("</plugboard>", "</plug>")
    with pytest.raises(ConfigurationError, match="plugboard"):
        parse_cipher_config(document)


def test_repeated_element():
    document = VALID.replace("<alphabet>UPPER DIGITS</alphabet>",
                             "<alphabet>UPPER</alphabet><alphabet>DIGITS</alphabet>")
    with pytest.raises(ConfigurationError, match="alphabet"):
        parse_cipher_config(document)


def test_non_integer_key():
    with pytest.raises(ConfigurationError):
        parse_cipher_config(VALID.replace(">3<", ">three<"))


def test_missing_bound_attribute():
    with pytest.raises(ConfigurationError, match="max-value"):
        parse_cipher_config(VALID.replace(' max-value="10"', ""))


def test_malformed_xml():
    with pytest.raises(ConfigurationError):
        parse_cipher_config("<configuration><alphabet>")


def test_out_of_range_key_surfaces_on_apply(tmp_path):
    path = tmp_path / "cipher.xml"
    path.write_text(VALID.replace(">3<", ">42<"), encoding="utf-8")
    with pytest.raises(RangeError):
        load_engine(path)
