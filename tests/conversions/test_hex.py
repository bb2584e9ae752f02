from colorterp.conversions import hex_to_bytes, bytes_to_hex, byte_to_hex, unit_to_byte
from colorterp.errors import ParseError
import numpy as np
import pytest


def test_hex_to_bytes_forms():
    assert hex_to_bytes("#ff00aa") == ((255, 0, 170), None)
    assert hex_to_bytes("ff00aa") == ((255, 0, 170), None)
    assert hex_to_bytes("0xFF00AA") == ((255, 0, 170), None)
    assert hex_to_bytes("#FF00aa80") == ((255, 0, 170), 128)


def test_hex_shorthand_doubles_digits():
    assert hex_to_bytes("#f0a") == ((255, 0, 170), None)
    assert hex_to_bytes("f0a8") == ((255, 0, 170), 136)


@pytest.mark.parametrize("token", ["#ff00a", "#ff00aa8", "#gg0000", "", "#", "ff 00 aa", "#ff00aa0000"])
def test_malformed_hex(token):
    with pytest.raises(ParseError):
        hex_to_bytes(token)


def test_byte_to_hex_pads():
    assert byte_to_hex(0) == "00"
    assert byte_to_hex(11) == "0b"
    assert byte_to_hex(255) == "ff"
    assert bytes_to_hex([255, 0, 10], prefix="#") == "#ff000a"


def test_unit_to_byte_rounds_half_up_and_caps():
    values = unit_to_byte([0.0, 0.25, 0.5, 0.75, 1.0, 1.002])
    assert values.tolist() == [0, 64, 128, 191, 255, 255]
    assert values.dtype.kind == "i"


def test_unit_to_byte_float32_channels():
    channels = np.array([0.2, 0.4, 0.6, 0.8], dtype=np.float32)
    assert unit_to_byte(channels).tolist() == [51, 102, 153, 204]
