import pytest

from ppnet.address import IPv4Address


def test_pton_loopback():
    assert IPv4Address.pton("127.0.0.1") == 0x7F000001


def test_pton_any_is_zero():
    assert IPv4Address.pton("0.0.0.0") == 0


@pytest.mark.parametrize("text", ["1.2.3", "256.0.0.1", "localhost", "", "::1"])
def test_pton_rejects_bad_text(text):
    with pytest.raises(ValueError, match="Failed to parse address string"):
        IPv4Address.pton(text)


def test_from_presentation_round_trip():
    address = IPv4Address.from_presentation("192.168.1.20", 8080)
    assert address.as_sockaddr() == ("192.168.1.20", 8080)
    assert IPv4Address.from_sockaddr(address.as_sockaddr()) == address


def test_from_presentation_bad_address():
    with pytest.raises(ValueError, match="Failed to parse address string"):
        IPv4Address.from_presentation("not-an-address", 80)


@pytest.mark.parametrize("port", [-1, 65536])
def test_from_presentation_bad_port(port):
    with pytest.raises(ValueError):
        IPv4Address.from_presentation("127.0.0.1", port)


def test_from_sockaddr_ignores_extra_fields():
    address = IPv4Address.from_sockaddr(("10.0.0.1", 53, 0, 0))
    assert address == IPv4Address("10.0.0.1", 53)