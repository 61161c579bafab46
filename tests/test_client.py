import pytest

from ppnet.address import IPv4Address
from ppnet.client import ClientArgs, main, run_client
from ppnet.sockets import UdpSocket


def test_from_shell_args_valid():
    args = ClientArgs.from_shell_args(["127.0.0.1", "9000", "5"])
    assert args.server_address == IPv4Address("127.0.0.1", 9000)
    assert args.number == 5


def test_from_shell_args_wrong_count():
    with pytest.raises(ValueError, match="There should be 3 arguments"):
        ClientArgs.from_shell_args(["127.0.0.1", "9000"])


def test_from_shell_args_bad_port():
    with pytest.raises(ValueError, match="^Failed to parse port"):
        ClientArgs.from_shell_args(["127.0.0.1", "abc", "5"])


def test_from_shell_args_bad_number():
    with pytest.raises(ValueError, match="^Failed to parse number"):
        ClientArgs.from_shell_args(["127.0.0.1", "9000", "many"])


def test_from_shell_args_bad_address():
    with pytest.raises(ValueError, match="Failed to parse address string"):
        ClientArgs.from_shell_args(["nowhere", "9000", "5"])


@pytest.mark.parametrize("number", [-1, 11])
def test_number_out_of_range(number):
    with pytest.raises(ValueError, match=r"range \[0\.\.10\]"):
        ClientArgs(IPv4Address("127.0.0.1", 9000), number)


@pytest.mark.parametrize("number", [0, 10])
def test_number_range_edges(number):
    assert ClientArgs(IPv4Address("127.0.0.1", 9000), number).number == number


def test_run_client_sends_until_stopped(capsys):
    with UdpSocket() as receiver:
        receiver.bind_any()
        target = IPv4Address.from_presentation("127.0.0.1", receiver.sockname().port)
        stops = iter([False, False, True])
        pauses = []
        sent = run_client(ClientArgs(target, 3), lambda: next(stops), pauses.append)
        assert sent == 2
        assert pauses == [3, 3]
        assert receiver.receive_from(64).data == bytes([3])
        assert receiver.receive_from(64).data == bytes([3])
    assert capsys.readouterr().out.splitlines() == ["Sent 1 bytes", "Sent 1 bytes"]


def test_main_reports_argument_error(capsys):
    assert main(["127.0.0.1", "9000"]) == 1
    assert "There should be 3 arguments" in capsys.readouterr().err


def test_main_reports_range_error(capsys):
    assert main(["127.0.0.1", "9000", "11"]) == 1
    assert capsys.readouterr().err.startswith("An error occurred: ")