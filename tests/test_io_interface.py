import pytest
from chopsticks.common.io_interface import (
    ConsoleIOInterface,
    LoggingIOInterface,
    TestIOInterface,
)


def test_console_io_interface_methods(mocker, capsys):
    interface = ConsoleIOInterface()

    # Mock the builtin input function
    mocker.patch("builtins.input", side_effect=["A L R", "2"])

    interface.output("Test message")
    assert capsys.readouterr().out == "Test message\n"

    assert interface.input("Your move: ") == "A L R"
    assert interface.input("Your move: ") == "2"


def test_test_io_interface_methods():
    interface = TestIOInterface()

    interface.output("Test")
    assert interface.sent_messages == ["Test"]

    interface.add_input("S 1 2")
    assert interface.input("Your move: ") == "S 1 2"
    assert interface.prompts == ["Your move: "]

    # An empty queue behaves like a closed stdin
    with pytest.raises(EOFError):
        interface.input("Your move: ")


def test_logging_io_interface_appends(tmp_path):
    log_file = tmp_path / "game.log"
    interface = LoggingIOInterface(str(log_file))

    interface.output("first line")
    interface.output("second line")
    assert interface.input("Your move: ") == ""

    assert log_file.read_text(encoding="utf-8").splitlines() == [
        "first line",
        "second line",
        "[INPUT PROMPT] Your move: ",
    ]


@pytest.mark.asyncio
async def test_logging_io_interface_output_async(tmp_path):
    log_file = tmp_path / "game.log"
    interface = LoggingIOInterface(str(log_file))

    interface.output("# Game 1")
    await interface.output_async("1. player1 A L R")
    await interface.output_async("# Winner: player1")

    assert log_file.read_text(encoding="utf-8") == (
        "# Game 1\n1. player1 A L R\n# Winner: player1\n"
    )
