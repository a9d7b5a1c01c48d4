from wirechat.cli.commands import detect_local_command


def test_detect_exit() -> None:
    command = detect_local_command("exit")
    assert command is not None
    assert command.name == "exit"


def test_detect_help_is_case_insensitive() -> None:
    command = detect_local_command("  /HELP ")
    assert command is not None
    assert command.name == "help"
    assert command.raw == "/HELP"


def test_server_commands_are_not_local() -> None:
    assert detect_local_command("/models") is None
    assert detect_local_command("/model gpt-4.1") is None
    assert detect_local_command("/clear") is None


def test_plain_text_is_not_local() -> None:
    assert detect_local_command("exit the building") is None
    assert detect_local_command("") is None
