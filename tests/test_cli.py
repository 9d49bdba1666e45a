from unittest import mock

import pytest

from saudi_id.cli import main, setup
from saudi_id.id import Id, IdType, ParseError


def run_main(*args: str) -> int:
    with mock.patch("sys.argv", ["saudi-id", *args]), mock.patch("saudi_id.cli.setup") as mock_setup:
        with mock.patch("saudi_id.cli.setup_logging"):
            with pytest.raises(SystemExit) as exc_info:
                main()
        mock_setup.assert_called_once_with()
    return exc_info.value.code  # type: ignore[return-value]


def test_check_citizen(capsys: pytest.CaptureFixture[str]) -> None:
    assert run_main("check", "1581872353") == 0
    assert capsys.readouterr().out == "Valid Citizen ID\n"


def test_check_resident(capsys: pytest.CaptureFixture[str]) -> None:
    assert run_main("check", "2100000005") == 0
    assert capsys.readouterr().out == "Valid Resident ID\n"


def test_check_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    assert run_main("check", "1581872354") == 1
    assert capsys.readouterr().out == "Invalid ID (bad checksum)\n"

    assert run_main("check", "12345") == 1
    assert capsys.readouterr().out == "Invalid ID (wrong length)\n"

    assert run_main("check", "abc") == 1
    assert capsys.readouterr().out == "Invalid ID (not a number)\n"


@pytest.mark.parametrize(
    "type_arg, expected",
    [
        ("resident", IdType.RESIDENT),
        ("Citizen", IdType.CITIZEN),
        ("RESIDENT", IdType.RESIDENT),
        ("2", IdType.RESIDENT),
        ("1", IdType.CITIZEN),
    ],
)
def test_generate(type_arg: str, expected: IdType, capsys: pytest.CaptureFixture[str]) -> None:
    assert run_main("generate", "--type", type_arg, "--count", "3") == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    for line in lines:
        assert Id.from_str(line).get_type() == expected


def test_generate_defaults(capsys: pytest.CaptureFixture[str]) -> None:
    assert run_main("generate") == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert Id.from_str(lines[0]).get_type() == IdType.CITIZEN


def test_generate_bad_count(capsys: pytest.CaptureFixture[str]) -> None:
    assert run_main("generate", "--count", "0") == 2
    assert "greater than or equal to 1" in capsys.readouterr().err


def test_setup() -> None:
    with mock.patch("saudi_id.cli.setup_sentry") as mock_sentry:
        setup()
        mock_sentry.assert_called_once_with(ignore_exceptions=[ParseError])


@pytest.mark.parametrize(
    "args, level",
    [
        ((), None),
        (("--log-level", "DEBUG"), "DEBUG"),
    ],
)
def test_log_level(args: tuple[str, ...], level: str | None, capsys: pytest.CaptureFixture[str]) -> None:
    with mock.patch("sys.argv", ["saudi-id", *args, "check", "1581872353"]), mock.patch("saudi_id.cli.setup"):
        with mock.patch("saudi_id.cli.setup_logging") as mock_logging:
            with pytest.raises(SystemExit) as exc_info:
                main()
    assert exc_info.value.code == 0
    mock_logging.assert_called_once_with(level)
    assert capsys.readouterr().out == "Valid Citizen ID\n"
