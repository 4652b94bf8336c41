import pytest

from movacc.errors import CompileError


def test_message_and_line_are_kept():
    err = CompileError("Undeclared variable x", 4)
    assert err.message == "Undeclared variable x"
    assert err.line == 4


def test_str_mentions_line():
    err = CompileError("';' expected", 7)
    assert str(err) == "';' expected on line 7"


def test_str_without_line_is_message():
    err = CompileError("Out of registers!")
    assert str(err) == "Out of registers!"
    assert err.line is None


def test_can_be_raised_and_caught():
    err = CompileError("Too many global symbols defined", 12)
    assert str(err) == "Too many global symbols defined on line 12"
    with pytest.raises(CompileError, match="Too many") as exc_info:
        raise err
    assert exc_info.value is err
    assert exc_info.value.message == "Too many global symbols defined"
    assert exc_info.value.line == 12


def test_is_caught_as_exception():
    err = CompileError("syntax error", 3)
    caught = None
    try:
        raise err
    except Exception as exc:  # noqa: BLE001
        caught = exc
    assert caught is err
    assert str(caught) == "syntax error on line 3"