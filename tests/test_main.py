import pytest

import main
from infinite_wordle.models.errors import PuzzleFetchError


def test_parser_defaults():
    args = main.build_parser().parse_args([])
    assert args.command == 'play'
    assert args.guesses == 6
    assert not args.debug


def test_parser_options():
    args = main.build_parser().parse_args(['-g', '3', '--debug'])
    assert args.guesses == 3
    assert args.debug

    assert main.build_parser().parse_args(['serve']).command == 'serve'


def test_rejects_non_positive_guesses():
    assert main.main(['--guesses', '0']) == 2


def test_version(capsys):
    with pytest.raises(SystemExit):
        main.main(['--version'])
    assert 'infinite-wordle' in capsys.readouterr().out


def test_play_passes_options(monkeypatch):
    calls = []
    monkeypatch.setattr(main, 'play_session', lambda source, guesses, debug: calls.append((guesses, debug)))
    assert main.main(['-g', '4', '-d']) == 0
    assert calls == [(4, True)]


def test_quit_with_ctrl_c(monkeypatch):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(main, 'play_session', interrupted)
    assert main.main([]) == 0


def test_puzzle_fetch_failure(monkeypatch, capsys):
    def broken(*args, **kwargs):
        raise PuzzleFetchError("service down")

    monkeypatch.setattr(main, 'play_session', broken)
    assert main.main([]) == 1
    assert 'service down' in capsys.readouterr().err
