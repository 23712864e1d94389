import pygame
import pytest

from bouncy.main import main


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "bouncy" in capsys.readouterr().out


def test_unknown_option_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2


def test_missing_asset_raises_and_closes_window(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    with pytest.raises(RuntimeError):
        main([])
    assert pygame.display.get_init() is False