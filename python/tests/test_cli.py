"""CLI and terminal frontend tests — no window or TTY required."""

from __future__ import annotations

import random
import types
from pathlib import Path

import pytest
from PIL import Image, UnidentifiedImageError
from rich.console import Console
from typer.testing import CliRunner

from photofinish import main as cli
from photofinish.frontend.cli.input_handler import resolve
from photofinish.frontend.cli.rich.app import new_engine, render_board

runner = CliRunner()


# -- helpers ------------------------------------------------------------------


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, dict]]:
    """Replace the frontends with recorders; returns the recorded calls."""
    calls: list[tuple[str, dict]] = []

    def fake_load(frontend: cli.Frontend) -> types.SimpleNamespace:
        name = cli._RUNNERS[frontend]
        return types.SimpleNamespace(run=lambda **kw: calls.append((name, kw)))

    monkeypatch.setattr(cli, "_load_frontend", fake_load)
    return calls


# -- command line -------------------------------------------------------------


def test_help() -> None:
    result = runner.invoke(cli.app, ["--help"])
    assert result.exit_code == 0
    assert "--frontend" in result.output


@pytest.mark.parametrize("size", ["2", "8"])
def test_size_out_of_range_is_rejected(size: str) -> None:
    result = runner.invoke(cli.app, ["-f", "rich", "-s", size])
    assert result.exit_code == 2


def test_rich_frontend_gets_size_and_seed(launched: list) -> None:
    result = runner.invoke(cli.app, ["-f", "rich", "-s", "5", "--seed", "3"])
    assert result.exit_code == 0, result.output
    assert launched == [("photofinish.frontend.cli.rich.app", {"size": 5, "seed": 3})]


def test_pygame_frontend_gets_image(launched: list, tmp_path: Path) -> None:
    photo = tmp_path / "cat.png"
    Image.new("RGB", (30, 20)).save(photo)
    result = runner.invoke(cli.app, ["-f", "pygame", "-i", str(photo)])
    assert result.exit_code == 0, result.output
    (name, kwargs), = launched
    assert name == "photofinish.frontend.gui.pygame.app"
    assert kwargs["image_path"] == photo


def test_pygame_falls_back_to_assets(
    launched: list, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(cli, "ASSETS_DIR", tmp_path)
    (tmp_path / "readme.txt").write_text("skip me")
    Image.new("RGB", (4, 4)).save(tmp_path / "b.jpg")
    Image.new("RGB", (4, 4)).save(tmp_path / "a.png")

    result = runner.invoke(cli.app, ["-f", "pygame"])
    assert result.exit_code == 0, result.output
    assert launched[0][1]["image_path"] == tmp_path / "a.png"


def test_missing_image_is_rejected(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["-f", "pygame", "-i", str(tmp_path / "nope.png")])
    assert result.exit_code == 2


def test_unreadable_image_is_a_bad_parameter(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def boom(**_: object) -> None:
        raise UnidentifiedImageError("cannot identify image file")

    monkeypatch.setattr(cli, "_load_frontend", lambda _: types.SimpleNamespace(run=boom))
    photo = tmp_path / "junk.png"
    photo.write_text("junk")
    result = runner.invoke(cli.app, ["-f", "pygame", "-i", str(photo)])
    assert result.exit_code == 2


# -- terminal frontend --------------------------------------------------------


@pytest.mark.parametrize(
    ("raw", "action"),
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("D", "right"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("R", "shuffle"),
        ("\r", "enter"),
        ("\x1b[A", "up"),
        ("\x1b[D", "left"),
        ("x", "x"),
        ("\x07", ""),
    ],
)
def test_resolve_keys(raw: str, action: str) -> None:
    assert resolve(raw) == action


def test_new_engine_uses_piece_numbers() -> None:
    engine = new_engine(4, random.Random(5))
    assert sorted(t for t in engine.slots if t is not None) == list(range(15))
    assert engine.slots.count(None) == 1


def test_render_board_shows_every_piece() -> None:
    engine = new_engine(3, random.Random(11))
    console = Console(record=True, width=60, color_system=None)
    console.print(render_board(engine))
    text = console.export_text()
    for label in range(1, 9):
        assert str(label) in text
    assert "·" in text

