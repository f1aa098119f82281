import sys

import pytest

from scalelab import __version__
from scalelab.main import main


def _run(monkeypatch, capsys, *argv):
    monkeypatch.setattr(sys, "argv", ["scalelab", *argv])
    with pytest.raises(SystemExit) as exc:
        main()
    out, err = capsys.readouterr()
    return exc.value.code, out, err


def test_palette_command(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "-H", "180")
    assert code == 0
    assert "#00897b" in out
    assert "#e8f0ee" in out


def test_palette_with_contrast_and_curves(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "-H", "180", "-wcag", "-c")
    assert code == 0
    assert ":1" in out
    assert "L*" in out


def test_random_palette_is_seeded(monkeypatch, capsys):
    _, first, _ = _run(monkeypatch, capsys, "-r", "-s", "42")
    _, second, _ = _run(monkeypatch, capsys, "-r", "-s", "42")
    assert first == second


def test_version(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "-v")
    assert code == 0
    assert __version__ in out


def test_misplaced_subcommand(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "-H", "10", "export")
    assert code == 2
    assert "must be the first argument" in err


def test_unknown_argument(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "bogus")
    assert code == 2
    assert "bogus" in err


def test_inverted_saturation_warns(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "-smax", "10", "-smin", "60")
    assert code == 0
    assert "[warning]" in err


def test_export_hex(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "export", "-H", "180", "-f", "hex", "-n", "teal")
    assert code == 0
    lines = out.strip().split("\n")
    assert len(lines) == 11
    assert "--teal-500: #00897b;" in lines


def test_export_default_is_wrapped_oklch(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "export")
    assert code == 0
    assert out.split("\n")[0] == "--color-50: oklch(0.95 0.01 185);"


def test_export_no_wrapper(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "export", "-f", "rgb", "-nw")
    assert code == 0
    assert "--color-500: 0 137 123;" in out.split("\n")


def test_export_rejects_unknown_format(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "export", "-f", "cmyk")
    assert code == 2
    assert "[error]" in err


def test_contrast(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "contrast", "-H", "000", "-H", "fff")
    assert code == 0
    assert "21.00:1" in out
    assert "Pass" in out


def test_contrast_needs_two_colors(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "contrast", "-H", "000")
    assert code == 2
    assert "exactly two" in err


def test_hue_from_hsl(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "hue", "--hsl", "0")
    assert code == 0
    assert out.strip() == "28.26"


def test_hue_round_trip(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "hue", "--okhsl", "28.262")
    assert code == 0
    value = float(out.strip()) % 360.0
    assert min(value, 360.0 - value) < 0.01


def test_hue_requires_one_source(monkeypatch, capsys):
    code, _, _ = _run(monkeypatch, capsys, "hue")
    assert code == 2


def test_full_help_lists_subcommands(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "-hf")
    assert code == 0
    for prog in ("scalelab export", "scalelab contrast", "scalelab hue"):
        assert prog in out
