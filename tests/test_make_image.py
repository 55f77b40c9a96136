import sys
from pathlib import Path

from PIL import Image

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from scripts.make_image import main


def test_cli_writes_png(tmp_path, capsys):
    out = tmp_path / "mandel.png"
    result = main([
        "--variant", "mandel",
        "--c", "0+0j",
        "--width", "6",
        "--height", "5",
        "--cutoff", "30",
        "--outfile", str(out),
    ])
    assert result == out
    with Image.open(out) as img:
        assert img.size == (12, 10)
    assert "[run]" in capsys.readouterr().out


def test_cli_config_with_override(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    out = tmp_path / "ship.png"
    cfg.write_text(f"variant: ship\nwidth: 4\nheight: 4\ncutoff: 20\noutfile: {out}\n")
    result = main(["--config", str(cfg), "--width", "3", "--workers", "2"])
    with Image.open(result) as img:
        assert img.size == (6, 8)


def test_cli_unknown_variant_draws_nothing(tmp_path):
    out = tmp_path / "none.png"
    assert main(["--variant", "spiral", "--width", "4", "--height", "4", "--outfile", str(out)]) is None
    assert not out.exists()
