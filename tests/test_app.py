from pathlib import Path

import pytest

from timber.app import AssetError, load_assets, main, parse_args

REQUIRED = [
    ("graphics/background.png", "Error: Could not load background image!"),
    ("graphics/tree.png", "Error: Could not load tree image!"),
    ("graphics/bee.png", "Error: Could not load bee image!"),
    ("graphics/cloud.png", "Error: Could not load cloud image!"),
    ("fonts/KOMIKAP_.ttf", "Error: Could not load font!"),
    ("graphics/branch.png", "Error: Could not load branch image!"),
    ("sound/chop.wav", "Error: Could not load chop sound!"),
    ("sound/death.wav", "Error: Could not load death sound!"),
    ("sound/out_of_time.wav", "Error: Could not load out of time sound!"),
]

OPTIONAL = [
    ("graphics/player.png", "player"),
    ("graphics/rip.png", "rip"),
    ("graphics/axe.png", "axe"),
    ("graphics/log.png", "log"),
]


def _make_assets(root: Path, skip=()) -> Path:
    for relative in [path for path, _ in REQUIRED] + [path for path, _ in OPTIONAL]:
        if relative in skip:
            continue
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"")
    return root


def test_load_assets_finds_every_file(tmp_path):
    assets = load_assets(_make_assets(tmp_path))
    assert assets.root == tmp_path
    assert assets.background == tmp_path / "graphics" / "background.png"
    assert assets.font == tmp_path / "fonts" / "KOMIKAP_.ttf"
    assert assets.out_of_time_sound == tmp_path / "sound" / "out_of_time.wav"
    assert assets.log == tmp_path / "graphics" / "log.png"


def test_load_assets_accepts_a_string_root(tmp_path):
    _make_assets(tmp_path)
    assert load_assets(str(tmp_path)) == load_assets(tmp_path)


@pytest.mark.parametrize("relative, message", REQUIRED)
def test_missing_required_file_raises(tmp_path, relative, message):
    _make_assets(tmp_path, skip={relative})
    with pytest.raises(AssetError) as info:
        load_assets(tmp_path)
    assert str(info.value) == message


@pytest.mark.parametrize("relative, field", OPTIONAL)
def test_missing_optional_graphic_is_none(tmp_path, relative, field):
    assets = load_assets(_make_assets(tmp_path, skip={relative}))
    assert getattr(assets, field) is None
    assert assets.background == tmp_path / "graphics" / "background.png"


def test_background_is_checked_first(tmp_path):
    with pytest.raises(AssetError, match="background image"):
        load_assets(tmp_path)


def test_directory_in_place_of_file_is_rejected(tmp_path):
    _make_assets(tmp_path, skip={"graphics/tree.png"})
    (tmp_path / "graphics" / "tree.png").mkdir()
    with pytest.raises(AssetError, match="tree image"):
        load_assets(tmp_path)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.assets == ".."
    assert args.fullscreen is True


def test_parse_args_windowed_and_directory(tmp_path):
    args = parse_args(["--assets", str(tmp_path), "--windowed"])
    assert args.assets == str(tmp_path)
    assert args.fullscreen is False


def test_parse_args_rejects_unknown_option():
    with pytest.raises(SystemExit):
        parse_args(["--no-such-option"])


def test_main_reports_missing_assets(tmp_path, capsys):
    status = main(["--assets", str(tmp_path), "--windowed"])
    captured = capsys.readouterr()
    assert status != 0
    assert "Error: Could not load background image!" in captured.err


def test_main_reports_first_missing_sound(tmp_path, capsys):
    _make_assets(tmp_path, skip={"sound/death.wav"})
    with pytest.raises(AssetError, match="death sound"):
        load_assets(tmp_path)
    status = main(["--assets", str(tmp_path), "--windowed"])
    assert status != 0
    assert "Error: Could not load death sound!" in capsys.readouterr().err