"""Tests for the command-line disassembler."""

import pytest
from hydra import compose, initialize
from omegaconf.errors import MissingMandatoryValue
from octadis.cli import run, parse_address
from octadis.rom import RomError


EXPECTED_LISTING = [
    "00e0 disp_clear()",
    "6a3f V10 = 63",
    "a22a I = 0x22a",
    "d015 draw(V0, V1, 5)",
    "5121 unknown(0x5121)",
    "00ee return",
]


@pytest.fixture
def make_config():
    """Compose the packaged config with command-line style overrides."""
    def _make(*overrides):
        with initialize(version_base=None, config_path="../octadis/conf"):
            return compose(config_name="config", overrides=list(overrides))
    return _make


class TestRun:
    """Test run() end to end."""

    def test_listing_on_stdout(self, make_config, rom_file, capsys):
        cfg = make_config(f"rom={rom_file}", "color=false")
        assert run(cfg) == 0
        out, err = capsys.readouterr()
        assert out.splitlines() == EXPECTED_LISTING
        assert "Octadis version" in err
        assert "1 of 6 opcodes match no CHIP-8 encoding" in err

    def test_rom_dir(self, make_config, rom_file, capsys):
        cfg = make_config(f"rom={rom_file.name}", f"rom_dir={rom_file.parent}")
        assert run(cfg) == 0
        assert capsys.readouterr().out.splitlines() == EXPECTED_LISTING

    def test_show_address(self, make_config, rom_file, capsys):
        cfg = make_config(f"rom={rom_file}", "show_address=true", "start_address=0x300")
        assert run(cfg) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "0300: 00e0 disp_clear()"
        assert out[-1] == "030a: 00ee return"

    def test_default_start_address(self, make_config, rom_file, capsys):
        cfg = make_config(f"rom={rom_file}", "show_address=true")
        assert run(cfg) == 0
        assert capsys.readouterr().out.startswith("0200: 00e0")

    def test_forced_colors(self, make_config, rom_file, capsys):
        cfg = make_config(f"rom={rom_file}", "color=true")
        assert run(cfg) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[4] == "5121 \033[31munknown(0x5121)\033[0m"
        assert out[0] == "00e0 disp_clear()"

    def test_auto_colors_off_when_captured(self, make_config, rom_file, capsys):
        cfg = make_config(f"rom={rom_file}")
        assert run(cfg) == 0
        assert "\033" not in capsys.readouterr().out

    def test_output_file(self, make_config, rom_file, tmp_path, capsys):
        output = tmp_path / "listing.txt"
        cfg = make_config(f"rom={rom_file}", f"output={output}")
        assert run(cfg) == 0
        assert output.read_text().splitlines() == EXPECTED_LISTING
        out, err = capsys.readouterr()
        assert out == ""
        assert "Listing written to" in err

    def test_stats(self, make_config, rom_file, capsys):
        cfg = make_config(f"rom={rom_file}", "stats=true")
        assert run(cfg) == 0
        err = capsys.readouterr().err
        assert "Opcodes per family:" in err
        assert "CLEAR_SCREEN" in err
        assert "UNKNOWN" in err

    def test_progress(self, make_config, rom_file, capsys):
        cfg = make_config(f"rom={rom_file}", "progress=true")
        assert run(cfg) == 0
        assert capsys.readouterr().out.splitlines() == EXPECTED_LISTING


class TestErrors:
    """Test error reporting and exit status."""

    def test_missing_rom(self, make_config, tmp_path, capsys):
        cfg = make_config(f"rom={tmp_path / 'missing.ch8'}")
        assert run(cfg) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "Cannot read ROM" in err

    def test_odd_rom_warns(self, make_config, odd_rom_file, capsys):
        cfg = make_config(f"rom={odd_rom_file}")
        assert run(cfg) == 0
        out, err = capsys.readouterr()
        assert out.splitlines() == EXPECTED_LISTING
        assert "trailing byte 0x12 at 0x20c" in err

    def test_odd_rom_strict(self, make_config, odd_rom_file, capsys):
        cfg = make_config(f"rom={odd_rom_file}", "strict=true")
        assert run(cfg) == 1
        assert "odd length" in capsys.readouterr().err

    def test_rom_required(self, make_config):
        cfg = make_config()
        with pytest.raises(MissingMandatoryValue):
            run(cfg)

    def test_invalid_start_address(self, make_config, rom_file, capsys):
        """Unparseable load addresses are reported like other ROM errors."""
        cfg = make_config(f"rom={rom_file}", "start_address=zz")
        assert run(cfg) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "Invalid load address 'zz'" in err

    def test_bad_color_setting(self, make_config, rom_file):
        cfg = make_config(f"rom={rom_file}", "color=sometimes")
        with pytest.raises(ValueError):
            run(cfg)


class TestParseAddress:
    """Test load address parsing."""

    @pytest.mark.parametrize("value,expected", [(512, 0x200), ("512", 0x200), ("0x300", 0x300)])
    def test_parse(self, value, expected):
        assert parse_address(value) == expected

    @pytest.mark.parametrize("value", ["zz", "0x", 1.5])
    def test_invalid(self, value):
        with pytest.raises(RomError, match="Invalid load address"):
            parse_address(value)
