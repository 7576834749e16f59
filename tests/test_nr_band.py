#!/usr/bin/env -S uv run
# -*- mode: python; -*-
# vim: set ft=python:
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pyyaml",
#   "pytest",
# ]
# ///
"""Test suite for nr_band.py"""

import json
import sys
from pathlib import Path

import pytest
import yaml

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import nr_band
from nrband.band_table import BandDefinition
from nrband.resolver import ResolvedBand


@pytest.fixture
def config_file(tmp_path):
    """Empty config so the user's own config doesn't leak in"""
    path = tmp_path / "config.yaml"
    path.write_text("band_hints: []\noutput: text\n")
    return path


class TestFormatting:
    """Test text output helpers"""

    def test_format_exact(self):
        line = nr_band.format_result(ResolvedBand(630_000, 3_450_000, 78, "3500"))
        assert line == "630000: 3450.000 MHz  n78 (3500)"

    def test_format_ambiguous(self):
        line = nr_band.format_result(ResolvedBand(285_401, 1_427_005, None, "1500"))
        assert line == "285401: 1427.005 MHz  1500 (band ambiguous)"

    def test_format_unknown(self):
        line = nr_band.format_result(ResolvedBand(0, 0))
        assert line.endswith("unknown band")

    def test_format_band(self):
        line = nr_band.format_band(BandDefinition((620_000, 653_333), "3500", 78, 1))
        assert line.startswith("n78")
        assert "620000-653333" in line
        assert "prio 1" in line


class TestMain:
    """Test command-line entry point"""

    def test_resolve_text(self, config_file, capsys):
        assert nr_band.main(["630000", "--config", str(config_file)]) == 0
        assert capsys.readouterr().out.strip() == "630000: 3450.000 MHz  n78 (3500)"

    def test_resolve_json(self, config_file, capsys):
        nr_band.main(["500000", "125000", "--json", "--config", str(config_file)])
        lines = capsys.readouterr().out.strip().splitlines()
        assert json.loads(lines[0]) == {
            "channel_number": 500_000,
            "frequency_khz": 2_500_000,
            "band_number": 90,
            "band_name": "2600",
        }
        assert json.loads(lines[1])["band_number"] == 71

    def test_hint_option(self, config_file, capsys):
        nr_band.main(["160000", "-b", "20", "--config", str(config_file)])
        assert "n20 (800)" in capsys.readouterr().out

    def test_hints_from_config(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("band_hints: [77]\noutput: json\n")
        nr_band.main(["630000", "--config", str(path)])
        assert json.loads(capsys.readouterr().out)["band_number"] == 77

    def test_unknown_hint_warns(self, config_file, capsys):
        nr_band.main(["125000", "-b", "999", "--config", str(config_file)])
        captured = capsys.readouterr()
        assert "n999" in captured.err
        assert "unknown band" in captured.out

    def test_candidates(self, config_file, capsys):
        nr_band.main(["630000", "--candidates", "--config", str(config_file)])
        out = capsys.readouterr().out
        assert "n77" in out
        assert "n78" in out

    def test_negative_arfcn(self, config_file):
        with pytest.raises(SystemExit) as exc:
            nr_band.main(["-5", "--config", str(config_file)])
        assert "non-negative" in str(exc.value.code)

    def test_missing_arfcn(self, config_file):
        with pytest.raises(SystemExit):
            nr_band.main(["--config", str(config_file)])

    def test_list(self, capsys):
        assert nr_band.main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "n79" in out
        assert "693334-733333" in out

    def test_dump_config(self, capsys):
        nr_band.main(["--dump-config"])
        assert yaml.safe_load(capsys.readouterr().out) == {"band_hints": [], "output": "text"}

    def test_save_config(self, tmp_path, capsys):
        path = tmp_path / "new" / "config.yaml"
        assert nr_band.main(["-b", "78", "-b", "28", "--json", "--save-config", "--config", str(path)]) == 0
        assert yaml.safe_load(path.read_text()) == {"band_hints": [78, 28], "output": "json"}
        assert "Saved config" in capsys.readouterr().out
