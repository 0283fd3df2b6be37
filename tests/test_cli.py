"""Tests for the command line interface."""

import json

import pytest
import yaml
from click.testing import CliRunner

from paired_binary.cli import main
from paired_binary.digits import from_decimal


BASE = ["--base", "0,1,2", "--bits", "3"]


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, args):
    result = runner.invoke(main, args)
    return result, json.loads(result.stdout)


class TestCommands:
    def test_member(self, runner):
        result, data = invoke(runner, BASE + ["member", "10", "6"])
        assert result.exit_code == 0
        assert data == {"ok": True, "x": "10", "n_bits": 6, "member": True}

    def test_decompose(self, runner):
        result, data = invoke(runner, BASE + ["decompose", "10", "6"])
        assert result.exit_code == 0
        assert data["components"] == ["1", "2"]

    def test_compose(self, runner):
        result, data = invoke(runner, BASE + ["compose", "1", "2"])
        assert result.exit_code == 0
        assert data == {"ok": True, "value": "10", "n_bits": 6}

    def test_random(self, runner):
        result, data = invoke(runner, BASE + ["random", "12", "--count", "3"])
        assert result.exit_code == 0
        assert len(data["values"]) == 3
        for value in data["values"]:
            _, check = invoke(runner, BASE + ["member", value, "12"])
            assert check["member"] is True

    def test_pair_needs_no_setup(self, runner):
        result, data = invoke(runner, ["pair", "12", "4"])
        assert result.exit_code == 0
        assert data == {"ok": True, "x": "3", "x_prime": "12", "n_bits": 4}

    def test_levels(self, runner):
        result, data = invoke(runner, BASE + ["levels", "24"])
        assert result.exit_code == 0
        assert [lvl["n_bits"] for lvl in data["levels"]] == [3, 6, 12, 24]
        assert [lvl["members"] for lvl in data["levels"]] == ["3", "9", "81", "6561"]

    def test_check(self, runner):
        result, data = invoke(runner, BASE + ["check", "0,24", "6"])
        assert result.exit_code == 0
        assert data["results"] == {"0": True, "24": False}

    def test_levels_with_huge_member_counts(self, runner):
        # 3 ** 16384 members at 49152 bits
        result, data = invoke(runner, BASE + ["levels", "49152"])
        assert result.exit_code == 0
        top = data["levels"][-1]
        assert top["n_bits"] == 49152
        assert len(top["members"]) > 4300
        assert from_decimal(top["members"]) == 3 ** 16384

    def test_canonical_halves_flag(self, runner):
        result, data = invoke(runner, ["--base", "0", "--bits", "2", "--canonical-halves",
                                       "member", "15", "4"])
        assert result.exit_code == 0
        assert data["member"] is True

    def test_config_file(self, runner, tmp_path):
        path = tmp_path / "pattern.yml"
        path.write_text(yaml.safe_dump({"n_bits_base": 3, "base_values": ["0", "1", "2"]}))
        result, data = invoke(runner, ["--config", str(path), "member", "10", "6"])
        assert result.exit_code == 0
        assert data["member"] is True


class TestErrors:
    def test_invalid_component_count(self, runner):
        result, data = invoke(runner, BASE + ["compose", "0", "1", "2"])
        assert result.exit_code == 1
        assert data["ok"] is False
        assert data["error"]["kind"] == "InvalidComponentCount"

    def test_bit_width_mismatch(self, runner):
        result, data = invoke(runner, BASE + ["member", "5", "5"])
        assert result.exit_code == 1
        assert data["error"]["kind"] == "BitWidthMismatch"

    def test_not_configured(self, runner):
        result, data = invoke(runner, ["member", "0", "4"])
        assert result.exit_code == 1
        assert data["error"]["kind"] == "NotConfigured"

    def test_parse_error(self, runner):
        result, data = invoke(runner, BASE + ["member", "ten", "6"])
        assert result.exit_code == 1
        assert data["error"]["kind"] == "ParseError"
