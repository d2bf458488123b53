#!/usr/bin/env python3

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from cfn_spec_to_code.cfn_spec_to_code import cfn_spec_to_code
from cfn_spec_to_code.cli_utils import reconstruct_command_line

SPEC_PATH = Path(__file__).parent / "test_data" / "specs" / "mini_spec.json"


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    def test_generates_file(self, runner, tmp_path):
        out = tmp_path / "aws.rs"

        result = runner.invoke(cfn_spec_to_code, [str(SPEC_PATH), str(out)])

        assert result.exit_code == 0, result.output
        code = out.read_text()
        assert code.startswith("// This file is generated by cfn_spec_to_code.")
        assert "// Command: cfn_spec_to_code mini_spec.json aws.rs\n" in code
        assert "pub struct VPC {" in code

    def test_root_option(self, runner, tmp_path):
        out = tmp_path / "aws.rs"

        result = runner.invoke(cfn_spec_to_code, [str(SPEC_PATH), str(out), "--root", "Cfn"])

        assert result.exit_code == 0, result.output
        code = out.read_text()
        assert "pub mod Cfn {" in code
        assert "use crate::Cfn::Tag::Tag;" in code
        assert "// Command: cfn_spec_to_code mini_spec.json aws.rs --root Cfn\n" in code

    def test_config_file(self, runner, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"widen_numeric_types": True, "add_generation_comment": False}))
        out = tmp_path / "aws.rs"

        result = runner.invoke(cfn_spec_to_code, ["--config", str(config), str(SPEC_PATH), str(out)])

        assert result.exit_code == 0, result.output
        code = out.read_text()
        assert code.startswith("pub mod AWS {")
        assert "pub Rules: Vec<u64>," in code

    def test_invalid_config_file(self, runner, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"output": {"mode": "sometimes"}}))

        result = runner.invoke(cfn_spec_to_code, ["-c", str(config), str(SPEC_PATH), str(tmp_path / "aws.rs")])

        assert result.exit_code != 0
        assert "Invalid config file" in result.output

    def test_no_force_refuses_existing_output(self, runner, tmp_path):
        out = tmp_path / "aws.rs"
        out.write_text("keep me")

        result = runner.invoke(cfn_spec_to_code, [str(SPEC_PATH), str(out), "--no-force"])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert out.read_text() == "keep me"

    def test_malformed_name_exits_non_zero(self, runner, tmp_path):
        spec = tmp_path / "spec.json"
        spec.write_text(json.dumps({"PropertyTypes": {"AWS::::Broken": {"Properties": {}}}}))
        out = tmp_path / "aws.rs"

        result = runner.invoke(cfn_spec_to_code, [str(spec), str(out)])

        assert result.exit_code == 1
        assert "Cannot resolve type name 'AWS::::Broken'" in result.output
        assert not out.exists()

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(cfn_spec_to_code, [str(tmp_path / "missing.json"), str(tmp_path / "aws.rs")])

        assert result.exit_code == 2


class TestCliUtils:
    def test_reconstruct_command_line_without_context(self):
        # No active Click context outside an invocation
        assert reconstruct_command_line(cfn_spec_to_code) == "cfn_spec_to_code"
