"""
Functional tests for the pipeline generator.

Each case in test_data/functional/*_tests.json gives a specification, an
optional config, and substrings that must (or must not) appear in the
generated Rust code.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cfn_spec_to_code.pipeline import CodeGeneratorConfig, PipelineGenerator


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate_code(schema, config_dict):
    """Helper to generate code with given schema and config."""
    config = CodeGeneratorConfig.from_dict(config_dict or {})
    config.add_generation_comment = False
    return PipelineGenerator(schema, config).generate()


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    generated_code = _generate_code(test_case["schema"], test_case.get("config"))

    for expected in test_case.get("expected_rust", []):
        assert expected in generated_code, f"Expected pattern {expected!r} not found in output of {test_case['name']}:\n{generated_code}"

    for unexpected in test_case.get("unexpected_rust", []):
        assert unexpected not in generated_code, f"Unexpected pattern {unexpected!r} found in output of {test_case['name']}"
