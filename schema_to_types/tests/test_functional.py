"""
Functional tests driven by JSON test cases.

Each case gives a schema (inline or from test_data/schemas), a backend,
optional compile options, and the patterns the output must or must not
contain, or the error the compilation must raise.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from schema_to_types.pipeline import CompileOptions, compile_schema
from schema_to_types.pipeline import errors

TEST_DATA_DIR = Path(__file__).parent / "test_data"


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    test_cases = []

    for json_file in sorted((TEST_DATA_DIR / "functional").glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(pytest.param(test_case, id=f"{json_file.stem}:{test_case['name']}"))

    return test_cases


def _load_schema(test_case):
    """Load schema from test case (either inline or from file)."""
    if "schema" in test_case:
        return test_case["schema"]
    elif "schema_file" in test_case:
        with open(TEST_DATA_DIR / test_case["schema_file"]) as f:
            return json.load(f)
    else:
        raise ValueError("Test case must have either 'schema' or 'schema_file'")


@pytest.mark.parametrize("test_case", load_all_test_cases())
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    schema = _load_schema(test_case)
    options = CompileOptions.from_dict(test_case.get("config", {}))
    backend_id = test_case["backend"]

    if "expected_error" in test_case:
        error_class = getattr(errors, test_case["expected_error"])
        with pytest.raises(error_class):
            compile_schema(schema, backend_id, options, name="Root")
        return

    generated_code = compile_schema(schema, backend_id, options, name="Root")

    for pattern in test_case.get("expected_contains", []):
        assert pattern in generated_code, f"Expected pattern '{pattern}' not found in {backend_id} output"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in generated_code, f"Unexpected pattern '{pattern}' found in {backend_id} output"

    order = test_case.get("expected_order", [])
    positions = [generated_code.index(pattern) for pattern in order]
    assert positions == sorted(positions), f"Patterns not in order {order} in {backend_id} output"


if __name__ == "__main__":
    pytest.main([__file__])
