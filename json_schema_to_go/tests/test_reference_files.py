import difflib
import json
from pathlib import Path

import pytest

from json_schema_to_go.pipeline import CodeGeneratorConfig, PipelineGenerator, load_schema


def discover_test_cases():
    """Automatically discover all test cases from test_cases directory"""
    test_cases_dir = Path(__file__).parent / "test_data" / "test_cases"
    test_cases = []

    for test_dir in sorted(test_cases_dir.iterdir()):
        if not test_dir.is_dir() or test_dir.name.startswith("."):
            continue

        schema_files = [test_dir / f"schema{suffix}" for suffix in (".json", ".yaml", ".yml")]
        schema_file = next((path for path in schema_files if path.exists()), None)
        reference_file = test_dir / "reference.go"
        if schema_file is None or not reference_file.exists():
            continue

        test_cases.append(
            {
                "test_name": test_dir.name,
                "schema_file": schema_file,
                "config_file": test_dir / "config.json",
                "reference_file": reference_file,
            }
        )

    return test_cases


@pytest.mark.parametrize("test_case", discover_test_cases(), ids=lambda tc: tc["test_name"])
def test_reference_file_generation(test_case):
    """Test code generation against reference files"""
    schema = load_schema(test_case["schema_file"])

    if test_case["config_file"].exists():
        with open(test_case["config_file"]) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    generated_code = PipelineGenerator(schema, config).generate()

    with open(test_case["reference_file"]) as f:
        reference_code = f.read()

    generated_normalized = generated_code.replace("\r\n", "\n")
    reference_normalized = reference_code.replace("\r\n", "\n")

    if generated_normalized != reference_normalized:
        diff = difflib.unified_diff(
            reference_normalized.splitlines(keepends=True),
            generated_normalized.splitlines(keepends=True),
            fromfile="reference",
            tofile="generated",
        )
        pytest.fail(f"Generated code does not match reference for {test_case['test_name']}\n\nDiff:\n{''.join(diff)}")


def test_reference_cases_discovered():
    assert {tc["test_name"] for tc in discover_test_cases()} >= {"task_service", "openapi_pets"}


if __name__ == "__main__":
    test_cases = discover_test_cases()
    print(f"Discovered {len(test_cases)} test cases:")
    for tc in test_cases:
        print(f"  - {tc['test_name']}")
