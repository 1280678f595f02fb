import json

from click.testing import CliRunner

from json_schema_to_go.json_schema_to_go import json_schema_to_go

SCHEMA = {
    "definitions": {
        "Task": {
            "type": "object",
            "description": "A unit of work.",
            "properties": {"jwt_token": {"type": "string"}, "id": {"type": "string"}},
            "required": ["id"],
        }
    }
}


def _write_schema(tmp_path, schema=None, name="schema.json"):
    path = tmp_path / name
    path.write_text(json.dumps(schema if schema is not None else SCHEMA))
    return path


class TestCli:
    def test_generate(self, tmp_path):
        schema = _write_schema(tmp_path)
        output = tmp_path / "types.go"

        result = CliRunner().invoke(json_schema_to_go, ["--no-format", str(schema), str(output)])

        assert result.exit_code == 0, result.output
        assert "Successfully generated Go types using 'jsonrpc' generator in" in result.output
        content = output.read_text()
        assert "package types" in content
        assert "// A unit of work." in content
        assert "\tID string `json:\"id\"`" in content

    def test_options(self, tmp_path):
        schema = _write_schema(tmp_path)
        output = tmp_path / "types.go"

        result = CliRunner().invoke(
            json_schema_to_go,
            ["--no-format", "--no-comments", "-p", "tasks", "--acronyms", '{"jwt": true}', str(schema), str(output)],
        )

        assert result.exit_code == 0, result.output
        content = output.read_text()
        assert "package tasks" in content
        assert "// A unit of work." not in content
        assert "\tJWTToken *string" in content

    def test_config_file(self, tmp_path):
        schema = _write_schema(tmp_path)
        output = tmp_path / "types.go"
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"package_name": "models", "format_output": False}))

        result = CliRunner().invoke(json_schema_to_go, ["-c", str(config), str(schema), str(output)])

        assert result.exit_code == 0, result.output
        assert "package models" in output.read_text()

    def test_package_flag_overrides_config_file(self, tmp_path):
        schema = _write_schema(tmp_path)
        output = tmp_path / "types.go"
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"package_name": "models"}))

        result = CliRunner().invoke(json_schema_to_go, ["--no-format", "-c", str(config), "-p", "api", str(schema), str(output)])

        assert result.exit_code == 0, result.output
        assert "package api" in output.read_text()

    def test_malformed_config_file(self, tmp_path):
        schema = _write_schema(tmp_path)
        config = tmp_path / "config.json"
        config.write_text("{package_name: models")

        result = CliRunner().invoke(json_schema_to_go, ["-c", str(config), str(schema), str(tmp_path / "types.go")])

        assert result.exit_code == 1
        assert "Failed to parse config" in result.output
        assert "Traceback" not in result.output
        assert not (tmp_path / "types.go").exists()

    def test_config_file_with_unknown_formatter_option(self, tmp_path):
        schema = _write_schema(tmp_path)
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"formatter": {"cmd": ["gofmt"]}}))

        result = CliRunner().invoke(json_schema_to_go, ["-c", str(config), str(schema), str(tmp_path / "types.go")])

        assert result.exit_code == 1
        assert "Unknown 'formatter' option(s): cmd" in result.output

    def test_config_file_with_malformed_acronyms(self, tmp_path):
        schema = _write_schema(tmp_path)
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"acronyms": ["jwt"]}))

        result = CliRunner().invoke(json_schema_to_go, ["-c", str(config), str(schema), str(tmp_path / "types.go")])

        assert result.exit_code == 1
        assert "'acronyms' must be an object" in result.output

    def test_explicit_generator(self, tmp_path):
        schema = _write_schema(tmp_path, {"openapi": "3.0.0", "components": {"schemas": {"Pet": {"type": "string"}}}})
        output = tmp_path / "types.go"

        result = CliRunner().invoke(json_schema_to_go, ["--no-format", "-g", "openapi", str(schema), str(output)])

        assert result.exit_code == 0, result.output
        assert "using 'openapi' generator" in result.output

    def test_openapi_generator_rejects_plain_schema(self, tmp_path):
        schema = _write_schema(tmp_path)
        output = tmp_path / "types.go"

        result = CliRunner().invoke(json_schema_to_go, ["--no-format", "-g", "openapi", str(schema), str(output)])

        assert result.exit_code == 1
        assert "does not appear to be an OpenAPI specification" in result.output
        assert not output.exists()

    def test_unknown_generator(self, tmp_path):
        schema = _write_schema(tmp_path)

        result = CliRunner().invoke(json_schema_to_go, ["-g", "protobuf", str(schema), str(tmp_path / "types.go")])

        assert result.exit_code == 1
        assert "'protobuf' not found" in result.output

    def test_empty_schema(self, tmp_path):
        schema = _write_schema(tmp_path, {"title": "empty"})
        output = tmp_path / "types.go"

        result = CliRunner().invoke(json_schema_to_go, ["--no-format", str(schema), str(output)])

        assert result.exit_code == 1
        assert "no type definitions" in result.output
        assert not output.exists()

    def test_unsupported_format(self, tmp_path):
        schema = tmp_path / "schema.proto"
        schema.write_text("syntax = 'proto3';")

        result = CliRunner().invoke(json_schema_to_go, [str(schema), str(tmp_path / "types.go")])

        assert result.exit_code == 1
        assert "No generators found" in result.output

    def test_invalid_acronyms(self, tmp_path):
        schema = _write_schema(tmp_path)

        result = CliRunner().invoke(json_schema_to_go, ["--acronyms", "[1, 2]", str(schema), str(tmp_path / "types.go")])

        assert result.exit_code == 2
        assert "expected a JSON object" in result.output

    def test_missing_arguments(self):
        result = CliRunner().invoke(json_schema_to_go, [])

        assert result.exit_code == 2
        assert "SCHEMA_FILE and OUTPUT_FILE are required" in result.output

    def test_list(self):
        result = CliRunner().invoke(json_schema_to_go, ["--list"])

        assert result.exit_code == 0
        assert "Available Generators:" in result.output
        assert "  jsonrpc\n" in result.output
        assert "    Supported formats: .json, .yaml, .yml" in result.output
        assert "  openapi\n" in result.output
