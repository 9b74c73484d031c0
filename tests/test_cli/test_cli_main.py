"""Tests for the CLI module."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from typer.testing import CliRunner

from sls_to_typespec import __version__
from sls_to_typespec.cli_main import app

runner = CliRunner()


class TestVersion:
    """Tests for version option."""

    def test_version_long(self) -> None:
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_version_short(self) -> None:
        """Test -v flag."""
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestNoArgs:
    """Tests for no arguments behavior."""

    def test_no_args_shows_help(self) -> None:
        """Test that no arguments shows help."""
        result = runner.invoke(app)
        assert "generate" in result.output
        assert "inspect" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate_writes_files(
        self,
        tmp_path: Path,
        create_user_data: dict[str, Any],
        write_yaml: Callable[[dict[str, Any], str], Path],
    ) -> None:
        """Test writing main.tsp and tspconfig.yaml."""
        input_file = write_yaml(create_user_data, "serverless.yml")
        output_dir = tmp_path / "typespec"

        result = runner.invoke(app, ["generate", str(input_file), "-o", str(output_dir)])

        assert result.exit_code == 0, result.output
        main = (output_dir / "main.tsp").read_text(encoding="utf-8")
        assert "op createUser(@body body: CreateUserRequest)" in main
        config = yaml.safe_load((output_dir / "tspconfig.yaml").read_text(encoding="utf-8"))
        assert config["emit"] == ["@typespec/openapi3"]

    def test_generate_dry_run(
        self,
        tmp_path: Path,
        create_user_data: dict[str, Any],
        write_yaml: Callable[[dict[str, Any], str], Path],
    ) -> None:
        """Test printing the TypeSpec without writing files."""
        input_file = write_yaml(create_user_data, "serverless.yml")
        output_dir = tmp_path / "typespec"

        result = runner.invoke(
            app, ["generate", str(input_file), "-o", str(output_dir), "--dry-run"]
        )

        assert result.exit_code == 0, result.output
        assert result.stdout.startswith('import "@typespec/http";')
        assert "model CreateUserResponse {" in result.stdout
        assert not output_dir.exists()

    def test_generate_title_and_namespace(
        self,
        tmp_path: Path,
        create_user_data: dict[str, Any],
        write_yaml: Callable[[dict[str, Any], str], Path],
    ) -> None:
        """Test overriding title and namespace from the command line."""
        input_file = write_yaml(create_user_data, "serverless.yml")

        result = runner.invoke(
            app,
            [
                "generate",
                str(input_file),
                "--title",
                "Users API",
                "--namespace",
                "UsersApi",
                "--dry-run",
            ],
        )

        assert result.exit_code == 0, result.output
        assert '@service(#{ title: "Users API" })\nnamespace UsersApi;' in result.stdout

    def test_generate_array_mode(
        self,
        write_yaml: Callable[[dict[str, Any], str], Path],
    ) -> None:
        """Test choosing the element array mode."""
        data = {
            "functions": {
                "list": {
                    "events": [
                        {
                            "http": {
                                "method": "get",
                                "path": "items",
                                "documentation": {
                                    "methodResponses": [
                                        {
                                            "statusCode": 200,
                                            "responseModels": {
                                                "application/json": {
                                                    "type": "array",
                                                    "items": {"title": "Item", "type": "object"},
                                                },
                                            },
                                        },
                                    ],
                                },
                            },
                        },
                    ],
                },
            },
        }
        input_file = write_yaml(data, "serverless.yml")

        result = runner.invoke(
            app, ["generate", str(input_file), "--array-mode", "element", "--dry-run"]
        )

        assert result.exit_code == 0, result.output
        assert "@body body: Item[];" in result.stdout
        assert "model Item {}" in result.stdout

    def test_generate_refuses_overwrite(
        self,
        tmp_path: Path,
        create_user_data: dict[str, Any],
        write_yaml: Callable[[dict[str, Any], str], Path],
    ) -> None:
        """Test that an existing main.tsp is kept without --force."""
        input_file = write_yaml(create_user_data, "serverless.yml")
        output_dir = tmp_path / "typespec"
        output_dir.mkdir()
        (output_dir / "main.tsp").write_text("existing")

        result = runner.invoke(app, ["generate", str(input_file), "-o", str(output_dir)])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert (output_dir / "main.tsp").read_text() == "existing"

    def test_generate_force_overwrites(
        self,
        tmp_path: Path,
        create_user_data: dict[str, Any],
        write_yaml: Callable[[dict[str, Any], str], Path],
    ) -> None:
        """Test that --force replaces an existing main.tsp."""
        input_file = write_yaml(create_user_data, "serverless.yml")
        output_dir = tmp_path / "typespec"
        output_dir.mkdir()
        (output_dir / "main.tsp").write_text("existing")

        result = runner.invoke(
            app, ["generate", str(input_file), "-o", str(output_dir), "--force"]
        )

        assert result.exit_code == 0, result.output
        assert (output_dir / "main.tsp").read_text().startswith("import")

    def test_generate_nonexistent_file(self) -> None:
        """Test generating from a nonexistent file."""
        result = runner.invoke(app, ["generate", "nonexistent.yml"])
        assert result.exit_code != 0

    def test_generate_invalid_yaml(self, tmp_path: Path) -> None:
        """Test generating from invalid YAML syntax."""
        input_file = tmp_path / "serverless.yml"
        input_file.write_text("not: valid: yaml: [")

        result = runner.invoke(app, ["generate", str(input_file), "--dry-run"])

        assert result.exit_code == 1

    def test_generate_invalid_config(self, tmp_path: Path) -> None:
        """Test generating from a config that does not match the models."""
        input_file = tmp_path / "serverless.yml"
        input_file.write_text("functions:\n  hello:\n    events: not-a-list\n")

        result = runner.invoke(app, ["generate", str(input_file), "--dry-run"])

        assert result.exit_code == 1
        assert "functions.hello.events" in result.output

    def test_generate_config_error(
        self,
        create_user_data: dict[str, Any],
        write_yaml: Callable[[dict[str, Any], str], Path],
    ) -> None:
        """Test that pipeline errors exit with code 1."""
        http = create_user_data["functions"]["createUser"]["events"][0]["http"]
        del http["request"]
        http["documentation"]["requestBody"] = {"description": "User"}
        input_file = write_yaml(create_user_data, "serverless.yml")

        result = runner.invoke(app, ["generate", str(input_file), "--dry-run"])

        assert result.exit_code == 1
        assert "ConfigError" in result.output

    def test_generate_unwritable_output(
        self,
        tmp_path: Path,
        create_user_data: dict[str, Any],
        write_yaml: Callable[[dict[str, Any], str], Path],
    ) -> None:
        """Test that an output path that is a file exits with code 1."""
        input_file = write_yaml(create_user_data, "serverless.yml")
        output = tmp_path / "typespec"
        output.write_text("not a directory")

        result = runner.invoke(app, ["generate", str(input_file), "-o", str(output)])

        assert result.exit_code == 1
        assert "Could Not Write Output" in result.output


class TestInspectCommand:
    """Tests for the inspect command."""

    def test_inspect_lists_declarations(
        self,
        users_api_data: dict[str, Any],
        write_yaml: Callable[[dict[str, Any], str], Path],
    ) -> None:
        """Test showing operations and models."""
        input_file = write_yaml(users_api_data, "serverless.yml")

        result = runner.invoke(app, ["inspect", str(input_file)])

        assert result.exit_code == 0, result.output
        assert "getUser" in result.stdout
        assert "GET /users/{id}" in result.stdout
        assert "User" in result.stdout
        assert "source=provider" in result.stdout

    def test_inspect_nonexistent_file(self) -> None:
        """Test inspecting a nonexistent file."""
        result = runner.invoke(app, ["inspect", "nonexistent.yml"])
        assert result.exit_code != 0
