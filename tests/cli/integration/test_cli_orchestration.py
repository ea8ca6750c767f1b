"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import logging
import sys
import textwrap
from collections.abc import Iterator
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner
from openapi_type_schema.cli import cli, main

MODELS_MODULE = "cli_shop_models"

MODELS_SOURCE = textwrap.dedent(
    '''
    """Shop models used by the CLI integration tests."""

    from __future__ import annotations

    from dataclasses import dataclass
    from datetime import datetime
    from typing import Annotated, ClassVar

    from openapi_type_schema.type_introspection import Hidden


    @dataclass
    class Auditable:
        created_at: datetime


    @dataclass
    class Item:
        sku: str
        price: float


    @dataclass
    class Order(Auditable):
        items: list[Item]
        attributes: dict[str, str]
        internal_note: Annotated[str, Hidden]
        table_name: ClassVar[str] = "orders"


    Orders = list[Order]
    '''
)


@pytest.fixture
def models_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    package_dir = tmp_path / "models"
    package_dir.mkdir()
    (package_dir / f"{MODELS_MODULE}.py").write_text(MODELS_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(package_dir))
    yield MODELS_MODULE
    sys.modules.pop(MODELS_MODULE, None)


@pytest.fixture
def restore_package_logger() -> Iterator[None]:
    package_logger = logging.getLogger("openapi_type_schema")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


def _write_config(tmp_path: Path, models: str, output: str = "openapi.yaml") -> Path:
    config = {
        "info": {"title": "Shop API", "version": "1.2.0"},
        "output": {"path": output},
        "operations": [
            {
                "path": "/orders",
                "method": "post",
                "operation_id": "createOrder",
                "request_body": {"type": f"{models}:Order", "description": "Order to place"},
                "responses": [
                    {"status": "201", "type": f"{models}:Order", "description": "Created"}
                ],
            },
            {
                "path": "/orders",
                "method": "get",
                "operation_id": "listOrders",
                "responses": [{"status": "200", "type": f"{models}:Orders"}],
            },
            {
                "path": "/orders/search",
                "method": "post",
                "form_params": [
                    {"name": "query", "type": "str"},
                    {"name": "limit", "type": "int"},
                ],
            },
        ],
    }
    path = tmp_path / "openapi-config.yaml"
    path.write_text(yaml.safe_dump(config, sort_keys=False), encoding="utf-8")
    return path


def test_generate_command_writes_yaml_document(tmp_path: Path, models_module: str) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path, models_module)

    result = runner.invoke(cli, ["generate", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    output_path = (tmp_path / "openapi.yaml").resolve()
    assert result.stdout.strip() == str(output_path)
    document = yaml.safe_load(output_path.read_text(encoding="utf-8"))

    assert document["info"] == {"title": "Shop API", "version": "1.2.0"}
    schemas = document["components"]["schemas"]
    assert list(schemas) == ["Item", "Order"]
    assert list(schemas["Order"]["properties"]) == ["created_at", "items", "attributes"]
    assert schemas["Order"]["properties"]["attributes"] == {
        "type": "object",
        "additionalProperties": {"type": "string"},
    }
    post = document["paths"]["/orders"]["post"]
    assert post["requestBody"]["description"] == "Order to place"
    assert post["responses"]["201"]["content"]["application/json"]["schema"] == {
        "$ref": "#/components/schemas/Order"
    }
    search = document["paths"]["/orders/search"]["post"]["requestBody"]["content"]
    assert search["application/x-www-form-urlencoded"]["schema"]["properties"] == {
        "query": {"type": "string"},
        "limit": {"type": "integer", "format": "int64"},
    }


def test_generate_command_honours_output_and_format_overrides(
    tmp_path: Path, models_module: str
) -> None:
    config_path = _write_config(tmp_path, models_module)
    output_path = tmp_path / "out" / "api.txt"

    exit_code = main(
        ["generate", "--config", str(config_path), "--output", str(output_path), "--format", "json"]
    )

    assert exit_code == 0
    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert document["paths"]["/orders"]["get"]["responses"]["200"]["content"][
        "application/json"
    ]["schema"] == {"type": "array", "items": {"$ref": "#/components/schemas/Order"}}
    assert not (tmp_path / "openapi.yaml").exists()


def test_generate_command_reports_unknown_type_reference(
    tmp_path: Path, models_module: str, capsys
) -> None:
    config_path = _write_config(tmp_path, f"{models_module}_missing")

    exit_code = main(["generate", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot import module" in captured.err
    assert "Traceback" not in captured.err


def test_show_schema_prints_schema_and_components(models_module: str) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["show-schema", f"{models_module}:Orders", "--format", "json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["schema"] == {"type": "array", "items": {"$ref": "#/components/schemas/Order"}}
    assert list(payload["components"]["schemas"]) == ["Item", "Order"]
    assert "internal_note" not in result.stdout


def test_show_schema_for_builtin_scalar() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["show-schema", "str"])

    assert result.exit_code == 0
    assert yaml.safe_load(result.stdout) == {
        "schema": {"type": "string"},
        "components": {"schemas": {}},
    }


def test_verbose_flag_logs_schema_registration(
    models_module: str, capsys, restore_package_logger: None
) -> None:
    exit_code = main(["--verbose", "show-schema", f"{models_module}:Order"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Registered schema Order" in captured.err
    assert "Registered schema Item" in captured.err


def test_repeated_verbose_runs_log_each_line_once(
    models_module: str, capsys, restore_package_logger: None
) -> None:
    main(["--verbose", "show-schema", f"{models_module}:Item"])
    capsys.readouterr()

    exit_code = main(["-v", "show-schema", f"{models_module}:Item"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.err.count("Registered schema Item") == 1


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "openapi-config.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert result.stdout.strip() == str(output_path.resolve())
    assert "operations:" in output_path.read_text(encoding="utf-8")
