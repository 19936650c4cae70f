"""
Test CLI functionality of SyMacros.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json

import pytest
from click.testing import CliRunner

from sy_macros import version
from sy_macros.main import cli


MERCHANT_REQUEST = {
    "macro": "Mappable",
    "declaration": {
        "kind": "struct",
        "name": "Merchant",
        "members": [
            {"member": "field", "name": "name", "type": "String"},
            {"member": "field", "name": "age", "type": "Int"}
        ]
    },
    "location": {"file": "Merchant.swift", "line": 2, "column": 0}
}

ORPHAN_REQUEST = {
    "macro": "Mappable",
    "arguments": [{"label": "isSubclass", "value": {"kind": "boolean_literal", "text": "true"}}],
    "declaration": {"kind": "class", "name": "Orphan", "members": []},
    "location": {"file": "Orphan.swift", "line": 0, "column": 0}
}

CONSTANTS_REQUEST = [
    {"macro": "Constant", "arguments": [{"value": {"kind": "string_literal", "text": "\"app_icon\""}}]},
    {"macro": "mainBundle", "arguments": [
        {"value": {"kind": "string_literal", "text": "\"key\""}},
        {"value": {"kind": "member_access", "text": "Int.self"}}
    ]},
]


@pytest.fixture
def runner():
    return CliRunner()


def write_json(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


class TestExpandCommand:
    """Test the expand command."""

    def test_text_output(self, runner, tmp_path):
        request = write_json(tmp_path / "merchant.json", MERCHANT_REQUEST)
        result = runner.invoke(cli, ["expand", str(request)])

        assert result.exit_code == 0
        assert "// Mappable" in result.stdout
        assert "init?(map: ObjectMapper.Map) {}" in result.stdout
        assert '    age <- map["age"]' in result.stdout
        assert "extension Merchant: Mappable {}" in result.stdout

    def test_json_output(self, runner, tmp_path):
        request = write_json(tmp_path / "constants.json", CONSTANTS_REQUEST)
        result = runner.invoke(cli, ["expand", "--format", "json", str(request)])

        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["summary"] == {"total_requests": 2, "total_errors": 0, "total_warnings": 0}
        constant, lookup = report["results"]
        assert constant["declarations"] == [
            {"role": "freestanding", "text": 'static let appIcon = "app_icon"'}
        ]
        assert lookup["expression"] == {
            "text": 'Bundle.main.object(forInfoDictionaryKey: "key") as? Int',
            "type": "Int?"
        }

    def test_error_diagnostic_sets_exit_code(self, runner, tmp_path):
        request = write_json(tmp_path / "orphan.json", ORPHAN_REQUEST)
        result = runner.invoke(cli, ["expand", str(request)])

        assert result.exit_code == 1
        assert "Orphan.swift:1:1: error: the inherited class was not found" in result.stdout

    def test_json_includes_lsp_diagnostics(self, runner, tmp_path):
        request = write_json(tmp_path / "orphan.json", ORPHAN_REQUEST)
        result = runner.invoke(cli, ["expand", "-f", "json", str(request)])

        report = json.loads(result.stdout)
        diagnostics = report["results"][0]["diagnostics"]
        assert diagnostics[0]["id"]["id"] == "errorthe inherited class was not found"
        lsp = report["results"][0]["lsp_diagnostics"][0]
        assert lsp["severity"] == 1
        assert lsp["message"] == "the inherited class was not found"

    def test_multiple_files_and_output_file(self, runner, tmp_path):
        first = write_json(tmp_path / "merchant.json", MERCHANT_REQUEST)
        second = write_json(tmp_path / "constants.json", CONSTANTS_REQUEST)
        output = tmp_path / "report.json"

        result = runner.invoke(cli, ["expand", "-f", "json", "-o", str(output), "-j", "2", str(first), str(second)])

        assert result.exit_code == 0
        report = json.loads(output.read_text(encoding='utf-8'))
        assert [r["macro"] for r in report["results"]] == ["Mappable", "Constant", "mainBundle"]

    def test_config_file(self, runner, tmp_path):
        request = write_json(tmp_path / "merchant.json", MERCHANT_REQUEST)
        config = write_json(tmp_path / "config.json", {"macros": {"decoder_type": "Map"}})
        result = runner.invoke(cli, ["expand", "--config", str(config), str(request)])

        assert result.exit_code == 0
        assert "mutating func mapping(map: Map) {" in result.stdout

    def test_malformed_request(self, runner, tmp_path):
        request = write_json(tmp_path / "bad.json", {"macro": "Mappable", "declaration": {"kind": "actor", "name": "A"}})
        result = runner.invoke(cli, ["expand", str(request)])

        assert result.exit_code == 1
        assert "cannot load requests" in result.output

    def test_unknown_macro_aborts(self, runner, tmp_path):
        request = write_json(tmp_path / "unknown.json", {"macro": "Codable"})
        result = runner.invoke(cli, ["expand", str(request)])

        assert result.exit_code == 1
        assert "expansion aborted" in result.output

    def test_requires_request_file(self, runner):
        result = runner.invoke(cli, ["expand"])
        assert result.exit_code != 0


class TestMacrosCommand:
    """Test listing macros."""

    def test_list_text(self, runner):
        result = runner.invoke(cli, ["macros"])
        assert result.exit_code == 0
        for name in ("stringify", "mainBundle", "Constant", "InterfaceGen", "Mappable"):
            assert name in result.stdout

    def test_list_json_with_config(self, runner, tmp_path):
        config = write_json(tmp_path / "config.json", {"disabled_macros": ["stringify"]})
        result = runner.invoke(cli, ["macros", "--format", "json", "--config", str(config)])

        assert result.exit_code == 0
        info = json.loads(result.stdout)
        assert info["stringify"]["enabled"] is False
        assert info["Mappable"]["enabled"] is True

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert version() in result.output
