"""
Tests for the macro engine: dispatch, configuration and batch expansion.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import pytest

from sy_macros.config import Config
from sy_macros.expansion import (
    ExpansionRequest,
    MacroContractError,
    MacroEngine,
)
from sy_macros.expansion.rules import ALL_MACROS
from sy_macros.lsp_data import MacroDiagnosticSeverity
from sy_macros.span import Span


def mappable_request(name, fields, inherits=(), is_subclass=False, line=0):
    arguments = []
    if is_subclass:
        arguments.append({"label": "isSubclass", "value": {"kind": "boolean_literal", "text": "true"}})
    return ExpansionRequest.from_dict({
        "macro": "Mappable",
        "arguments": arguments,
        "declaration": {
            "kind": "class",
            "name": name,
            "inherits": list(inherits),
            "members": [{"member": "field", "name": f, "type": "String"} for f in fields]
        },
        "location": {"file": "Responses.swift", "line": line, "column": 0}
    })


class TestMacroEngine:
    """Test the dispatcher."""

    def test_registers_every_macro(self, engine):
        assert set(engine.macros) == {"stringify", "mainBundle", "Constant", "InterfaceGen", "Mappable"}
        assert len(engine.macros) == len(ALL_MACROS)

    def test_macro_info(self, engine):
        info = engine.get_macro_info()
        assert info["Mappable"]["kind"] == "member"
        assert info["InterfaceGen"]["kind"] == "peer"
        assert info["stringify"]["enabled"] is True

    def test_unknown_macro_is_fatal(self, engine):
        with pytest.raises(MacroContractError, match="no macro named 'Codable'"):
            engine.expand(ExpansionRequest(macro="Codable"))

    def test_disabled_macro(self):
        config = Config()
        config.update({"disabled_macros": ["Mappable"]})
        engine = MacroEngine(config)

        result = engine.expand(mappable_request("Model", ["id"]))
        assert result.declarations == []
        assert [d.severity for d in result.diagnostics] == [MacroDiagnosticSeverity.WARNING]
        assert engine.get_macro_info()["Mappable"]["enabled"] is False

    def test_diagnostics_bound_to_request_location(self, engine):
        result = engine.expand(mappable_request("Orphan", ["data"], is_subclass=True, line=7))
        assert result.diagnostics[0].span == Span.at("Responses.swift", 7, 0)

    def test_unexpected_failure_becomes_diagnostic(self, engine, monkeypatch, caplog):
        def explode(request, sink, config):
            raise RuntimeError("boom")

        monkeypatch.setattr(engine.macros["Mappable"], "expand", explode)
        result = engine.expand(mappable_request("Model", ["id"]))

        assert result.declarations == []
        assert result.has_errors
        assert result.diagnostics[0].message == "internal error while expanding Mappable: boom"
        assert "Internal Error" in caplog.text

    def test_contract_errors_are_not_swallowed(self, engine):
        with pytest.raises(MacroContractError):
            engine.expand(ExpansionRequest(macro="stringify"))

    def test_repeated_expansion_is_identical(self, engine):
        request = mappable_request("BaseResponse", ["code", "msg"])
        first = engine.expand(request)
        second = engine.expand(request)
        assert first.to_dict() == second.to_dict()

    def test_requests_do_not_share_diagnostics(self, engine):
        failing = engine.expand(mappable_request("Orphan", ["data"], is_subclass=True))
        clean = engine.expand(mappable_request("Model", ["id"]))
        assert len(failing.diagnostics) == 1
        assert clean.diagnostics == []


class TestBatchExpansion:
    """Test concurrent expansion of independent requests."""

    def test_empty_batch(self, engine):
        assert engine.expand_all([]) == []

    def test_results_keep_request_order(self, engine):
        requests = [mappable_request(f"Model{i}", [f"field{i}"], line=i) for i in range(20)]
        results = engine.expand_all(requests)

        assert [r.declarations[-1].text for r in results] == [
            f"extension Model{i}: Mappable {{}}" for i in range(20)
        ]
        assert results == [engine.expand(r) for r in requests]

    def test_base_and_derived_batch(self, engine):
        base = mappable_request("BaseResponse", ["code", "msg"])
        derived = mappable_request("TestResponse", ["data"], inherits=["BaseResponse"], is_subclass=True)
        base_result, derived_result = engine.expand_all([base, derived])

        assert base_result.declarations[-1].text == "extension BaseResponse: Mappable {}"
        mapping = derived_result.declarations[1].text.splitlines()
        assert mapping[1] == "    super.mapping(map: map)"
        assert mapping[2:] == ['    data <- map["data"]', "}"]
        assert not any(d.text.startswith("extension") for d in derived_result.declarations)

    def test_contract_error_aborts_batch(self, engine):
        with pytest.raises(MacroContractError):
            engine.expand_all([mappable_request("Model", ["id"]), ExpansionRequest(macro="Constant")])
