"""Tests for headless/responses.py - IPC response helpers."""

import json

from nvimtool.core.errors import MissingTarget
from nvimtool.headless.responses import (
    error_response,
    rejection_response,
    result_response,
    success_response,
)
from nvimtool.models.contracts import ExecutionResult


class TestSuccessResponse:
    def test_returns_correct_structure(self):
        result = success_response(1, {"status": "success", "output": ""})

        assert result == {
            "id": 1,
            "status": "success",
            "data": {"status": "success", "output": ""},
        }

    def test_handles_zero_cmd_id(self):
        assert success_response(0, {})["id"] == 0


class TestErrorResponse:
    def test_returns_correct_structure(self):
        result = error_response(7, "MISSING_TARGET", "File path is required")

        assert result == {
            "id": 7,
            "status": "error",
            "error": {"code": "MISSING_TARGET", "message": "File path is required"},
        }

    def test_error_object_has_only_two_keys(self):
        assert len(error_response(1, "CODE", "msg")["error"]) == 2


class TestIPCContractCompliance:
    def test_responses_are_json_serializable(self):
        assert json.dumps(success_response(1, {"commands": []}))
        assert json.dumps(error_response(1, "CODE", "message"))

    def test_success_has_data_error_has_error(self):
        success = success_response(1, {})
        error = error_response(1, "CODE", "msg")

        assert "data" in success and "error" not in success
        assert "error" in error and "data" not in error


class TestDomainEnvelopes:
    def test_failed_nvim_run_is_still_success_envelope(self):
        result = result_response(3, ExecutionResult.failure("E492: Not an editor command"))

        assert result == {
            "id": 3,
            "status": "success",
            "data": {"status": "error", "output": "E492: Not an editor command"},
        }

    def test_rejection_uses_error_code(self):
        result = rejection_response(4, MissingTarget("lsp", "install", "LSP server name"))

        assert result["status"] == "error"
        assert result["error"]["code"] == "MISSING_TARGET"
        assert result["error"]["message"].startswith("LSP server name is required")
