"""Tests for JSON-RPC envelope encoding and decoding."""

import json

import pytest

from aionr_mcp.mcp.codec import (
    decode_request,
    decode_response,
    encode_response,
    salvage_id,
)
from aionr_mcp.mcp.errors import InvalidRequest, ParseError
from aionr_mcp.mcp.models import JsonRpcError, JsonRpcResponse


class TestDecodeRequest:

    def test_request_with_id(self):
        request = decode_request(b'{"jsonrpc":"2.0","method":"initialize","id":1}')

        assert request.method == "initialize"
        assert request.id == 1
        assert request.params is None
        assert request.is_notification is False

    def test_request_without_id_is_notification(self):
        request = decode_request('{"jsonrpc":"2.0","method":"notifications/initialized"}')
        assert request.is_notification is True

    def test_null_id_is_not_notification(self):
        request = decode_request('{"jsonrpc":"2.0","method":"tools/list","id":null}')
        assert request.id is None
        assert request.is_notification is False

    def test_params_may_be_any_json_value(self):
        request = decode_request('{"jsonrpc":"2.0","method":"x","id":"a","params":[1,2]}')
        assert request.params == [1, 2]

    def test_float_id_is_kept(self):
        request = decode_request('{"jsonrpc":"2.0","method":"x","id":1.5}')
        assert request.id == 1.5

    def test_invalid_json_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            decode_request(b"{not json")
        assert exc_info.value.request_id is None

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_json_number_constants_raise_parse_error(self, constant):
        with pytest.raises(ParseError) as exc_info:
            decode_request(f'{{"jsonrpc":"2.0","method":"x","id":{constant}}}')
        assert exc_info.value.request_id is None
        assert constant.lstrip("-") in exc_info.value.message

    def test_non_finite_id_is_not_salvaged(self):
        assert salvage_id({"id": float("nan")}) is None
        assert salvage_id({"id": float("inf")}) is None
        assert salvage_id({"id": 2.5}) == 2.5

    def test_invalid_envelope_salvages_id(self):
        with pytest.raises(InvalidRequest) as exc_info:
            decode_request('{"jsonrpc":"2.0","id":"req-9","method":5}')
        assert exc_info.value.request_id == "req-9"
        assert "method" in exc_info.value.message

    def test_invalid_envelope_with_unusable_id(self):
        with pytest.raises(InvalidRequest) as exc_info:
            decode_request('{"jsonrpc":"2.0","id":{"nested":1}}')
        assert exc_info.value.request_id is None


class TestEncodeResponse:

    def test_success_shape(self):
        body = encode_response(JsonRpcResponse.success(1, {"ok": True}))
        assert json.loads(body) == {"jsonrpc": "2.0", "id": 1, "result": {"ok": True}}

    def test_error_shape_omits_empty_data(self):
        response = JsonRpcResponse.failure(None, {"code": -32700, "message": "Parse error"})
        assert json.loads(encode_response(response)) == {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32700, "message": "Parse error"},
        }

    def test_null_result_is_still_a_result(self):
        body = json.loads(encode_response(JsonRpcResponse.success(3, None)))
        assert "result" in body and body["result"] is None
        assert "error" not in body

    def test_non_ascii_is_utf8(self):
        body = encode_response(JsonRpcResponse.success(1, "blåbær"))
        assert "blåbær".encode("utf-8") in body

    def test_response_needs_exactly_one_outcome(self):
        with pytest.raises(ValueError):
            JsonRpcResponse(
                id=1,
                result=1,
                error=JsonRpcError(code=-32603, message="x"),
            )
        with pytest.raises(ValueError):
            JsonRpcResponse(id=1)


class TestRoundTrip:

    @pytest.mark.parametrize(
        "response",
        [
            JsonRpcResponse.success(1, {"tools": [{"name": "run_inference"}]}),
            JsonRpcResponse.success("abc", [1, "two", None]),
            JsonRpcResponse.failure(
                7, {"code": -32602, "message": "Invalid params", "data": {"field": "prompt"}}
            ),
        ],
    )
    def test_decode_of_encode_reproduces_fields(self, response):
        decoded = decode_response(encode_response(response))

        assert decoded.id == response.id
        assert decoded.result == response.result
        assert decoded.error == response.error

    def test_decode_response_rejects_result_and_error(self):
        with pytest.raises(InvalidRequest):
            decode_response(
                '{"jsonrpc":"2.0","id":1,"result":1,"error":{"code":1,"message":"m"}}'
            )
