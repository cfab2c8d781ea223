"""Tests for envelope construction and reply decoding."""

import json

import pytest

from typedrpc.infra.rpc.protocol import (
    INVALID_PARAMS,
    decode_replies,
    decode_reply,
    encode_requests,
    make_error,
    make_request,
    to_batch_request,
)
from typedrpc.models.envelope import BatchRequest, ErrorReply, SuccessReply


class TestMakeRequest:
    def test_with_params(self):
        assert make_request(1, "removeData", {"x": 1}) == {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "removeData",
            "params": {"x": 1},
        }

    def test_without_params(self):
        env = make_request(2, "ping")
        assert env == {"jsonrpc": "2.0", "id": 2, "method": "ping"}
        assert "params" not in env


class TestDecodeReply:
    def test_success(self):
        reply = decode_reply({"jsonrpc": "2.0", "id": 1, "method": "m", "params": {"y": 1}})
        assert reply == SuccessReply(id=1, params={"y": 1}, method="m")

    def test_error_key_wins(self):
        reply = decode_reply({"jsonrpc": "2.0", "id": 1, "params": 1, "error": {"code": 1}})
        assert isinstance(reply, ErrorReply)
        assert reply.error == {"code": 1}

    def test_error_without_id(self):
        reply = decode_reply({"error": {"code": -1, "message": "x"}})
        assert reply == ErrorReply(error={"code": -1, "message": "x"}, id=None)

    def test_version_not_checked(self):
        reply = decode_reply({"jsonrpc": "1.0", "id": 3, "params": None})
        assert isinstance(reply, SuccessReply)

    def test_result_field_fallback(self):
        reply = decode_reply({"jsonrpc": "2.0", "id": 4, "result": [1]})
        assert reply.params == [1]

    def test_params_preferred_over_result(self):
        reply = decode_reply({"jsonrpc": "2.0", "id": 4, "params": "p", "result": "r"})
        assert reply.params == "p"

    def test_non_mapping_raises(self):
        with pytest.raises(ValueError, match="Expected reply object"):
            decode_reply(["not", "a", "reply"])


class TestBatchEntry:
    def test_passthrough(self):
        entry = BatchRequest(id=1, method="m")
        assert to_batch_request(entry) is entry

    def test_from_mapping(self):
        assert to_batch_request({"id": 2, "method": "m", "params": [1]}) == BatchRequest(
            id=2, method="m", params=[1]
        )

    def test_missing_id(self):
        with pytest.raises(ValueError, match="missing 'id'"):
            to_batch_request({"method": "m"})

    def test_wrong_type(self):
        with pytest.raises(ValueError, match="Invalid batch entry"):
            to_batch_request(("m", 1))


class TestJsonHelpers:
    def test_encode_requests(self):
        text = encode_requests([make_request(1, "a"), make_request(2, "b", [1])])
        assert json.loads(text) == [
            {"jsonrpc": "2.0", "id": 1, "method": "a"},
            {"jsonrpc": "2.0", "id": 2, "method": "b", "params": [1]},
        ]

    def test_encode_requests_indented(self):
        text = encode_requests([make_request(1, "a")], indent=2)
        assert text.startswith("[\n  {")
        assert json.loads(text) == [{"jsonrpc": "2.0", "id": 1, "method": "a"}]

    def test_decode_single_object(self):
        assert decode_replies('{"id": 1, "params": 2}') == [{"id": 1, "params": 2}]

    def test_decode_array(self):
        assert decode_replies(b'[{"id": 1}, {"id": 2}]') == [{"id": 1}, {"id": 2}]

    def test_decode_scalar_raises(self):
        with pytest.raises(ValueError):
            decode_replies("42")

    def test_make_error(self):
        assert make_error(5, INVALID_PARAMS, "bad") == {
            "jsonrpc": "2.0",
            "error": {"code": -32602, "message": "bad"},
            "id": 5,
        }
