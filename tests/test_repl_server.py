import json

import pytest

from egg_lsp.repl_server import ReplServer


@pytest.fixture
def server():
    return ReplServer(host="127.0.0.1", port=0)


def test_eval_persists_definitions(server):
    assert server.handle_request({"cmd": "eval", "code": "define(x, 20)"}) == {"ok": True, "result": "20"}
    assert server.handle_request({"cmd": "eval", "code": "+(x, 1)"}) == {"ok": True, "result": "21"}


def test_eval_error(server):
    resp = server.handle_request({"cmd": "eval", "code": "nope"})
    assert resp["ok"] is False
    assert resp["error"].startswith("Undefined binding: nope")


def test_eval_code_must_be_string(server):
    assert server.handle_request({"cmd": "eval", "code": 5})["ok"] is False


def test_reset_drops_definitions(server):
    server.handle_request({"cmd": "eval", "code": "define(x, 1)"})
    assert server.handle_request({"cmd": "reset"})["ok"] is True
    assert server.handle_request({"cmd": "eval", "code": "x"})["ok"] is False


def test_unknown_cmd(server):
    assert server.handle_request({"cmd": "fly"}) == {"ok": False, "error": "Unknown cmd: fly"}


def test_handle_line_round_trip(server):
    out = server.handle_line(b'{"cmd": "eval", "code": "array(1, \\"a\\")"}')
    assert out.endswith(b"\n")
    assert json.loads(out) == {"ok": True, "result": '[1, "a"]'}


@pytest.mark.parametrize("line", [b"not json", b"[1, 2]", b"\xff"])
def test_handle_line_invalid(server, line):
    resp = json.loads(server.handle_line(line))
    assert resp["ok"] is False
    assert resp["error"].startswith("Invalid request")


def test_address_from_env(monkeypatch):
    monkeypatch.setenv("EGG_REPL_PORT", "9999")
    s = ReplServer()
    assert (s.host, s.port) == ("127.0.0.1", 9999)
