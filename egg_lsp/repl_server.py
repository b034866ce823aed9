from __future__ import annotations

"""
Simple TCP REPL server for Egg.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "do(define(x, 1), x)"}
- Response: {"ok": true, "result": <display string>} or {"ok": false, "error": <message>}
- Request: {"cmd": "reset"} drops every definition made so far.

One Interpreter and one session scope are kept alive so that definitions
persist across evaluations; all clients share them.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from egg.config import get_log_level, get_repl_address
from egg.debug_utils.pprint import show
from egg.errors import EggError
from egg.interpreter import Interpreter

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port
        self.interp = Interpreter(prelude=None)
        self.session = self.interp.new_session()
        # evaluation is single-threaded; clients are served one request at a time
        self._lock = threading.Lock()

    def handle_request(self, req: dict) -> dict:
        cmd = req.get("cmd")
        if cmd == "eval":
            code = req.get("code", "")
            if not isinstance(code, str):
                return {"ok": False, "error": "code must be a string"}
            with self._lock:
                try:
                    result = self.interp.run(code, self.session)
                except EggError as ex:
                    return {"ok": False, "error": str(ex)}
                except RecursionError:
                    return {"ok": False, "error": "Maximum recursion depth exceeded"}
            return {"ok": True, "result": show(result)}
        if cmd == "reset":
            with self._lock:
                self.session = self.interp.new_session()
            return {"ok": True, "result": "false"}
        return {"ok": False, "error": f"Unknown cmd: {cmd}"}

    def handle_line(self, line: bytes) -> bytes:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            resp = {"ok": False, "error": f"Invalid request: {ex}"}
        else:
            if isinstance(req, dict):
                resp = self.handle_request(req)
            else:
                resp = {"ok": False, "error": "Invalid request: expected a JSON object"}
        return (json.dumps(resp) + "\n").encode("utf-8")

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("Egg REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("Client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    conn.sendall(self.handle_line(line))
        logger.debug("Client disconnected: %s:%d", *addr)


def main() -> None:
    logging.basicConfig(level=get_log_level())
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
