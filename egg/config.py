from __future__ import annotations
import os
from pathlib import Path
from typing import List


_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765


def paths_from_env(var: str) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return []
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    return paths_from_env('EGG_PRELUDE_PATH')


def get_log_level() -> str:
    return os.environ.get('EGG_LOG_LEVEL', 'WARNING').upper()


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('EGG_REPL_HOST', _DEFAULT_REPL_HOST)
    raw_port = os.environ.get('EGG_REPL_PORT')
    port = int(raw_port) if raw_port else _DEFAULT_REPL_PORT
    return host, port


def get_pprint_json() -> str | None:
    """Raw JSON text of pretty-printer options, or None when unset."""
    return os.environ.get('EGG_PPRINT_OPTIONS') or None
