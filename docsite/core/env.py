from __future__ import annotations

import os
from pathlib import Path


def load_env(path: Path | None = None) -> None:
    """
    Populate os.environ from the project's dotenv files.

    ``.env`` is read first and never overrides variables already present.
    ``.env.local`` (only when no explicit path is given) may override values
    coming from ``.env`` but never a variable exported by the shell.
    """
    shell_keys = set(os.environ)

    env_path = path or _default_env_path()
    if env_path.exists():
        _apply_env_file(env_path, allow_override=False)

    if path is None:
        local_path = env_path.with_name(".env.local")
        if local_path.exists():
            _apply_env_file(local_path, allow_override=True, protected_keys=shell_keys)


def _apply_env_file(
    env_path: Path,
    *,
    allow_override: bool,
    protected_keys: set[str] | None = None,
) -> None:
    protected = protected_keys or set()
    for key, value in _iter_pairs(env_path):
        if key in protected:
            continue
        if not allow_override and key in os.environ:
            continue
        os.environ[key] = value


def _iter_pairs(env_path: Path):
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):]
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            yield key, _unquote(value.strip())


def _default_env_path() -> Path:
    return Path(__file__).resolve().parents[2] / ".env"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


__all__ = ["load_env"]
