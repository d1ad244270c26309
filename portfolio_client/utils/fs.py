# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def read_json_dict(path: str | Path) -> dict[str, Any] | None:
    """Load a JSON object from ``path``; ``None`` when the file does not exist."""
    try:
        with open(path, encoding="utf-8") as f:
            loaded = json.load(f)
    except FileNotFoundError:
        return None
    if not isinstance(loaded, dict):
        raise ValueError(f"expected a JSON object in {path}")
    return loaded


def write_json_atomic(path: str | Path, obj: Any, *, mode: int | None = None) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    # one temp file per writer; concurrent saves resolve last-write-wins
    tmp: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=p.parent, prefix=p.name + ".", suffix=".tmp", delete=False
        ) as f:
            tmp = Path(f.name)
            json.dump(obj, f, ensure_ascii=False, indent=0)
            f.flush()
            os.fsync(f.fileno())
        if mode is not None:
            os.chmod(tmp, mode)
        os.replace(tmp, p)
    except BaseException:
        if tmp is not None:
            tmp.unlink(missing_ok=True)
        raise
