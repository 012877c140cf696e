"""
どこで: `common.env`
何を: 環境変数を bool/str として読むヘルパ。
なぜ: `os.getenv` と不正値ガードを settings 側に散らさないため。
"""

from __future__ import annotations

import os
from typing import Optional

_TRUE_WORDS = {"true", "t", "yes", "y", "on"}
_FALSE_WORDS = {"false", "f", "no", "n", "off"}


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false, on/off を許容）。

    未設定・解釈不能な値は `default` を返す。
    """
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    try:
        return int(s) != 0
    except ValueError:
        pass
    if s in _TRUE_WORDS:
        return True
    if s in _FALSE_WORDS:
        return False
    return bool(default)


def env_str(name: str, default: str = "", *, choices: Optional[set[str]] = None) -> str:
    """文字列環境変数を取得。前後空白は除去し、`choices` 指定時は大文字化して照合する。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip()
    if choices is None:
        return s or default
    s = s.upper()
    return s if s in choices else default


__all__ = ["env_bool", "env_str"]
