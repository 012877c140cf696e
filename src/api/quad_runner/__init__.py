"""
内部ヘルパ群（API 非公開）。

どこで: `api.quad_runner`
何を: `api.quad.run_quad` の補助（設定解決の純粋関数/ウィンドウ・GL 初期化ヘルパ）。
なぜ: `run_quad` 本体を配線だけの薄い関数に保つため。
"""

from __future__ import annotations

__all__: list[str] = []
