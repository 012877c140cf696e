"""
どこで: `engine.core` サブパッケージ。
何を: フレーム駆動（Tickable/FrameClock）・シーン状態・4x4 行列・描画ウィンドウを提供。
なぜ: 時間と変換の計算を描画（`engine.render`）から分離し、GPU なしでテストできるようにするため。
"""
