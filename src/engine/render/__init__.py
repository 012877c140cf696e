"""
どこで: `engine.render` サブパッケージ。
何を: GL コンテキスト取得・シェーダ・静的クアッドメッシュ・QuadRenderer と初期化エラー型。
なぜ: 計算（core）と描画の責務を分離し、GPU リソース管理を局所化するため。
"""
