"""
どこで: `engine.render` サブパッケージ。
何を: 描画層が受け渡す値型（BlendFunc/FontDefinition/Vertex/Tex2F など）を提供。
なぜ: 描画処理と値オブジェクトの定義を分離し、入力/テキスト層から再利用するため。
"""
