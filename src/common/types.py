"""
どこで: `common` の型定義。
何を: Vec2/Vec3/RGBA の軽量エイリアス（組込みジェネリックで記述）。
なぜ: 値型・色ユーティリティの双方から循環なく参照するため。
"""

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
RGBA = tuple[float, float, float, float]


__all__ = ["Vec2", "Vec3", "RGBA"]
