from dataclasses import dataclass

from quickdesign.schemas.design import BackgroundPattern

# 纯白背景显得发白，统一替换为浅灰
WHITE = "#FFFFFF"
LIGHT_GRAY = "#F3F4F6"


@dataclass(frozen=True)
class BackgroundFill:
    """画布背景的具体填充方式。gradient 只使用 background 简写，其余使用底色加图层。"""
    background_color: str | None = None
    background_image: str | None = None
    background_size: str | None = None
    background: str | None = None

    def to_css(self) -> str:
        declarations = []
        if self.background is not None:
            declarations.append(f"background: {self.background};")
        if self.background_color is not None:
            declarations.append(f"background-color: {self.background_color};")
        if self.background_image is not None:
            declarations.append(f"background-image: {self.background_image};")
        if self.background_size is not None:
            declarations.append(f"background-size: {self.background_size};")
        return " ".join(declarations)


def base_color(background_color: str) -> str:
    return LIGHT_GRAY if background_color.strip().upper() == WHITE else background_color


def render_pattern(pattern: BackgroundPattern | str, accent_color: str, background_color: str) -> BackgroundFill:
    """
    根据底纹种类和两种颜色计算背景填充。
    强调色必须是 #RRGGBB 形式，后面追加两位十六进制透明度。
    """
    color = accent_color
    base = base_color(background_color)

    try:
        pattern = BackgroundPattern(pattern)
    except ValueError:
        pattern = BackgroundPattern.SOLID

    if pattern is BackgroundPattern.DOTS:
        return BackgroundFill(
            background_color=base,
            background_image=f"radial-gradient({color}33 2px, transparent 2.5px)",
            background_size="30px 30px",
        )
    if pattern is BackgroundPattern.GRID:
        return BackgroundFill(
            background_color=base,
            background_image=(
                f"linear-gradient({color}22 1px, transparent 1px), "
                f"linear-gradient(90deg, {color}22 1px, transparent 1px)"
            ),
            background_size="40px 40px",
        )
    if pattern is BackgroundPattern.LINES:
        return BackgroundFill(
            background_color=base,
            background_image=(
                f"repeating-linear-gradient(45deg, {color}11 0, {color}11 1px, transparent 0, transparent 50%)"
            ),
            background_size="20px 20px",
        )
    if pattern is BackgroundPattern.GRADIENT:
        return BackgroundFill(background=f"linear-gradient(135deg, {base} 0%, {color}22 100%)")
    if pattern is BackgroundPattern.MESH:
        return BackgroundFill(
            background_color=base,
            background_image=(
                f"radial-gradient(at 40% 20%, {color}22 0px, transparent 50%), "
                f"radial-gradient(at 80% 0%, {color}11 0px, transparent 50%), "
                f"radial-gradient(at 0% 50%, {color}11 0px, transparent 50%)"
            ),
        )
    return BackgroundFill(background_color=base)
