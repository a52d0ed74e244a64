from dataclasses import dataclass
from typing import Literal

from quickdesign.schemas.design import DesignType, LayoutStyle
from quickdesign.utils.dimensions import canvas_dimensions


@dataclass(frozen=True)
class LayoutStyleBundle:
    """一种版式风格下各个元素的 CSS 声明。"""
    container: str
    headline: str
    subheadline: str
    body: str
    emoji: str
    # inline: emoji 位于标题上方的文档流中；corner: 绝对定位在角落
    emoji_placement: Literal["inline", "corner"]
    # accent: 标题使用强调色；inherit: 继承文字颜色
    headline_color: Literal["accent", "inherit"]


@dataclass(frozen=True)
class Layout:
    width: int
    height: int
    style: LayoutStyleBundle


MINIMAL = LayoutStyleBundle(
    container=(
        "display: flex; flex-direction: column; justify-content: center; "
        "align-items: flex-start; padding: 3rem;"
    ),
    headline="font-size: 2.25rem; font-weight: 700; margin-bottom: 0.75rem; letter-spacing: 0.025em;",
    subheadline=(
        "font-size: 1.125rem; text-transform: uppercase; letter-spacing: 0.1em; "
        "margin-bottom: 2.5rem; opacity: 0.7;"
    ),
    body=(
        "font-size: 1rem; line-height: 2rem; border-left: 2px solid currentColor; "
        "padding-left: 1.5rem; max-width: 28rem;"
    ),
    emoji=(
        "font-size: 3rem; margin-bottom: 2rem; background: rgba(255, 255, 255, 0.6); "
        "padding: 1rem; border-radius: 1rem; box-shadow: 0 1px 2px rgba(0, 0, 0, 0.05); "
        "backdrop-filter: blur(4px);"
    ),
    emoji_placement="inline",
    headline_color="inherit",
)

BOLD = LayoutStyleBundle(
    container=(
        "display: flex; flex-direction: column; justify-content: center; align-items: center; "
        "text-align: center; padding: 2rem; border-width: 16px; border-style: solid;"
    ),
    headline=(
        "font-size: 3rem; font-weight: 900; text-transform: uppercase; letter-spacing: -0.05em; "
        "margin-bottom: 1rem; filter: drop-shadow(0 1px 1px rgba(0, 0, 0, 0.05));"
    ),
    subheadline=(
        "font-size: 1.5rem; font-weight: 700; opacity: 0.9; margin-bottom: 1.5rem; "
        "background: rgba(255, 255, 255, 0.4); padding: 0.5rem 1.5rem; border-radius: 9999px; "
        "backdrop-filter: blur(4px);"
    ),
    body="font-size: 1.125rem; font-weight: 500; line-height: 1.625; max-width: 90%;",
    emoji="font-size: 6rem; margin-bottom: 1.5rem; filter: drop-shadow(0 10px 8px rgba(0, 0, 0, 0.04));",
    emoji_placement="inline",
    headline_color="accent",
)

CREATIVE = LayoutStyleBundle(
    container="display: flex; flex-direction: column; justify-content: space-between; padding: 2.5rem;",
    headline=(
        "font-size: 3rem; font-weight: 800; margin-bottom: 1rem; transform: rotate(-2deg); "
        "transform-origin: bottom left; line-height: 1.25;"
    ),
    subheadline=(
        "font-size: 1.25rem; font-style: italic; margin-bottom: auto; "
        "border-left: 4px solid currentColor; padding-left: 1rem; opacity: 0.8;"
    ),
    body=(
        "font-size: 1.125rem; font-weight: 500; background: rgba(255, 255, 255, 0.7); padding: 1.5rem; "
        "border-radius: 1rem; backdrop-filter: blur(12px); "
        "box-shadow: 0 20px 25px -5px rgba(0, 0, 0, 0.1); margin-top: 2rem; transform: rotate(1deg);"
    ),
    emoji="font-size: 4.5rem; position: absolute; top: 2rem; right: 2rem; transform: rotate(12deg);",
    emoji_placement="corner",
    headline_color="inherit",
)

MODERN = LayoutStyleBundle(
    container=(
        "display: flex; flex-direction: column; align-items: flex-start; justify-content: flex-end; "
        "padding: 3rem; text-align: left;"
    ),
    headline="font-size: 3.75rem; font-weight: 700; margin-bottom: 1rem; line-height: 1; letter-spacing: -0.025em;",
    subheadline="font-size: 1.5rem; font-weight: 300; margin-bottom: 2rem; opacity: 0.8;",
    body=(
        "font-size: 1rem; font-weight: 400; line-height: 1.75rem; border-top: 2px solid currentColor; "
        "padding-top: 1.5rem; width: 100%; max-width: 85%;"
    ),
    emoji=(
        "font-size: 3.75rem; position: absolute; top: 3rem; right: 3rem; opacity: 0.8; "
        "background: rgba(255, 255, 255, 0.3); padding: 1rem; border-radius: 9999px;"
    ),
    emoji_placement="corner",
    headline_color="inherit",
)

LAYOUT_BUNDLES = {
    LayoutStyle.MINIMAL: MINIMAL,
    LayoutStyle.BOLD: BOLD,
    LayoutStyle.CREATIVE: CREATIVE,
    LayoutStyle.MODERN: MODERN,
}


def resolve_style(layout_style: LayoutStyle | str) -> LayoutStyleBundle:
    """无法识别的版式风格回退到 minimal。"""
    try:
        return LAYOUT_BUNDLES[LayoutStyle(layout_style)]
    except ValueError:
        return MINIMAL


def resolve_layout(design_type: DesignType | str, layout_style: LayoutStyle | str) -> Layout:
    """
    设计类型只决定画布尺寸，版式风格决定内容结构，两者互不影响。
    """
    width, height = canvas_dimensions(design_type)
    return Layout(width=width, height=height, style=resolve_style(layout_style))
