from jinja2 import Environment

from quickdesign.core.config import settings
from quickdesign.schemas.design import BackgroundPattern, DecorativeElement, DesignType, GeneratedDesign
from quickdesign.services.layout_service import resolve_layout
from quickdesign.services.pattern_service import render_pattern

CANVAS_ID = "design-canvas"

# 有底纹时适当降低装饰图形的透明度，避免画面杂乱
PATTERN_OPACITY_FACTOR = 0.7

DESIGN_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
  * { box-sizing: border-box; margin: 0; }
  html, body { background: transparent; }
  body { font-family: 'Prompt', 'Noto Sans Thai', 'Sarabun', sans-serif; }
  #{{ canvas_id }} { width: {{ width }}px; height: {{ height }}px; position: relative; overflow: hidden; {{ background }} }
  .content { position: relative; height: 100%; width: 100%; z-index: 10; {{ layout.container }} }
  .emoji { {{ layout.emoji }} }
  .headline { {{ layout.headline }} }
  .subheadline { {{ layout.subheadline }} }
  .body-text { {{ layout.body }} }
  .footer { position: absolute; bottom: 0.75rem; left: 0; width: 100%; text-align: center; font-size: 10px; opacity: 0.6; font-weight: 300; pointer-events: none; }
</style>
</head>
<body>
<div id="{{ canvas_id }}">
  {% for el in decorations %}
  <div class="decoration decoration-{{ el.kind }}" data-id="{{ el.id }}" style="{{ el.style }}"></div>
  {% endfor %}
  <div class="content layout-{{ layout_style }}" style="border-color: {{ design.accent_color }}; color: {{ design.text_color }};">
    <div class="emoji emoji-{{ layout.emoji_placement }}">{{ design.emoji_icon }}</div>
    <h1 class="headline" style="color: {{ headline_color }};">{{ design.headline }}</h1>
    <h2 class="subheadline">{{ design.subheadline }}</h2>
    <p class="body-text">{{ design.body_text }}</p>
    {% if footer %}
    <div class="footer" style="color: {{ design.text_color }};">{{ footer }}</div>
    {% endif %}
  </div>
</div>
</body>
</html>
"""

_env = Environment(autoescape=True)
_template = _env.from_string(DESIGN_TEMPLATE)


def decoration_style(element: DecorativeElement, pattern: BackgroundPattern) -> str:
    opacity = element.opacity
    if pattern is not BackgroundPattern.SOLID:
        opacity *= PATTERN_OPACITY_FACTOR
    radius = " ".join(f"{r:.2f}%" for r in element.border_radius)
    return (
        f"position: absolute; top: {element.top:.2f}%; left: {element.left:.2f}%; "
        f"width: {element.size}px; height: {element.size}px; "
        f"background-color: {element.color}; opacity: {opacity:.3f}; "
        f"transform: translate(-50%, -50%) rotate({element.rotation:.1f}deg); "
        f"border-radius: {radius}; filter: blur({element.blur}px); "
        f"z-index: {element.z_index}; pointer-events: none;"
    )


def compose_design_html(design: GeneratedDesign, design_type: DesignType) -> tuple[str, int, int]:
    """
    把设计描述组合成可独立渲染的 HTML 页面。
    返回: (html_content, width, height)
    """
    layout = resolve_layout(design_type, design.layout_style)
    fill = render_pattern(design.background_pattern, design.accent_color, design.background_color)
    headline_color = design.accent_color if layout.style.headline_color == "accent" else "inherit"

    decorations = [
        {"id": el.id, "kind": el.kind, "style": decoration_style(el, design.background_pattern)}
        for el in design.decorative_elements
    ]

    html = _template.render(
        canvas_id=CANVAS_ID,
        width=layout.width,
        height=layout.height,
        background=fill.to_css(),
        layout=layout.style,
        layout_style=design.layout_style.value,
        design=design,
        headline_color=headline_color,
        decorations=decorations,
        footer=settings.FOOTER_TEXT,
    )
    return html, layout.width, layout.height
