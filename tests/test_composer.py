import random

from conftest import VALID_CONTENT
from quickdesign.schemas.design import BackgroundPattern, DesignContent, DesignType
from quickdesign.services.composer_service import CANVAS_ID, compose_design_html, decoration_style
from quickdesign.services.generator.content import assemble_design


def _design(**overrides):
    content = DesignContent.model_validate(dict(VALID_CONTENT, **overrides.pop("content", {})))
    design = assemble_design(content, random.Random(11))
    return design.model_copy(update=overrides)


def test_canvas_uses_type_dimensions():
    html, width, height = compose_design_html(_design(), DesignType.BANNER)
    assert (width, height) == (800, 300)
    assert f'id="{CANVAS_ID}"' in html
    assert "width: 800px; height: 300px;" in html


def test_bold_headline_uses_accent_color():
    design = _design(accent_color="#B7A3E3")
    html, _, _ = compose_design_html(design, DesignType.POSTER)
    assert '<h1 class="headline" style="color: #B7A3E3;">' in html


def test_other_styles_inherit_text_color():
    for style in ("minimal", "creative", "modern"):
        design = _design(content={"layoutStyle": style})
        html, _, _ = compose_design_html(design, DesignType.POSTER)
        assert '<h1 class="headline" style="color: inherit;">' in html
        assert f"color: {design.text_color};" in html


def test_text_is_escaped():
    design = _design(headline="<script>alert(1)</script>")
    html, _, _ = compose_design_html(design, DesignType.POSTER)
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_every_decoration_is_rendered():
    design = _design()
    html, _, _ = compose_design_html(design, DesignType.SOCIAL)
    assert html.count('class="decoration decoration-') == len(design.decorative_elements)
    for el in design.decorative_elements:
        assert f'data-id="{el.id}"' in html


def test_decorations_fade_over_patterns():
    el = _design().decorative_elements[0]
    solid = decoration_style(el, BackgroundPattern.SOLID)
    dots = decoration_style(el, BackgroundPattern.DOTS)
    assert f"opacity: {el.opacity:.3f};" in solid
    assert f"opacity: {el.opacity * 0.7:.3f};" in dots
    assert "filter: blur(60px)" in solid
    assert "translate(-50%, -50%)" in solid


def test_footer_is_present():
    html, _, _ = compose_design_html(_design(), DesignType.POSTER)
    assert "วิทยาลัยการอาชีพบ้านผือ" in html
