from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DesignType(str, Enum):
    POSTER = "Poster"
    NAMECARD = "Name Card"
    BANNER = "Web Banner"
    SOCIAL = "Social Media Post"


class LayoutStyle(str, Enum):
    MINIMAL = "minimal"
    BOLD = "bold"
    CREATIVE = "creative"
    MODERN = "modern"


class BackgroundPattern(str, Enum):
    SOLID = "solid"
    DOTS = "dots"
    GRID = "grid"
    LINES = "lines"
    GRADIENT = "gradient"
    MESH = "mesh"


class CamelModel(BaseModel):
    """对外 JSON 统一使用 camelCase 字段名，与前端保持一致。"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DecorativeElement(CamelModel):
    """背景中的一个柔边装饰图形（blob 或 circle）。"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    kind: Literal["blob", "circle"]
    top: float  # 百分比
    left: float  # 百分比
    size: int  # 像素边长
    color: str
    opacity: float
    rotation: float  # 角度
    border_radius: tuple[float, float, float, float]  # 四个角的百分比
    blur: int = 60
    z_index: int = 0


class DesignContent(CamelModel):
    """内容服务返回的结构化结果，使用前必须校验。"""
    headline: str
    subheadline: str
    body_text: str
    accent_color: str
    background_color: str
    text_color: str | None = None
    emoji_icon: str
    layout_style: LayoutStyle


class GeneratedDesign(CamelModel):
    """一次生成的完整设计，生成后不再修改。"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    headline: str
    subheadline: str
    body_text: str
    accent_color: str
    background_color: str
    text_color: str
    emoji_icon: str
    layout_style: LayoutStyle
    background_pattern: BackgroundPattern
    decorative_elements: tuple[DecorativeElement, ...]


class GenerateRequest(CamelModel):
    text: str = ""  # 缺省时与空白输入一样由会话层拒绝
    design_type: DesignType = DesignType.POSTER


class SessionState(CamelModel):
    session_id: str
    selected_type: DesignType
    is_generating: bool
    current_design: GeneratedDesign | None = None


class Notification(CamelModel):
    """前端以阻塞弹窗展示的提示信息。"""
    icon: Literal["success", "error", "warning", "info"]
    title: str
    text: str


class ShareOutcome(CamelModel):
    status: Literal["shared", "unsupported", "failed"]
    notification: Notification | None = None


class DesignOptions(CamelModel):
    design_types: list[str] = Field(default_factory=lambda: [t.value for t in DesignType])
    layout_styles: list[str] = Field(default_factory=lambda: [s.value for s in LayoutStyle])
    background_patterns: list[str] = Field(default_factory=lambda: [p.value for p in BackgroundPattern])
    palette: list[str]
