from quickdesign.schemas.design import DesignType

# 每种设计类型对应的画布尺寸 (宽, 高)，单位为 CSS 像素
CANVAS_SIZES = {
    DesignType.POSTER: (500, 700),
    DesignType.NAMECARD: (500, 300),
    DesignType.BANNER: (800, 300),
    DesignType.SOCIAL: (500, 500),
}


def canvas_dimensions(design_type: DesignType | str) -> tuple[int, int]:
    """根据设计类型返回画布尺寸，无法识别的类型按海报处理。"""
    try:
        design_type = DesignType(design_type)
    except ValueError:
        return CANVAS_SIZES[DesignType.POSTER]
    return CANVAS_SIZES[design_type]
