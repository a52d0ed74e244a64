import random

from quickdesign.schemas.design import BackgroundPattern

# 品牌固定色板：所有强调色与装饰图形只能取自这四种颜色
PALETTE: tuple[str, ...] = ("#FF8F8F", "#FFF1CB", "#C2E2FA", "#B7A3E3")

# 服务端未返回文字颜色时使用的深灰色
DEFAULT_TEXT_COLOR = "#1F2937"


def random_color(rng: random.Random | None = None) -> str:
    """从色板中均匀随机取一个颜色。"""
    return (rng or random).choice(PALETTE)


def random_pattern(rng: random.Random | None = None) -> BackgroundPattern:
    """均匀随机选择一种背景底纹。"""
    return (rng or random).choice(list(BackgroundPattern))
