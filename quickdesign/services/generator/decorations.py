import random
import time

from quickdesign.core.palette import random_color
from quickdesign.schemas.design import DecorativeElement

MIN_ELEMENTS = 3
MAX_ELEMENTS = 6
BLUR_PX = 60


def generate_random_graphics(rng: random.Random | None = None) -> tuple[DecorativeElement, ...]:
    """
    随机生成 3 到 6 个柔边背景装饰图形。
    每次调用互不相关，同样的输入也会得到不同的背景。
    """
    rng = rng or random.Random()
    count = rng.randint(MIN_ELEMENTS, MAX_ELEMENTS)
    stamp = int(time.time() * 1000)

    elements = []
    for i in range(count):
        size = rng.randrange(150, 550)
        is_blob = rng.random() > 0.3
        top = rng.random() * 120 - 10  # 允许超出画布边缘，营造满铺的背景感
        left = rng.random() * 120 - 10
        color = random_color(rng)
        opacity = rng.random() * 0.5 + 0.2
        rotation = rng.random() * 360
        if is_blob:
            radius = tuple(rng.random() * 40 + 30 for _ in range(4))
        else:
            radius = (50.0, 50.0, 50.0, 50.0)

        elements.append(DecorativeElement(
            id=f"deco-{i}-{stamp}",
            kind="blob" if is_blob else "circle",
            top=top,
            left=left,
            size=size,
            color=color,
            opacity=opacity,
            rotation=rotation,
            border_radius=radius,
            blur=BLUR_PX,
            z_index=0,
        ))
    return tuple(elements)
