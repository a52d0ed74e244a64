import time


def export_filename(timestamp_ms: int | None = None) -> str:
    """导出文件名：pr-quick-design-<毫秒时间戳>.png"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"pr-quick-design-{timestamp_ms}.png"
