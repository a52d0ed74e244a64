import logging

import httpx

from quickdesign.core.messages import SHARE_TEXT, SHARE_TITLE, get_message
from quickdesign.schemas.design import Notification, ShareOutcome

logger = logging.getLogger(__name__)


def unsupported_outcome() -> ShareOutcome:
    """未配置分享目标：这是提示信息，不是错误。"""
    return ShareOutcome(status="unsupported", notification=Notification(**get_message("share_unsupported")))


async def share_image(image_bytes: bytes, share_url: str) -> ShareOutcome:
    """
    把导出的 PNG 作为文件连同固定标题和说明提交给分享目标。
    分享失败只记录日志，不抛出异常。
    """
    files = {"files": ("design.png", image_bytes, "image/png")}
    data = {"title": SHARE_TITLE, "text": SHARE_TEXT}
    async with httpx.AsyncClient() as client:
        try:
            response = await client.post(share_url, data=data, files=files)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("分享失败: %s", e)
            return ShareOutcome(status="failed")

    logger.info("设计图片已分享到 %s", share_url)
    return ShareOutcome(status="shared")
