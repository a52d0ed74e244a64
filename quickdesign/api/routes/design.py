import logging
import time

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from quickdesign.core.config import settings
from quickdesign.core.errors import ExportError
from quickdesign.core.palette import PALETTE
from quickdesign.schemas.design import DesignOptions, GeneratedDesign, GenerateRequest, SessionState, ShareOutcome
from quickdesign.services.composer_service import compose_design_html
from quickdesign.services.renderer_service import render_html_to_image
from quickdesign.services.session_service import DesignSession, session_store
from quickdesign.services.share_service import share_image, unsupported_outcome
from quickdesign.services.storage_service import export_filename

logger = logging.getLogger(__name__)

router = APIRouter()


async def export_session_design(session: DesignSession) -> bytes:
    """把会话当前的设计渲染成 PNG。"""
    design, design_type = session.require_design()
    html_content, width, height = compose_design_html(design, design_type)
    start_time = time.time()
    image_bytes = await render_html_to_image(html_content, width, height)
    logger.info("设计画布渲染耗时: %.2f秒", time.time() - start_time)
    return image_bytes


@router.get("/options", response_model=DesignOptions)
def get_options():
    """前端可选的设计类型、版式、底纹和色板。"""
    return DesignOptions(palette=list(PALETTE))


@router.post("/sessions", response_model=SessionState, status_code=201)
def create_session():
    return session_store.create().state()


@router.get("/sessions/{session_id}", response_model=SessionState)
def get_session(session_id: str):
    return session_store.get(session_id).state()


@router.delete("/sessions/{session_id}", status_code=204)
def discard_session(session_id: str):
    session_store.discard(session_id)
    return Response(status_code=204)


@router.post("/sessions/{session_id}/generate", response_model=GeneratedDesign)
async def generate_design(session_id: str, gen_request: GenerateRequest):
    """
    接收用户文本和设计类型，生成新的设计并替换会话中的当前设计。
    """
    session = session_store.get(session_id)
    return await session.generate(gen_request.text, gen_request.design_type)


@router.get("/sessions/{session_id}/preview", response_class=HTMLResponse)
def preview_design(session_id: str):
    design, design_type = session_store.get(session_id).require_design()
    html_content, _, _ = compose_design_html(design, design_type)
    return HTMLResponse(content=html_content)


@router.get("/sessions/{session_id}/export")
async def export_design(session_id: str):
    """渲染当前设计并以 PNG 附件形式下载。"""
    session = session_store.get(session_id)
    image_bytes = await export_session_design(session)
    filename = export_filename()
    return Response(
        content=image_bytes,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/sessions/{session_id}/share", response_model=ShareOutcome)
async def share_design(session_id: str):
    """
    尽力而为的分享：导出或分享失败都只记录日志，返回 failed。
    """
    session = session_store.get(session_id)
    session.require_design()
    if not settings.SHARE_WEBHOOK_URL:
        return unsupported_outcome()
    try:
        image_bytes = await export_session_design(session)
    except ExportError as e:
        logger.error("分享前导出图片失败: %s", e)
        return ShareOutcome(status="failed")
    return await share_image(image_bytes, settings.SHARE_WEBHOOK_URL)
