import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quickdesign.api.routes import design
from quickdesign.core.config import settings
from quickdesign.core.errors import DesignError
from quickdesign.core.messages import get_message
from quickdesign.services.renderer_service import browser_manager

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 应用启动时执行
    await browser_manager.start_browser()
    yield
    # 应用关闭时执行
    await browser_manager.close_browser()


app = FastAPI(title="PR Quick Design", lifespan=lifespan)

# CORS 配置，允许前端页面跨域请求
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


@app.exception_handler(DesignError)
async def design_error_handler(request: Request, exc: DesignError):
    """所有可预期错误统一转换为前端的阻塞弹窗提示。"""
    if exc.status_code >= 500:
        logger.error("%s %s 失败: %s", request.method, request.url.path, exc)
    else:
        logger.warning("%s %s 被拒绝: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=get_message(exc.message_key))


# 注册路由
app.include_router(design.router, prefix="/api")


@app.get("/")
def root():
    return {"message": "PR Quick Design backend is running"}
