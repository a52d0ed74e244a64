import asyncio
import logging

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from quickdesign.core.errors import ExportError
from quickdesign.services.composer_service import CANVAS_ID

logger = logging.getLogger(__name__)

# 导出参数：2 倍像素密度，PNG 无损（相当于质量系数 1.0）
PIXEL_RATIO = 2


class BrowserManager:
    """
    一个管理 Playwright 浏览器实例的单例类，以在请求之间复用浏览器。
    """
    def __init__(self):
        self.playwright: Playwright | None = None
        self.browser: Browser | None = None
        self._started = False
        self._lock = asyncio.Lock()

    async def _ensure_browser_started(self):
        """确保浏览器已启动（延迟启动）"""
        if self._started and self.browser:
            return

        async with self._lock:
            # 双重检查
            if self._started and self.browser:
                return

            logger.info("正在启动全局浏览器实例...")
            try:
                self.playwright = await async_playwright().start()
                self.browser = await self.playwright.chromium.launch()
                self._started = True
                logger.info("全局浏览器实例已启动。")
            except Exception:
                logger.exception("启动浏览器时出错")
                # 清理部分初始化的资源，清理失败不能掩盖启动错误
                if self.playwright:
                    try:
                        await self.playwright.stop()
                    except Exception as e:
                        logger.warning("清理 Playwright 时出错: %s", e)
                self.browser = None
                self.playwright = None
                raise

    async def start_browser(self):
        """在应用启动时调用，初始化浏览器。"""
        await self._ensure_browser_started()

    async def close_browser(self):
        """在应用关闭时调用，清理资源。"""
        if not self._started:
            return

        # 设置超时，避免关闭操作无限阻塞
        if self.browser:
            try:
                await asyncio.wait_for(self.browser.close(), timeout=5.0)
            except asyncio.TimeoutError:
                logger.warning("关闭浏览器超时")
            except PlaywrightError as e:
                logger.warning("关闭浏览器时出错: %s", e)
        if self.playwright:
            try:
                await asyncio.wait_for(self.playwright.stop(), timeout=5.0)
            except asyncio.TimeoutError:
                logger.warning("停止 Playwright 超时")
            except PlaywrightError as e:
                logger.warning("停止 Playwright 时出错: %s", e)

        self._started = False
        self.browser = None
        self.playwright = None
        logger.info("全局浏览器实例已关闭。")

    async def new_context(self, width: int, height: int) -> BrowserContext:
        """为每次导出创建独立的浏览器上下文，禁用缓存并按 2 倍像素密度渲染。"""
        await self._ensure_browser_started()
        if not self.browser:
            raise ExportError("浏览器实例尚未启动。")
        return await self.browser.new_context(
            viewport={"width": width, "height": height},
            device_scale_factor=PIXEL_RATIO,
            extra_http_headers={"Cache-Control": "no-cache", "Pragma": "no-cache"},
        )


# 创建一个全局的浏览器管理器实例
browser_manager = BrowserManager()


async def render_html_to_image(html_content: str, width: int, height: int) -> bytes:
    """
    使用 Playwright 将设计画布渲染成 PNG 图片。
    任何浏览器侧的失败都转换为 ExportError。
    """
    try:
        context = await browser_manager.new_context(width, height)
    except PlaywrightError as e:
        raise ExportError(f"无法创建浏览器上下文: {e}") from e

    try:
        page = await context.new_page()
        await page.set_content(html_content)

        # 给所有内嵌图片追加时间戳参数，绕过缓存
        await page.evaluate("""
            () => {
                const stamp = Date.now();
                document.querySelectorAll("img").forEach(img => {
                    if (!img.src || img.src.startsWith("data:")) return;
                    const sep = img.src.includes("?") ? "&" : "?";
                    img.src = img.src + sep + "cacheBust=" + stamp;
                });
            }
        """)
        await page.wait_for_load_state("networkidle")

        # 显式等待所有图片加载完成
        await page.evaluate("""
            async () => {
                const images = Array.from(document.querySelectorAll("img"));
                await Promise.all(images.map(img => {
                    if (img.complete) return;
                    return new Promise(resolve => {
                        img.onload = resolve;
                        img.onerror = resolve;
                    });
                }));
            }
        """)

        return await page.locator(f"#{CANVAS_ID}").screenshot(type="png")
    except PlaywrightError as e:
        raise ExportError(f"渲染设计画布失败: {e}") from e
    finally:
        await context.close()  # 每次导出后关闭上下文，而不是整个浏览器
