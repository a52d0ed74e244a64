import logging
import time
import uuid
from dataclasses import dataclass

from quickdesign.core.errors import EmptyInputError, GenerationInProgressError, NoDesignError, SessionNotFoundError
from quickdesign.schemas.design import DesignType, GeneratedDesign, SessionState
from quickdesign.services.generator.content import generate_design_content

logger = logging.getLogger(__name__)


@dataclass
class DesignSession:
    """
    一个设计会话对应前端的一个视图实例。
    同一时间只保留一份设计，生成成功时整体替换，失败时保持原样。
    """
    session_id: str
    selected_type: DesignType = DesignType.POSTER
    current_design: GeneratedDesign | None = None
    design_type: DesignType | None = None  # 当前设计生成时使用的类型
    is_generating: bool = False
    last_seen: float = 0.0  # 最近一次访问的单调时钟读数

    def state(self) -> SessionState:
        return SessionState(
            session_id=self.session_id,
            selected_type=self.selected_type,
            is_generating=self.is_generating,
            current_design=self.current_design,
        )

    def require_design(self) -> tuple[GeneratedDesign, DesignType]:
        if self.current_design is None or self.design_type is None:
            raise NoDesignError(f"会话 {self.session_id} 还没有设计。")
        return self.current_design, self.design_type

    async def generate(self, text: str, design_type: DesignType) -> GeneratedDesign:
        if not text.strip():
            raise EmptyInputError("输入内容为空。")
        # 单线程事件循环中，检查与置位之间没有挂起点，无需加锁
        if self.is_generating:
            raise GenerationInProgressError(f"会话 {self.session_id} 已有生成任务在进行中。")

        self.is_generating = True
        self.selected_type = design_type
        start_time = time.time()
        try:
            design = await generate_design_content(text, design_type)
        finally:
            self.is_generating = False

        self.current_design = design
        self.design_type = design_type
        logger.info("会话 %s 生成设计耗时: %.2f秒", self.session_id, time.time() - start_time)
        return design


# 会话空闲超过该秒数即被回收；前端关闭页面时服务端收不到通知
SESSION_TTL_S = 30 * 60
MAX_SESSIONS = 1000


class SessionStore:
    """
    进程内的会话表，不做持久化。
    每次 create / get 时回收空闲超时的会话，超过容量时再淘汰最久未访问的会话。
    正在生成中的会话不会被回收。
    """

    def __init__(self, ttl_s: float = SESSION_TTL_S, max_sessions: int = MAX_SESSIONS, clock=time.monotonic):
        self._sessions: dict[str, DesignSession] = {}
        self.ttl_s = ttl_s
        self.max_sessions = max_sessions
        self._clock = clock

    def _evict(self, now: float) -> None:
        expired = [
            sid for sid, s in self._sessions.items()
            if not s.is_generating and now - s.last_seen >= self.ttl_s
        ]
        for sid in expired:
            del self._sessions[sid]

        overflow = len(self._sessions) - self.max_sessions
        if overflow > 0:
            idle = sorted(
                (s for s in self._sessions.values() if not s.is_generating),
                key=lambda s: s.last_seen,
            )
            for s in idle[:overflow]:
                del self._sessions[s.session_id]
            expired.extend(s.session_id for s in idle[:overflow])

        if expired:
            logger.info("回收了 %d 个空闲会话，剩余 %d 个", len(expired), len(self._sessions))

    def create(self, selected_type: DesignType = DesignType.POSTER) -> DesignSession:
        now = self._clock()
        session = DesignSession(session_id=uuid.uuid4().hex, selected_type=selected_type, last_seen=now)
        self._sessions[session.session_id] = session
        self._evict(now)
        return session

    def get(self, session_id: str) -> DesignSession:
        now = self._clock()
        self._evict(now)
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(f"会话 {session_id} 不存在。") from None
        session.last_seen = now
        return session

    def discard(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(f"会话 {session_id} 不存在。")

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore()
