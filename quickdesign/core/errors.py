class DesignError(Exception):
    """
    所有可预期错误的基类。
    每个子类声明 message_key（对应 messages.py 中的本地化提示）和 HTTP 状态码。
    """
    message_key = "generation_failed"
    status_code = 500


class EmptyInputError(DesignError):
    """用户输入为空或只有空白字符，未发起任何外部调用。"""
    message_key = "empty_input"
    status_code = 400


class ContentGenerationError(DesignError):
    """内容服务调用失败：网络错误、非 200、空响应或不符合约定的 JSON 结构。"""
    message_key = "generation_failed"
    status_code = 502


class ExportError(DesignError):
    """设计画布渲染为图片时失败。"""
    message_key = "export_failed"
    status_code = 500


class GenerationInProgressError(DesignError):
    message_key = "generation_in_progress"
    status_code = 409


class SessionNotFoundError(DesignError):
    message_key = "session_not_found"
    status_code = 404


class NoDesignError(DesignError):
    message_key = "no_design"
    status_code = 404
