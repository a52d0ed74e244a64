from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    应用配置类，用于从环境变量或 .env 文件中加载配置。
    """
    # --- 内容生成模型配置 (OpenAI 兼容接口，默认指向 Gemini) ---
    AI_CHAT_API_KEY: str
    AI_CHAT_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    AI_CHAT_MODEL: str = "gemini-2.5-flash"

    # --- 设计内容 ---
    BRAND_NAME: str = "PR Quick Design System"
    CONTENT_LANGUAGE: str = "Thai"
    FOOTER_TEXT: str = "Copyright © โดย วิทยาลัยการอาชีพบ้านผือ"

    # --- 导出与分享 ---
    # 未配置时分享视为“不支持”
    SHARE_WEBHOOK_URL: str | None = None

    LOG_LEVEL: str = "INFO"

    # model_config 用于指定 .env 文件的位置和编码
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# 创建一个全局可用的配置实例
settings = Settings()
