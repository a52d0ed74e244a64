import json
import logging
import random
import re

import openai
from openai import AsyncOpenAI
from pydantic import ValidationError

from quickdesign.core.config import settings
from quickdesign.core.errors import ContentGenerationError
from quickdesign.core.palette import DEFAULT_TEXT_COLOR, PALETTE, random_color, random_pattern
from quickdesign.core.prompts import DESIGN_RESPONSE_SCHEMA, DESIGN_USER_PROMPT, SYSTEM_PROMPT
from quickdesign.schemas.design import DesignContent, DesignType, GeneratedDesign, LayoutStyle
from quickdesign.services.generator.decorations import generate_random_graphics

logger = logging.getLogger(__name__)


def create_client() -> AsyncOpenAI:
    return AsyncOpenAI(
        api_key=settings.AI_CHAT_API_KEY,
        base_url=settings.AI_CHAT_BASE_URL,
    )


def build_design_prompt(text: str, design_type: DesignType) -> str:
    """把用户文本和设计类型拼成发给内容服务的指令。"""
    return DESIGN_USER_PROMPT.format(
        brand=settings.BRAND_NAME,
        design_type=design_type.value,
        text=text,
        palette=", ".join(PALETTE),
        layout_styles=", ".join(f"'{s.value}'" for s in LayoutStyle),
        language=settings.CONTENT_LANGUAGE,
    )


def parse_design_content(raw: str | None) -> DesignContent:
    """
    从内容服务的原始回复中取出 JSON 对象并按约定结构校验。
    任何一步失败都抛出 ContentGenerationError，不返回部分结果。
    """
    if not raw:
        raise ContentGenerationError("内容服务返回了空内容。")

    match = re.search(r"\{.*\}", raw, re.DOTALL)
    if not match:
        raise ContentGenerationError("在内容服务的回复中未找到有效的 JSON 对象。")

    try:
        payload = json.loads(match.group(0))
        return DesignContent.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ContentGenerationError(f"内容服务的回复不符合约定结构: {e}") from e


async def request_design_content(text: str, design_type: DesignType) -> DesignContent:
    client = create_client()
    try:
        response = await client.chat.completions.create(
            model=settings.AI_CHAT_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_design_prompt(text, design_type)},
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {"name": "design", "schema": DESIGN_RESPONSE_SCHEMA},
            },
        )
    except openai.OpenAIError as e:
        raise ContentGenerationError(f"调用内容服务失败: {e}") from e

    if not response.choices:
        raise ContentGenerationError("内容服务没有返回任何候选结果。")
    return parse_design_content(response.choices[0].message.content)


def assemble_design(content: DesignContent, rng: random.Random | None = None) -> GeneratedDesign:
    """
    在服务返回的内容上叠加本地随机性。
    强调色总是重新从色板中抽取，服务选择的颜色被丢弃，保证每次生成都有视觉差异。
    """
    return GeneratedDesign(
        headline=content.headline,
        subheadline=content.subheadline,
        body_text=content.body_text,
        accent_color=random_color(rng),
        background_color=content.background_color,
        text_color=content.text_color or DEFAULT_TEXT_COLOR,
        emoji_icon=content.emoji_icon,
        layout_style=content.layout_style,
        background_pattern=random_pattern(rng),
        decorative_elements=generate_random_graphics(rng),
    )


async def generate_design_content(text: str, design_type: DesignType) -> GeneratedDesign:
    """调用内容服务并返回一份完整的设计。输入是否为空由调用方负责校验。"""
    logger.info("向内容服务请求设计内容: type=%s, text=%r", design_type.value, text)
    content = await request_design_content(text, design_type)
    design = assemble_design(content)
    logger.info(
        "设计内容生成成功: layout=%s, pattern=%s, decorations=%d",
        design.layout_style.value,
        design.background_pattern.value,
        len(design.decorative_elements),
    )
    return design
