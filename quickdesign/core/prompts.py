# --- 用于生成设计内容的系统提示 ---
SYSTEM_PROMPT = """
You are a senior graphic designer. You answer with a single JSON object that matches the schema you are given, and nothing else.
"""

# --- 用于生成设计内容的用户输入模板 ---
# palette 为逗号分隔的色板，language 为正文使用的语言
DESIGN_USER_PROMPT = """
Act as a senior graphic designer for "{brand}".
Generate a creative design structure for a "{design_type}" based on the text: "{text}".

STRICT DESIGN RULES:
1. Use ONLY these colors for accents/graphics: {palette}.
2. Background should be White (#FFFFFF), very light Gray (#F8F9FA), or a very light tint of the palette.
3. Select a 'layoutStyle' from: {layout_styles}.
4. Ensure 'textColor' has high contrast with the background (usually dark gray or black).
5. Content must be in {language}.

Output valid JSON only.
"""

# --- 内容服务返回结果的 JSON Schema ---
# textColor 为可选字段，其余字段必填
DESIGN_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "headline": {"type": "string"},
        "subheadline": {"type": "string"},
        "bodyText": {"type": "string"},
        "accentColor": {"type": "string"},
        "backgroundColor": {"type": "string"},
        "textColor": {"type": "string"},
        "emojiIcon": {"type": "string"},
        "layoutStyle": {"type": "string", "enum": ["minimal", "bold", "creative", "modern"]},
    },
    "required": [
        "headline",
        "subheadline",
        "bodyText",
        "accentColor",
        "backgroundColor",
        "emojiIcon",
        "layoutStyle",
    ],
}
