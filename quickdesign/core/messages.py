# --- 前端阻塞弹窗使用的本地化提示文案 (泰语) ---
# 每项包含 icon / title / text 三个字段，与 Notification 模型一一对应

MESSAGES = {
    "empty_input": {
        "icon": "warning",
        "title": "กรุณากรอกข้อความ",
        "text": "ใส่ข้อความที่คุณต้องการให้ AI ออกแบบ",
    },
    "generation_failed": {
        "icon": "error",
        "title": "เกิดข้อผิดพลาด",
        "text": "ไม่สามารถสร้างดีไซน์ได้ในขณะนี้ กรุณาลองใหม่",
    },
    "generation_in_progress": {
        "icon": "warning",
        "title": "AI กำลังคิด...",
        "text": "กรุณารอให้การออกแบบครั้งก่อนเสร็จสิ้น",
    },
    "export_failed": {
        "icon": "error",
        "title": "บันทึกไม่สำเร็จ",
        "text": "เกิดข้อผิดพลาดในการแปลงไฟล์ภาพ กรุณาลองใหม่อีกครั้ง",
    },
    "share_unsupported": {
        "icon": "info",
        "title": "Share not supported",
        "text": "เบราว์เซอร์นี้ไม่รองรับการแชร์ไฟล์ภาพโดยตรง",
    },
    "session_not_found": {
        "icon": "error",
        "title": "ไม่พบเซสชัน",
        "text": "เซสชันนี้หมดอายุหรือถูกปิดไปแล้ว กรุณาเริ่มใหม่",
    },
    "no_design": {
        "icon": "error",
        "title": "ยังไม่มีดีไซน์",
        "text": "กรอกข้อมูลและกด Generate เพื่อเริ่ม",
    },
}

# 分享时附带的固定标题与说明
SHARE_TITLE = "PR Quick Design"
SHARE_TEXT = "ดูดีไซน์ที่ฉันสร้างด้วย AI!"


def get_message(key: str) -> dict:
    return MESSAGES[key]
