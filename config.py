# config.py
import os
from pathlib import Path

UNCATEGORIZED = "未分类"

# PDF 文本流清理后少于该字符数视为无法提取
PDF_MIN_TEXT_LENGTH = 50

DEFAULT_QUESTION_COUNT = 20
MAX_QUESTION_COUNT = 100

STORAGE_FILE_NAME = "exam_system_data.json"
DATA_PATH_ENV = "EXAM_PRACTICE_DATA"


def data_file_path() -> Path:
    """数据文件位置：优先环境变量 EXAM_PRACTICE_DATA，否则 ~/.exam_practice/"""
    override = os.environ.get(DATA_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".exam_practice" / STORAGE_FILE_NAME
