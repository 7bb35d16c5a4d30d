# importer.py
"""
按扩展名把文件分派给对应的解析方式：
  .xlsx / .xls  → 表格解析
  .docx / .doc  → Word 提取文本 → 文本解析
  .pdf          → 粗略清理字节流 → 文本解析
  .txt / .csv   → 文本解析
解码失败、格式不支持等情况都转换为 success=False 的 ParseResult，不向外抛出。
"""
import asyncio
import io
import logging
import re
from pathlib import Path
from typing import Any, Iterable, List, Tuple, Union

import pandas as pd
from docx import Document

from config import PDF_MIN_TEXT_LENGTH
from models import ParseResult
from parser import extract_questions_from_rows, extract_questions_from_text

logger = logging.getLogger(__name__)

SPREADSHEET_EXTENSIONS = (".xlsx", ".xls")
WORD_EXTENSIONS = (".docx", ".doc")
PDF_EXTENSIONS = (".pdf",)
TEXT_EXTENSIONS = (".txt", ".csv")
SUPPORTED_EXTENSIONS = SPREADSHEET_EXTENSIONS + WORD_EXTENSIONS + PDF_EXTENSIONS + TEXT_EXTENSIONS

UNSUPPORTED_MESSAGE = "不支持的文件格式。请上传 Excel, Word, PDF 或文本文件。"
PDF_EMPTY_MESSAGE = "无法从PDF中提取文本。请尝试将PDF转换为Word或文本格式后导入。"

# PDF 字节流清理规则，按顺序执行
_PDF_CLEANUP = [
    (re.compile(r'stream[\s\S]*?endstream'), ""),
    (re.compile(r'<<[\s\S]*?>>'), ""),
    (re.compile(r'/[A-Za-z]+'), " "),
    (re.compile(r'[\x00-\x1F\x7F-\xFF]'), " "),
    (re.compile(r'\s+'), " "),
]


def _failure(message: str) -> ParseResult:
    return ParseResult(success=False, questions=[], categories=[], error=message)


# ---------------- 解码 ----------------
def read_spreadsheet(data: bytes) -> List[List[Any]]:
    """读取第一个工作表，返回包含表头行的二维单元格列表"""
    df = pd.read_excel(
        io.BytesIO(data), sheet_name=0, header=None, dtype=str, keep_default_na=False
    )
    return df.values.tolist()


def read_word_text(data: bytes) -> str:
    """段落逐行拼接，表格单元格附在其后"""
    doc = Document(io.BytesIO(data))
    lines = [para.text for para in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                lines.append(cell.text)
    return "\n".join(lines)


def salvage_pdf_text(data: bytes) -> str:
    """不做版面解析，只把字节流里可读的部分留下来"""
    text = data.decode("utf-8", errors="replace")
    for pat, repl in _PDF_CLEANUP:
        text = pat.sub(repl, text)
    return text


def read_text(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace")


# ---------------- 各格式解析 ----------------
def parse_spreadsheet(file_name: str, data: bytes) -> ParseResult:
    try:
        rows = read_spreadsheet(data)
    except Exception as e:
        logger.warning("Spreadsheet decode failed for %s: %s", file_name, e)
        return _failure(f"解析Excel文件失败: {e}")
    return extract_questions_from_rows(rows, file_name)


def parse_word(file_name: str, data: bytes) -> ParseResult:
    try:
        text = read_word_text(data)
    except Exception as e:
        logger.warning("Word decode failed for %s: %s", file_name, e)
        return _failure(f"解析Word文件失败: {e}")
    return extract_questions_from_text(text, file_name)


def parse_pdf(file_name: str, data: bytes) -> ParseResult:
    text = salvage_pdf_text(data)
    if len(text) < PDF_MIN_TEXT_LENGTH:
        logger.warning("Only %d usable characters salvaged from %s", len(text), file_name)
        return _failure(PDF_EMPTY_MESSAGE)
    return extract_questions_from_text(text, file_name)


def parse_text(file_name: str, data: bytes) -> ParseResult:
    return extract_questions_from_text(read_text(data), file_name)


def parse_file(file_name: str, data: bytes) -> ParseResult:
    """通用入口：按扩展名（不区分大小写）选择一种解析方式"""
    lower = file_name.lower()
    logger.info("Importing %s (%d bytes)", file_name, len(data))

    if lower.endswith(SPREADSHEET_EXTENSIONS):
        handler = parse_spreadsheet
    elif lower.endswith(WORD_EXTENSIONS):
        handler = parse_word
    elif lower.endswith(PDF_EXTENSIONS):
        handler = parse_pdf
    elif lower.endswith(TEXT_EXTENSIONS):
        handler = parse_text
    else:
        logger.warning("Unsupported file type: %s", file_name)
        return _failure(UNSUPPORTED_MESSAGE)

    try:
        result = handler(file_name, data)
    except Exception as e:
        # 单个文件的最外层边界，出错不影响同时导入的其他文件
        logger.exception("Import of %s failed", file_name)
        return _failure(f"解析文件失败: {e}")

    logger.info("%s: %d questions, success=%s", file_name, len(result.questions), result.success)
    return result


def parse_path(path: Union[str, Path]) -> ParseResult:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        logger.warning("Cannot read %s: %s", p, e)
        return _failure(f"读取文件失败: {e}")
    return parse_file(p.name, data)


# ---------------- 多文件导入 ----------------
async def import_file_async(path: Union[str, Path]) -> Tuple[Path, ParseResult]:
    p = Path(path)
    result = await asyncio.to_thread(parse_path, p)
    return p, result


async def import_files_async(paths: Iterable[Union[str, Path]]) -> List[Tuple[Path, ParseResult]]:
    """每个文件独立解析，结果按传入顺序返回"""
    return list(await asyncio.gather(*(import_file_async(p) for p in paths)))


def import_files(paths: Iterable[Union[str, Path]]) -> List[Tuple[Path, ParseResult]]:
    return asyncio.run(import_files_async(paths))
