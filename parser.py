# parser.py
"""
题目识别：
  1. 逐行扫描文本，识别 “题号 / 选项 / 答案 / 分类 / 难度 / 解析” 标记
  2. 主解析一题都没识别出时，改用紧凑格式 “1. 题干 (A)xx(B)yy(C)zz 答案:B”
  3. 表格（第 0 行为表头）按固定列映射
三种来源都经过 normalize_question 校验与补默认值。
"""
import logging
import math
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

from config import UNCATEGORIZED
from models import ParseResult, Question, generate_id

logger = logging.getLogger(__name__)

# 难度标签 → 三级难度（查表前会先转小写）
DIFFICULTY_MAP = {
    "简单": "easy", "easy": "easy",
    "中等": "medium", "medium": "medium",
    "困难": "hard", "hard": "hard",
}

# 题号：数字 + 半角/全角的 “.” “:” 或顿号
q_pat = re.compile(r'^([0-9]+)[.．:：、]\s*(.+)')

# 选项：A‑D 开头，后面是 “.”、“、”、“)” 或空白
opt_pat = re.compile(r'^([A-D])[.．、)）\s]\s*(.+)')

# 行内任意位置出现的字段标记（不区分大小写）
ans_pat = re.compile(r'(?:正确答案|答案|answer)[:：\s]*([A-D])', re.IGNORECASE)
cat_pat = re.compile(r'(?:分类|类别|category)[:：\s]*(.+)', re.IGNORECASE)
diff_pat = re.compile(r'(?:难度|difficulty)[:：\s]*(简单|中等|困难|easy|medium|hard)', re.IGNORECASE)
expl_pat = re.compile(r'(?:解析|explanation)[:：\s]*(.+)', re.IGNORECASE)

# 紧凑格式：题号 题干 (A)..(B)..(C)..[(D)..] 答案:X
compact_pat = re.compile(
    r'([0-9]+)[.．:：、]?\s*([^()]+)'
    r'\s*\(A\)\s*([^()]+)\s*\(B\)\s*([^()]+)\s*\(C\)\s*([^()]+)'
    r'(?:\s*\(D\)\s*([^()]+))?'
    r'\s*(?:正确答案|答案|answer)[:：\s]*([A-D])',
    re.IGNORECASE,
)


def _clean(txt: str) -> str:
    return txt.strip()


def map_difficulty(label: Optional[str]) -> Optional[str]:
    if not label:
        return None
    return DIFFICULTY_MAP.get(label.strip().lower())


def normalize_question(candidate: Mapping[str, Any], options: Sequence[str],
                       source_file: str) -> Optional[Question]:
    """
    校验并补全一道题。
    题干为空、没有答案或选项少于 2 个时返回 None（静默丢弃，不算错误）。
    """
    content = candidate.get("content") or ""
    answer = candidate.get("correct_answer")
    if not content.strip() or not answer or len(options) < 2:
        return None

    return Question(
        id=candidate.get("id") or generate_id(),
        content=content.strip(),
        options=list(options),
        correct_answer=answer,
        category=candidate.get("category") or UNCATEGORIZED,
        difficulty=candidate.get("difficulty") or "medium",
        explanation=candidate.get("explanation"),
        source=source_file,
    )


class _Collector:
    """按出现顺序收集题目与去重后的分类"""

    def __init__(self, source_file: str):
        self.source_file = source_file
        self.questions: List[Question] = []
        self._categories: Dict[str, None] = {}

    def add(self, candidate: Mapping[str, Any], options: Sequence[str]) -> None:
        q = normalize_question(candidate, options, self.source_file)
        if q is None:
            return
        self.questions.append(q)
        self._categories.setdefault(q.category)

    def result(self) -> ParseResult:
        return ParseResult(
            success=bool(self.questions),
            questions=self.questions,
            categories=list(self._categories),
        )


class _QuestionScanner:
    """
    两个状态：
      空闲      —— draft 为 None，题号出现之前的行全部忽略
      构建中    —— draft 保存当前题目的字段，options 保存已读到的选项
    遇到新题号或输入结束时输出当前题目并回到空闲。
    """

    def __init__(self, collector: _Collector):
        self.collector = collector
        self.draft: Optional[Dict[str, Any]] = None
        self.options: List[str] = []

    def feed(self, line: str) -> None:
        # ---------- 1. 题号 ----------
        m_q = q_pat.match(line)
        if m_q:
            self.close()
            self.draft = {"content": m_q.group(2)}
            return

        # 题目尚未开始时直接忽略
        if self.draft is None:
            return

        # ---------- 2. 选项 ----------
        m_opt = opt_pat.match(line)
        if m_opt:
            self.options.append(m_opt.group(2).strip())
            return

        # ---------- 3. 字段标记（同名字段后出现的覆盖先出现的） ----------
        m_ans = ans_pat.search(line)
        if m_ans:
            self.draft["correct_answer"] = m_ans.group(1).upper()

        m_cat = cat_pat.search(line)
        if m_cat:
            self.draft["category"] = m_cat.group(1).strip()

        m_diff = diff_pat.search(line)
        if m_diff:
            self.draft["difficulty"] = map_difficulty(m_diff.group(1))

        m_expl = expl_pat.search(line)
        if m_expl:
            self.draft["explanation"] = m_expl.group(1).strip()

    def close(self) -> None:
        # 选项不足 2 个的题目直接丢弃
        if self.draft is not None and len(self.options) >= 2:
            self.collector.add(self.draft, self.options)
        self.draft = None
        self.options = []


def extract_questions_from_text(text: str, source_file: str) -> ParseResult:
    """逐行识别题目；一题都没有时退回紧凑格式解析"""
    collector = _Collector(source_file)
    scanner = _QuestionScanner(collector)

    for raw in text.split("\n"):
        line = _clean(raw)
        if not line:
            continue
        scanner.feed(line)
    # 最后一题
    scanner.close()

    if not collector.questions:
        logger.debug("%s: no line-format questions, trying compact format", source_file)
        return extract_compact_questions(text, source_file)

    logger.debug("%s: %d questions recognised", source_file, len(collector.questions))
    return collector.result()


def extract_compact_questions(text: str, source_file: str) -> ParseResult:
    """
    紧凑格式，例如：
      5 What color is the sky? (A)Red(B)Blue(C)Green 答案:B
    分类固定为 “未分类”，难度固定为 medium。
    """
    collector = _Collector(source_file)
    for m in compact_pat.finditer(text):
        options = [m.group(3).strip(), m.group(4).strip(), m.group(5).strip()]
        if m.group(6):
            options.append(m.group(6).strip())
        candidate = {
            "content": m.group(2),
            "correct_answer": m.group(7).upper(),
        }
        collector.add(candidate, options)

    logger.debug("%s: %d compact-format questions", source_file, len(collector.questions))
    return collector.result()


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def extract_questions_from_rows(rows: Sequence[Sequence[Any]], source_file: str) -> ParseResult:
    """
    表格列（第 0 行为表头，忽略）：
      0 题目 | 1‑4 选项A‑D | 5 答案 | 6 分类 | 7 难度 | 8 解析
    """
    collector = _Collector(source_file)

    for row in rows[1:]:
        if not row or len(row) < 3:
            continue
        cells = [_cell(c) for c in row] + [""] * 9
        content = cells[0]
        if not content:
            continue

        options = [c for c in cells[1:5] if c]
        if len(options) < 2:
            continue

        candidate = {
            "content": content,
            "correct_answer": (cells[5] or "A").upper(),
            "category": cells[6] or None,
            "difficulty": map_difficulty(cells[7] or "medium") or "medium",
            "explanation": cells[8] or None,
        }
        collector.add(candidate, options)

    logger.debug("%s: %d rows converted to questions", source_file, len(collector.questions))
    return collector.result()
