# storage.py
import json
import logging
import os
import time
from pathlib import Path
from typing import List, Optional, Tuple, Union

from config import data_file_path
from models import (
    AppState, ExamRecord, ParseResult, Question, QuestionBank, Settings,
    WrongAnswer, copy_question, generate_id,
)

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def bank_from_result(result: ParseResult, file_name: str) -> QuestionBank:
    """把解析结果包装成题库，库名取文件名（去掉扩展名）"""
    return QuestionBank(
        id=generate_id(),
        name=Path(file_name).stem,
        questions=list(result.questions),
        categories=list(result.categories),
        import_time=now_ms(),
        source_file=file_name,
    )


def _record_wrong_answer(state: AppState, question: Question, user_answer: str, exam_id: str) -> None:
    """同一道题再次答错时累加次数，并更新最近一次作答"""
    for wrong in state.wrong_answers:
        if wrong.question.id == question.id:
            wrong.count += 1
            wrong.user_answer = user_answer
            wrong.timestamp = now_ms()
            return
    state.wrong_answers.append(WrongAnswer(
        question=copy_question(question),
        user_answer=user_answer,
        exam_id=exam_id,
        timestamp=now_ms(),
        count=1,
    ))


class StateRepository:
    """
    整个应用的数据保存在一个 JSON 文件里。
    load() / save() 是唯一的读写入口，其余操作都是 “读取 → 修改 → 写回”。
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else data_file_path()

    # ---------------- get / put ----------------
    def load(self) -> AppState:
        """文件不存在或损坏时返回默认状态"""
        if not self.path.exists():
            return AppState()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise ValueError("根节点必须是对象")
            return AppState.from_dict(raw)
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
            logger.error("加载数据失败 %s: %s", self.path, e)
            return AppState()

    def save(self, state: AppState) -> None:
        """先写临时文件再替换，写入中途失败不会破坏原文件"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(state.to_dict(), f, ensure_ascii=False, indent=2)
        os.replace(tmp, self.path)

    # ---------------- 题库 ----------------
    def add_question_bank(self, bank: QuestionBank) -> None:
        state = self.load()
        state.question_banks.append(bank)
        self.save(state)

    def delete_question_bank(self, bank_id: str) -> None:
        state = self.load()
        state.question_banks = [b for b in state.question_banks if b.id != bank_id]
        self.save(state)

    def get_all_categories(self) -> List[str]:
        seen = {}
        for bank in self.load().question_banks:
            for cat in bank.categories:
                seen.setdefault(cat)
        return list(seen)

    def get_all_questions(self) -> List[Question]:
        questions: List[Question] = []
        for bank in self.load().question_banks:
            questions.extend(bank.questions)
        return questions

    def get_questions_by_category(self, category: str) -> List[Question]:
        questions = self.get_all_questions()
        if category == "all":
            return questions
        return [q for q in questions if q.category == category]

    # ---------------- 考试记录 ----------------
    def add_exam_record(self, record: ExamRecord) -> None:
        state = self.load()
        state.exam_history.append(record)
        self.save(state)

    def update_exam_record(self, record: ExamRecord) -> None:
        state = self.load()
        for i, r in enumerate(state.exam_history):
            if r.id == record.id:
                state.exam_history[i] = record
                self.save(state)
                return

    def delete_exam_record(self, exam_id: str) -> None:
        state = self.load()
        state.exam_history = [r for r in state.exam_history if r.id != exam_id]
        self.save(state)

    def complete_exam(self, record: ExamRecord, wrong: List[Tuple[Question, str]]) -> None:
        """交卷结果一次写入：更新考试记录并登记错题，写入失败时文件保持原样"""
        state = self.load()
        for question, user_answer in wrong:
            _record_wrong_answer(state, question, user_answer, record.id)
        for i, r in enumerate(state.exam_history):
            if r.id == record.id:
                state.exam_history[i] = record
                break
        else:
            state.exam_history.append(record)
        self.save(state)

    # ---------------- 错题 ----------------
    def add_wrong_answer(self, question: Question, user_answer: str, exam_id: str) -> None:
        state = self.load()
        _record_wrong_answer(state, question, user_answer, exam_id)
        self.save(state)

    def remove_wrong_answer(self, question_id: str) -> None:
        state = self.load()
        state.wrong_answers = [w for w in state.wrong_answers if w.question.id != question_id]
        self.save(state)

    # ---------------- 设置 ----------------
    def update_settings(self, **changes) -> Settings:
        state = self.load()
        for key, value in changes.items():
            if not hasattr(state.settings, key):
                raise ValueError(f"未知的设置项: {key}")
            setattr(state.settings, key, value)
        self.save(state)
        return state.settings

    # ---------------- 整体导入导出 ----------------
    def clear_all_data(self) -> None:
        self.path.unlink(missing_ok=True)

    def export_data(self) -> str:
        return json.dumps(self.load().to_dict(), ensure_ascii=False, indent=2)

    def import_data(self, json_string: str) -> bool:
        """JSON 损坏时返回 False，原数据不变"""
        try:
            raw = json.loads(json_string)
            if not isinstance(raw, dict):
                raise ValueError("根节点必须是对象")
            state = AppState.from_dict(raw)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.error("导入数据失败: %s", e)
            return False
        self.save(state)
        return True
