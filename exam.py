# exam.py
import dataclasses
import math
import random
import time
from typing import Dict, List, Optional, Sequence

from models import AppState, ExamRecord, Question, WrongAnswer, copy_question, generate_id
from storage import StateRepository, now_ms

DIFFICULTY_LABELS = {"easy": "简单", "medium": "中等", "hard": "困难"}


def difficulty_label(difficulty: str) -> str:
    return DIFFICULTY_LABELS.get(difficulty, "中等")


# ---------------- 组卷 ----------------
def filter_questions(questions: Sequence[Question], category: str = "all",
                     difficulty: str = "all") -> List[Question]:
    filtered = list(questions)
    if category != "all":
        filtered = [q for q in filtered if q.category == category]
    if difficulty != "all":
        filtered = [q for q in filtered if q.difficulty == difficulty]
    return filtered


def select_exam_questions(pool: Sequence[Question], count: int, random_order: bool,
                          rng: Optional[random.Random] = None) -> List[Question]:
    """先（可选）打乱，再取前 count 题"""
    if count < 0:
        raise ValueError("题目数量不能为负数")
    questions = list(pool)
    if random_order:
        (rng or random).shuffle(questions)
    return questions[:min(count, len(questions))]


def wrong_answer_questions(state: AppState) -> List[Question]:
    """错题练习模式下的题目来源"""
    return [w.question for w in state.wrong_answers]


class ExamSession:
    """一场考试：作答、标记、跳题、交卷评分"""

    def __init__(self, questions: Sequence[Question], title: str,
                 repository: Optional[StateRepository] = None):
        self.questions: List[Question] = [copy_question(q) for q in questions]
        self.repository = repository
        self.current_index = 0
        self.marked: set = set()
        self._started = time.monotonic()

        self.record = ExamRecord(
            id=generate_id(),
            title=title,
            start_time=now_ms(),
            questions=[copy_question(q) for q in self.questions],
        )
        if self.repository is not None:
            self.repository.add_exam_record(self.record)

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def answers(self) -> Dict[str, str]:
        return self.record.answers

    @property
    def current_question(self) -> Optional[Question]:
        if not self.questions:
            return None
        return self.questions[self.current_index]

    @property
    def answered_count(self) -> int:
        return len(self.record.answers)

    @property
    def progress(self) -> float:
        if not self.questions:
            return 0.0
        return self.answered_count / self.total * 100

    @property
    def elapsed_seconds(self) -> int:
        return int(time.monotonic() - self._started)

    # ---------------- 导航 ----------------
    def go_to(self, index: int) -> None:
        if 0 <= index < self.total:
            self.current_index = index

    def next(self) -> None:
        self.go_to(self.current_index + 1)

    def previous(self) -> None:
        self.go_to(self.current_index - 1)

    # ---------------- 作答 ----------------
    def answer(self, letter: str) -> None:
        q = self.current_question
        if q is None:
            return
        if self.record.is_completed:
            raise RuntimeError("考试已交卷")
        letter = letter.upper()
        if letter not in q.option_letters():
            raise ValueError(f"无效选项: {letter}")
        self.record.answers[q.id] = letter

    def toggle_mark(self) -> None:
        q = self.current_question
        if q is None:
            return
        if q.id in self.marked:
            self.marked.discard(q.id)
        else:
            self.marked.add(q.id)

    def is_correct(self, q: Question) -> bool:
        return self.record.answers.get(q.id) == q.correct_answer

    def calculate_score(self) -> int:
        if not self.questions:
            return 0
        correct = sum(1 for q in self.questions if self.is_correct(q))
        # 四舍五入到整数百分制
        return int(math.floor(correct / self.total * 100 + 0.5))

    def submit(self) -> ExamRecord:
        """交卷：记录得分，未作答和答错的题都记入错题本"""
        if self.record.is_completed:
            raise RuntimeError("考试已交卷")

        # 先在副本上完成评分，写入成功后才替换当前记录，失败时可以再次交卷
        completed = dataclasses.replace(
            self.record,
            answers=dict(self.record.answers),
            end_time=now_ms(),
            score=self.calculate_score(),
            is_completed=True,
        )
        if self.repository is not None:
            wrong = [(q, completed.answers.get(q.id, ""))
                     for q in self.questions if not self.is_correct(q)]
            self.repository.complete_exam(completed, wrong)
        self.record = completed
        return self.record


# ---------------- 考试记录 ----------------
def sorted_history(records: Sequence[ExamRecord]) -> List[ExamRecord]:
    return sorted(records, key=lambda r: r.start_time, reverse=True)


def correct_count(record: ExamRecord) -> int:
    return sum(1 for q in record.questions if record.answers.get(q.id) == q.correct_answer)


def history_summary(records: Sequence[ExamRecord]) -> Dict[str, int]:
    scores = [r.score or 0 for r in records if r.is_completed]
    if not scores:
        return {"completed": 0, "average": 0, "highest": 0, "lowest": 0}
    return {
        "completed": len(scores),
        "average": int(math.floor(sum(scores) / len(scores) + 0.5)),
        "highest": max(scores),
        "lowest": min(scores),
    }


def score_grade(score: Optional[int]) -> str:
    if score is None:
        return "未完成"
    if score >= 80:
        return "优秀"
    if score >= 60:
        return "及格"
    return "不及格"


def format_clock(seconds: int) -> str:
    mins, secs = divmod(int(seconds), 60)
    return f"{mins:02d}:{secs:02d}"


def format_duration(start: int, end: Optional[int]) -> str:
    if end is None:
        return "-"
    mins, secs = divmod((end - start) // 1000, 60)
    return f"{mins}分{secs}秒"


# ---------------- 错题本 ----------------
def sorted_wrong_answers(wrong_answers: Sequence[WrongAnswer], search: str = "",
                         category: str = "all") -> List[WrongAnswer]:
    """错得最多的排在前面"""
    items = sorted(wrong_answers, key=lambda w: w.count, reverse=True)
    if search:
        term = search.lower()
        items = [w for w in items if term in w.question.content.lower()]
    if category != "all":
        items = [w for w in items if w.question.category == category]
    return items
