# models.py
import copy
import random
import string
from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, List, Optional

DIFFICULTIES = ("easy", "medium", "hard")

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id() -> str:
    """生成 13 位随机标识（小写字母 + 数字）"""
    return "".join(random.choices(_ID_ALPHABET, k=13))


def _known_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


@dataclass
class Question:
    """单个选择题的数据结构"""
    id: str                         # 唯一标识
    content: str                    # 题干
    options: List[str]              # 选项正文列表，下标 0 对应 A
    correct_answer: str             # 正确答案字母，如 "B"
    category: str                   # 分类
    difficulty: str = "medium"      # easy / medium / hard
    explanation: Optional[str] = None   # 解析
    source: str = ""                # 来源文件名

    def option_letters(self) -> List[str]:
        return [chr(ord("A") + i) for i in range(len(self.options))]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        q = cls(**_known_fields(cls, data))
        q.options = list(q.options)
        return q


@dataclass
class ParseResult:
    """单个文件的解析结果"""
    success: bool
    questions: List[Question] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)   # 去重后的分类
    error: Optional[str] = None


@dataclass
class QuestionBank:
    """从一个文件导入的题库"""
    id: str
    name: str
    questions: List[Question]
    categories: List[str]
    import_time: int                # 毫秒时间戳
    source_file: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionBank":
        kw = _known_fields(cls, data)
        kw["questions"] = [Question.from_dict(q) for q in kw.get("questions", [])]
        kw["categories"] = list(kw.get("categories", []))
        return cls(**kw)


@dataclass
class ExamRecord:
    """一次考试的记录"""
    id: str
    title: str
    start_time: int
    questions: List[Question]
    answers: Dict[str, str] = field(default_factory=dict)   # 题目 id → 作答字母
    end_time: Optional[int] = None
    score: Optional[int] = None
    is_completed: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExamRecord":
        kw = _known_fields(cls, data)
        kw["questions"] = [Question.from_dict(q) for q in kw.get("questions", [])]
        kw["answers"] = dict(kw.get("answers", {}))
        return cls(**kw)


@dataclass
class WrongAnswer:
    """错题记录，count 为累计答错次数"""
    question: Question
    user_answer: str
    exam_id: str
    timestamp: int
    count: int = 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WrongAnswer":
        kw = _known_fields(cls, data)
        kw["question"] = Question.from_dict(kw["question"])
        return cls(**kw)


@dataclass
class Settings:
    default_question_count: int = 20
    show_explanation: bool = True
    random_order: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        return cls(**_known_fields(cls, data))


@dataclass
class AppState:
    """持久化的根文档"""
    question_banks: List[QuestionBank] = field(default_factory=list)
    exam_history: List[ExamRecord] = field(default_factory=list)
    wrong_answers: List[WrongAnswer] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppState":
        """缺失的键使用默认值，未知的键忽略"""
        state = cls()
        if "question_banks" in data:
            state.question_banks = [QuestionBank.from_dict(b) for b in data["question_banks"]]
        if "exam_history" in data:
            state.exam_history = [ExamRecord.from_dict(r) for r in data["exam_history"]]
        if "wrong_answers" in data:
            state.wrong_answers = [WrongAnswer.from_dict(w) for w in data["wrong_answers"]]
        if "settings" in data:
            state.settings = Settings.from_dict(data["settings"])
        return state


def copy_question(q: Question) -> Question:
    """考试记录、错题记录各自持有题目副本"""
    return copy.deepcopy(q)
