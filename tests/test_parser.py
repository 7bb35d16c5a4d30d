import pytest

from config import UNCATEGORIZED
from parser import (
    extract_compact_questions,
    extract_questions_from_rows,
    extract_questions_from_text,
    map_difficulty,
    normalize_question,
)

SAMPLE = "1. What is 2+2?\nA. 3\nB. 4\n答案: B\n分类: Math\n难度: easy\n解析: basic arithmetic"

HEADER = ["题目", "选项A", "选项B", "选项C", "选项D", "答案", "分类", "难度", "解析"]


def _shape(result):
    return [
        (q.content, q.options, q.correct_answer, q.category, q.difficulty, q.explanation, q.source)
        for q in result.questions
    ]


def test_full_question_block() -> None:
    result = extract_questions_from_text(SAMPLE, "math.txt")
    assert result.success
    assert result.error is None
    assert len(result.questions) == 1
    q = result.questions[0]
    assert q.content == "What is 2+2?"
    assert q.options == ["3", "4"]
    assert q.correct_answer == "B"
    assert q.category == "Math"
    assert q.difficulty == "easy"
    assert q.explanation == "basic arithmetic"
    assert q.source == "math.txt"
    assert q.id
    assert result.categories == ["Math"]


def test_later_answer_overwrites_earlier() -> None:
    text = "1. Pick one\nA. x\nB. y\n答案: A\n答案: B"
    result = extract_questions_from_text(text, "t.txt")
    assert result.questions[0].correct_answer == "B"


def test_single_option_candidate_is_dropped() -> None:
    text = (
        "1. Lonely question\nA. only\n"
        "2. Real question\nA. yes\nB. no\nAnswer: a\n"
    )
    result = extract_questions_from_text(text, "t.txt")
    assert [q.content for q in result.questions] == ["Real question"]
    assert result.questions[0].correct_answer == "A"


def test_candidate_without_answer_is_dropped() -> None:
    text = "1. No answer here\nA. x\nB. y\n2. Answered\nA. x\nB. y\n正确答案：B\n"
    result = extract_questions_from_text(text, "t.txt")
    assert [q.content for q in result.questions] == ["Answered"]


def test_fields_are_not_inherited_between_questions() -> None:
    text = (
        "1. First\nA. a\nB. b\n答案: A\n分类: History\n难度: hard\n解析: because\n"
        "2. Second\nA. c\nB. d\n答案: B\n"
    )
    result = extract_questions_from_text(text, "t.txt")
    second = result.questions[1]
    assert second.category == UNCATEGORIZED
    assert second.difficulty == "medium"
    assert second.explanation is None
    assert result.categories == ["History", UNCATEGORIZED]


def test_full_width_delimiters_and_chinese_markers() -> None:
    text = (
        "说明文字，在第一题之前，忽略\n"
        "1、下列哪个是质数？\n"
        "A、4\nB）6\nC 7\nD．9\n"
        "正确答案：C\n类别：数学\n难度：困难\n解析：7 只能被 1 和自身整除\n"
        "2．第二题\nA. 是\nB. 否\n答案：a\n"
    )
    result = extract_questions_from_text(text, "cn.docx")
    assert len(result.questions) == 2
    first, second = result.questions
    assert first.content == "下列哪个是质数？"
    assert first.options == ["4", "6", "7", "9"]
    assert first.correct_answer == "C"
    assert first.category == "数学"
    assert first.difficulty == "hard"
    assert first.explanation == "7 只能被 1 和自身整除"
    assert second.correct_answer == "A"


def test_windows_line_endings() -> None:
    result = extract_questions_from_text(SAMPLE.replace("\n", "\r\n"), "win.txt")
    assert result.questions[0].options == ["3", "4"]
    assert result.questions[0].explanation == "basic arithmetic"


def test_categories_are_unique() -> None:
    block = "{n}. Q{n}\nA. x\nB. y\n答案: A\n分类: Same\n"
    text = "".join(block.format(n=n) for n in range(1, 4))
    result = extract_questions_from_text(text, "t.txt")
    assert len(result.questions) == 3
    assert result.categories == ["Same"]


def test_rerun_yields_same_questions() -> None:
    first = extract_questions_from_text(SAMPLE, "a.txt")
    second = extract_questions_from_text(SAMPLE, "a.txt")
    assert _shape(first) == _shape(second)
    assert first.questions[0].id != second.questions[0].id


@pytest.mark.parametrize(
    "text",
    [
        SAMPLE,
        "1. a\nA. x\n2. b\nA. x\nB. y\nC. z\n答案: C\n3. c\n答案: A",
        "1. Q\nA. x\nB. y\n",
        "10: Q\nA) x\nB) y\nanswer: d\n",
    ],
)
def test_emitted_questions_always_satisfy_invariants(text) -> None:
    for q in extract_questions_from_text(text, "t.txt").questions:
        assert len(q.options) >= 2
        assert q.content
        assert q.correct_answer


def test_no_markers_and_no_compact_match_is_soft_failure() -> None:
    result = extract_questions_from_text("just some prose\nwithout any questions", "t.txt")
    assert result.success is False
    assert result.questions == []
    assert result.categories == []
    assert result.error is None


def test_question_numbers_must_be_ascii_digits() -> None:
    block = "{n}. 题目\nA. x\nB. y\n答案: A"
    assert extract_questions_from_text(block.format(n="1"), "t.txt").success
    result = extract_questions_from_text(block.format(n="１"), "t.txt")
    assert result.success is False
    assert result.questions == []

    compact = "{n} Q (A)x(B)y(C)z 答案:A"
    assert extract_compact_questions(compact.format(n="2"), "c.txt").success
    assert extract_compact_questions(compact.format(n="２"), "c.txt").questions == []


def test_falls_back_to_compact_format() -> None:
    text = "5 What color is the sky? (A)Red(B)Blue(C)Green 答案:B"
    result = extract_questions_from_text(text, "sky.txt")
    assert result.success
    q = result.questions[0]
    assert q.content == "What color is the sky?"
    assert q.options == ["Red", "Blue", "Green"]
    assert q.correct_answer == "B"
    assert q.category == UNCATEGORIZED
    assert q.difficulty == "medium"
    assert q.explanation is None
    assert result.categories == [UNCATEGORIZED]


def test_compact_format_multiple_matches_with_optional_d() -> None:
    text = "1. Q1 (A)x(B)y(C)z(D)w 答案:D 2. Q2 (A)p(B)q(C)r Answer: a"
    result = extract_compact_questions(text, "c.txt")
    assert [q.content for q in result.questions] == ["Q1", "Q2"]
    assert result.questions[0].options == ["x", "y", "z", "w"]
    assert result.questions[0].correct_answer == "D"
    assert result.questions[1].options == ["p", "q", "r"]
    assert result.questions[1].correct_answer == "A"


def test_compact_format_without_match() -> None:
    result = extract_compact_questions("(A)x(B)y no answer", "c.txt")
    assert not result.success
    assert result.questions == []


def test_normalizer_rejects_incomplete_candidates() -> None:
    assert normalize_question({"content": "Q", "correct_answer": "A"}, ["x"], "f") is None
    assert normalize_question({"content": "  ", "correct_answer": "A"}, ["x", "y"], "f") is None
    assert normalize_question({"content": "Q"}, ["x", "y"], "f") is None


def test_normalizer_defaults_and_keeps_preassigned_id() -> None:
    q = normalize_question(
        {"id": "fixed", "content": "  Q  ", "correct_answer": "B"}, ["x", "y"], "src.txt"
    )
    assert q.id == "fixed"
    assert q.content == "Q"
    assert q.category == UNCATEGORIZED
    assert q.difficulty == "medium"
    assert q.source == "src.txt"


def test_map_difficulty() -> None:
    assert map_difficulty("EASY") == "easy"
    assert map_difficulty("中等") == "medium"
    assert map_difficulty("困难") == "hard"
    assert map_difficulty("extreme") is None
    assert map_difficulty("") is None


def test_rows_mapping() -> None:
    rows = [HEADER, ["Q1", "opt1", "opt2", "", "", "B", "Math", "hard", ""]]
    result = extract_questions_from_rows(rows, "bank.xlsx")
    assert result.success
    q = result.questions[0]
    assert q.content == "Q1"
    assert q.options == ["opt1", "opt2"]
    assert q.correct_answer == "B"
    assert q.category == "Math"
    assert q.difficulty == "hard"
    assert q.explanation is None
    assert q.source == "bank.xlsx"


def test_rows_defaults_and_skips() -> None:
    rows = [
        ["Q0", "header", "row", "", "", "C"],
        ["Q1", "a"],
        ["", "a", "b", "c", "d", "A"],
        ["Q2", "a", "", "", "", "A"],
        ["Q3", "a", "b", "c", None, "", "", "简单", "why"],
        ["Q4", "a", "b", 3, 4.5, "d", None, "unknown"],
    ]
    result = extract_questions_from_rows(rows, "bank.xlsx")
    assert [q.content for q in result.questions] == ["Q3", "Q4"]
    q3, q4 = result.questions
    assert q3.correct_answer == "A"
    assert q3.options == ["a", "b", "c"]
    assert q3.difficulty == "easy"
    assert q3.explanation == "why"
    assert q3.category == UNCATEGORIZED
    assert q4.options == ["a", "b", "3", "4.5"]
    assert q4.correct_answer == "D"
    assert q4.difficulty == "medium"


def test_rows_header_only() -> None:
    result = extract_questions_from_rows([HEADER], "empty.xlsx")
    assert not result.success
    assert result.questions == []
