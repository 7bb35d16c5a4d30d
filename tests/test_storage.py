import json
from pathlib import Path

import pytest

import config
from models import AppState, ExamRecord, ParseResult, Settings
from storage import StateRepository, bank_from_result


def _bank(make_question, name="bank.txt", categories=("General",)):
    questions = [make_question(category=c) for c in categories]
    result = ParseResult(success=True, questions=questions, categories=list(dict.fromkeys(categories)))
    return bank_from_result(result, name)


def test_missing_file_loads_defaults(repo: StateRepository) -> None:
    state = repo.load()
    assert state == AppState()
    assert state.settings == Settings(default_question_count=20, show_explanation=True, random_order=True)


def test_malformed_file_loads_defaults(repo: StateRepository) -> None:
    repo.path.parent.mkdir(parents=True)
    repo.path.write_text("{not json", encoding="utf-8")
    assert repo.load() == AppState()
    repo.path.write_text("[1, 2, 3]", encoding="utf-8")
    assert repo.load() == AppState()


@pytest.mark.parametrize("document", [
    {"settings": None},
    {"question_banks": [1]},
    {"exam_history": ["x"]},
    {"wrong_answers": [None]},
])
def test_wrongly_typed_sections_load_defaults(repo: StateRepository, document) -> None:
    repo.path.parent.mkdir(parents=True)
    repo.path.write_text(json.dumps(document), encoding="utf-8")
    assert repo.load() == AppState()


def test_failed_save_keeps_previous_file(repo: StateRepository, monkeypatch) -> None:
    repo.update_settings(random_order=False)
    before = repo.path.read_text(encoding="utf-8")

    def broken_dump(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(json, "dump", broken_dump)
    with pytest.raises(OSError):
        repo.update_settings(random_order=True)
    monkeypatch.undo()

    assert repo.path.read_text(encoding="utf-8") == before
    assert repo.load().settings.random_order is False


def test_partial_document_merges_over_defaults(repo: StateRepository) -> None:
    repo.path.parent.mkdir(parents=True)
    repo.path.write_text(json.dumps({"settings": {"random_order": False}, "extra": 1}), encoding="utf-8")
    state = repo.load()
    assert state.settings.random_order is False
    assert state.settings.default_question_count == 20
    assert state.question_banks == []


def test_bank_from_result(make_question) -> None:
    bank = _bank(make_question, name="期末复习.docx")
    assert bank.name == "期末复习"
    assert bank.source_file == "期末复习.docx"
    assert bank.import_time > 0
    assert bank.id


def test_add_and_delete_bank(repo: StateRepository, make_question) -> None:
    first = _bank(make_question, "a.txt", ("Math", "Physics"))
    second = _bank(make_question, "b.txt", ("Physics", "中文"))
    repo.add_question_bank(first)
    repo.add_question_bank(second)

    loaded = repo.load()
    assert [b.name for b in loaded.question_banks] == ["a", "b"]
    assert loaded.question_banks[0] == first
    assert repo.get_all_categories() == ["Math", "Physics", "中文"]
    assert len(repo.get_all_questions()) == 4
    assert [q.category for q in repo.get_questions_by_category("Physics")] == ["Physics", "Physics"]
    assert len(repo.get_questions_by_category("all")) == 4

    repo.delete_question_bank(first.id)
    assert [b.name for b in repo.load().question_banks] == ["b"]
    # 非 ASCII 内容原样写入
    assert "中文" in repo.path.read_text(encoding="utf-8")


def test_wrong_answer_count_accumulates(repo: StateRepository, make_question) -> None:
    q = make_question()
    repo.add_wrong_answer(q, "B", "exam1")
    repo.add_wrong_answer(q, "C", "exam2")
    repo.add_wrong_answer(make_question(), "", "exam2")

    wrong = repo.load().wrong_answers
    assert len(wrong) == 2
    assert wrong[0].count == 2
    assert wrong[0].user_answer == "C"
    assert wrong[0].exam_id == "exam1"
    assert wrong[1].count == 1

    repo.remove_wrong_answer(q.id)
    remaining = repo.load().wrong_answers
    assert len(remaining) == 1
    assert remaining[0].question.id != q.id


def test_exam_record_update_and_delete(repo: StateRepository, make_question) -> None:
    record = ExamRecord(id="e1", title="T", start_time=1, questions=[make_question()])
    repo.add_exam_record(record)
    record.score = 100
    record.is_completed = True
    repo.update_exam_record(record)
    assert repo.load().exam_history[0].score == 100

    repo.update_exam_record(ExamRecord(id="nope", title="X", start_time=2, questions=[]))
    assert [r.id for r in repo.load().exam_history] == ["e1"]

    repo.delete_exam_record("e1")
    assert repo.load().exam_history == []


def test_update_settings(repo: StateRepository) -> None:
    settings = repo.update_settings(default_question_count=5, random_order=False)
    assert settings.default_question_count == 5
    assert repo.load().settings.random_order is False
    with pytest.raises(ValueError):
        repo.update_settings(theme="dark")


def test_export_import_and_clear(repo: StateRepository, tmp_path: Path, make_question) -> None:
    repo.add_question_bank(_bank(make_question))
    exported = repo.export_data()

    other = StateRepository(tmp_path / "other.json")
    assert other.import_data(exported) is True
    assert other.load() == repo.load()

    assert other.import_data("{broken") is False
    assert other.import_data('"just a string"') is False
    assert other.load() == repo.load()

    repo.clear_all_data()
    assert not repo.path.exists()
    assert repo.load() == AppState()
    repo.clear_all_data()


def test_data_file_path_env_override(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(config.DATA_PATH_ENV, str(tmp_path / "custom.json"))
    assert config.data_file_path() == tmp_path / "custom.json"
    assert StateRepository().path == tmp_path / "custom.json"

    monkeypatch.delenv(config.DATA_PATH_ENV)
    assert config.data_file_path().name == config.STORAGE_FILE_NAME
