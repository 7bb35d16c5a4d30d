import pytest

from models import Question
from storage import StateRepository


@pytest.fixture()
def repo(tmp_path) -> StateRepository:
    return StateRepository(tmp_path / "data" / "exam_system_data.json")


@pytest.fixture()
def make_question():
    counter = iter(range(1, 10_000))

    def _make(**overrides) -> Question:
        n = next(counter)
        fields = {
            "id": f"q{n}",
            "content": f"Question {n}",
            "options": ["one", "two", "three", "four"],
            "correct_answer": "A",
            "category": "General",
            "difficulty": "medium",
            "explanation": None,
            "source": "bank.txt",
        }
        fields.update(overrides)
        return Question(**fields)

    return _make
