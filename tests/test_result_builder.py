from buildcast.parsers import ResultBuilder
from constants import FALLBACK_CONCEPTS, FALLBACK_FLASHCARDS, FALLBACK_SUMMARY


def test_validate_accepts_expected_shape():
    data = {"concepts": ["A"], "summary": "S", "flashcards": [{"question": "Q", "answer": "A"}]}
    assert ResultBuilder.validate_response_structure(data)


def test_validate_accepts_empty_lists():
    assert ResultBuilder.validate_response_structure({"concepts": [], "summary": "", "flashcards": []})


def test_validate_rejects_bad_shapes():
    assert not ResultBuilder.validate_response_structure([])
    assert not ResultBuilder.validate_response_structure({"concepts": "A", "summary": "S", "flashcards": []})
    assert not ResultBuilder.validate_response_structure({"concepts": [], "summary": 1, "flashcards": []})
    assert not ResultBuilder.validate_response_structure({"concepts": [], "summary": "S"})
    assert not ResultBuilder.validate_response_structure(
        {"concepts": [], "summary": "S", "flashcards": [{"question": "Q"}]}
    )


def test_assemble_backfills_each_missing_field():
    result = ResultBuilder.assemble(concepts=["Only concept"])
    assert result.concepts == ("Only concept",)
    assert result.summary == FALLBACK_SUMMARY
    assert [(c.question, c.answer) for c in result.flashcards] == list(FALLBACK_FLASHCARDS)


def test_assemble_drops_blank_entries():
    result = ResultBuilder.assemble(
        concepts=["", "  ", 3, "Kept"],
        summary="   ",
        flashcards=[("", "answer"), ("Question?", "Answer.")],
    )
    assert result.concepts == ("Kept",)
    assert result.summary == FALLBACK_SUMMARY
    assert [(c.question, c.answer) for c in result.flashcards] == [("Question?", "Answer.")]


def test_fallback_is_fully_generic():
    result = ResultBuilder.fallback()
    assert result.concepts == FALLBACK_CONCEPTS
    assert result.summary == FALLBACK_SUMMARY
    assert len(result.flashcards) == len(FALLBACK_FLASHCARDS)


def test_flashcard_ids_are_distinct():
    pairs = [(f"Question {i}?", f"Answer {i}.") for i in range(50)]
    result = ResultBuilder.assemble(["A"], "Summary here.", pairs)
    ids = [card.id for card in result.flashcards]
    assert len(set(ids)) == len(ids) == 50
    assert all(card_id for card_id in ids)


def test_to_dict_shape(sample_result):
    data = sample_result.to_dict()
    assert data["concepts"] == ["Topic"]
    assert data["summary"] == "A summary that is long enough."
    assert set(data["flashcards"][0]) == {"id", "question", "answer"}
