from buildcast.parsers import PartialExtractor


def test_concepts_from_concepts_field():
    text = '{"concepts": ["Mitosis", "Meiosis"], "summary": "x"}'
    assert PartialExtractor.extract_concepts(text) == ["Mitosis", "Meiosis"]


def test_concepts_guessed_when_array_is_cut_off():
    text = '{"concepts": ["Cell", "DNA"'
    # "DNA" is too short to count as a guess
    assert PartialExtractor.extract_concepts(text) == ["Cell"]


def test_concept_guesses_skip_field_words_and_lowercase():
    text = '"Which question is it", "lowercase thing", "Real Concept"'
    assert PartialExtractor.extract_concepts(text) == ["Real Concept"]


def test_concept_guesses_are_capped():
    text = ", ".join(f'"Concept {i}"' for i in range(12))
    assert len(PartialExtractor.extract_concepts(text)) == 8


def test_summary_is_unescaped():
    text = r'{"summary": "He said \"hi\" and\nleft early."}'
    assert PartialExtractor.extract_summary(text) == 'He said "hi" and left early.'


def test_unterminated_summary_is_recovered():
    text = '{"summary": "This summary was cut off mid'
    assert PartialExtractor.extract_summary(text) == "This summary was cut off mid"


def test_short_or_missing_summary_is_empty():
    assert PartialExtractor.extract_summary('{"summary": "Short"}') == ""
    assert PartialExtractor.extract_summary("no fields at all") == ""


def test_flashcards_pair_questions_with_answers():
    text = (
        '[{"question": "What is DNA?", "answer": "Genetic material."}, '
        '{"question": "Q?", "answer": "Too short question."}, '
        '{"question": "Where is DNA?", "answer": "In the \\"nucleus\\"."}]'
    )
    assert PartialExtractor.extract_flashcards(text) == [
        ("What is DNA?", "Genetic material."),
        ("Where is DNA?", 'In the "nucleus".'),
    ]


def test_flashcards_are_capped():
    text = ", ".join(
        f'{{"question": "Question number {i}?", "answer": "Answer number {i}."}}' for i in range(10)
    )
    pairs = PartialExtractor.extract_flashcards(text)
    assert len(pairs) == 8
    assert pairs[0] == ("Question number 0?", "Answer number 0.")


def test_flashcard_answer_may_follow_other_text():
    text = '"question": "What is osmosis?", "hint": "water", "answer": "Diffusion of water."'
    assert PartialExtractor.extract_flashcards(text) == [("What is osmosis?", "Diffusion of water.")]


def test_unanswered_question_pairs_with_next_answer():
    text = (
        '"question": "First question?", '
        '"question": "Second question?", "answer": "Second answer."'
    )
    assert PartialExtractor.extract_flashcards(text) == [("First question?", "Second answer.")]


def test_many_unanswered_questions_are_cheap():
    text = ", ".join('{"question": "Unanswered question?"}' for _ in range(50000))
    assert PartialExtractor.extract_flashcards(text) == []
