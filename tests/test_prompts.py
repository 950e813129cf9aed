from quiz_service.prompts import EXAMPLE_QUESTION, build_prompt


def test_prompt_contains_request_fields():
    prompt = build_prompt("7", "Kuvvet ve Enerji", "Sürtünme Kuvveti", 5)
    assert "7. sınıf" in prompt
    assert '"Kuvvet ve Enerji"' in prompt
    assert '"Sürtünme Kuvveti"' in prompt
    assert "5 adet" in prompt


def test_prompt_is_deterministic():
    args = ("5", "Canlılar Dünyası", "Mikroskobik Canlılar", 3)
    assert build_prompt(*args) == build_prompt(*args)


def test_prompt_states_format_rules_and_example():
    prompt = build_prompt("8", "DNA ve Genetik Kod", "Mutasyon", 4)
    assert '{"questions": [{"question": "...", "options": ["A", "B", "C", "D"], "answer": 0' in prompt
    assert "TAM 4 şık" in prompt
    assert "0-3" in prompt
    assert prompt.endswith(EXAMPLE_QUESTION)
