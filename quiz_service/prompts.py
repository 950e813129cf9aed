# quiz_service/prompts.py
"""Prompt sent to the text-generation model.

The product serves Turkish middle-school science classes, so the instructions
and the worked example are written in Turkish. The example anchors the output
format; keep its keys in sync with ``CandidateQuestion``.
"""

EXAMPLE_QUESTION = """{
  "question": "Güneş'in çekirdeğinde gerçekleşen füzyon reaksiyonu sonucunda ne oluşur?",
  "options": [
    "Sadece ışık",
    "Işık ve ısı enerjisi",
    "Sadece ısı enerjisi",
    "Sadece radyasyon"
  ],
  "answer": 1,
  "explanation": "Güneş'te hidrojen çekirdeği birleşerek helyuma dönüşür ve bu süreçte devasa miktarda ışık ve ısı enerjisi açığa çıkar."
}"""


def build_prompt(grade: str, unit: str, topic: str, question_count: int) -> str:
    return f"""Sen bir Fen Bilimleri öğretmenisin.
{grade}. sınıf seviyesine uygun, "{unit}" ünitesi, "{topic}" konusu için {question_count} adet çoktan seçmeli soru hazırla.

KRİTİK KURALLAR:
1. SADECE JSON formatında cevap ver
2. Format: {{"questions": [{{"question": "...", "options": ["A", "B", "C", "D"], "answer": 0, "explanation": "..."}}]}}
3. Her soruda TAM 4 şık olsun
4. answer 0-3 arasında bir tam sayı olmalı (0=A, 1=B, 2=C, 3=D)
5. Cümleler kısa ve anlaşılır olsun
6. Sorular {grade}. sınıf seviyesinde olsun
7. Açıklamalar basit ve öğretici olsun
8. Türkçe ve anlaşılır dil kullan
9. JSON syntax hatası yapma

ÖRNEK SORU:
{EXAMPLE_QUESTION}"""
