"""
Constants for BuildCast - prompts and generic fallback content
"""

SYSTEM_PROMPT = """Extract key concepts, create a summary, and generate flashcards from the material.

Respond with valid JSON only:
{
  "concepts": ["concept1", "concept2", "concept3"],
  "summary": "Brief explanation in 1-2 sentences",
  "flashcards": [
    {"question": "Simple question", "answer": "Clear answer"}
  ]
}

Keep responses concise and complete."""

USER_PROMPT_TEMPLATE = "Analyze this material briefly and respond with valid JSON:\n\n{content}"

# Generic content used whenever a field cannot be recovered from the model reply
FALLBACK_CONCEPTS = (
    "Key Concept 1",
    "Key Concept 2",
    "Key Concept 3",
)

FALLBACK_SUMMARY = "This material contains important concepts for learning and understanding."

FALLBACK_FLASHCARDS = (
    (
        "What are the main topics covered in this material?",
        "The material covers various important concepts and principles.",
    ),
    (
        "What should you focus on when studying this content?",
        "Focus on understanding the key concepts and their applications.",
    ),
)

# Salvage limits
MAX_SALVAGED_FLASHCARDS = 8
MAX_GUESSED_CONCEPTS = 8
MIN_SUMMARY_LENGTH = 10
MIN_FLASHCARD_TEXT_LENGTH = 5

# Tiny silent MP3 returned when speech synthesis is unavailable
MOCK_AUDIO_URL = (
    "data:audio/mpeg;base64,SUQzBAAAAAABEVRYWFgAAAAtAAADY29tbWVudABCaWdTb3VuZEJhbmsuY29tIC8gTGFTb25vdGhlcXVlLm9yZwBURU5DAAAAHQAAAW1wM1BSRQAAAAAAAAAAAAAAAAAAAAAAAAAAAP/70DEAAAIAMH2cQIQlAAAKAwAAAP/70DEIAAUcCZJM4JLAAAADoYB5M4JJAAIKAwAAg=="
)
