"""Prompt templates for AI card generation."""

CARD_GENERATION_PROMPT = """You are a flashcard creation expert. Generate exactly {card_count} flashcards based on this description: "{description}"

Requirements:
- Create {card_count} unique flashcard pairs
- Each line should be in the format: Front | Back
- Front: The question, term, or prompt
- Back: The answer, translation, or explanation
- Make the cards educational and useful for learning
- Vary the difficulty from basic to advanced
- Ensure all cards are relevant to the topic
- Do not include any explanations, just the cards
- Do not number the cards
- One card per line

Example format:
Apple | Appel
Bread | Brood
Cheese | Kaas

Now generate {card_count} flashcards:"""


def build_card_generation_prompt(description: str, card_count: int) -> str:
    return CARD_GENERATION_PROMPT.format(description=description.strip(), card_count=card_count)
