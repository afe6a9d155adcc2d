from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List

MAX_CARD_SIDE_LENGTH = 5000


class CardInput(BaseModel):
    front: str = Field(min_length=1, max_length=MAX_CARD_SIDE_LENGTH)
    back: str = Field(min_length=1, max_length=MAX_CARD_SIDE_LENGTH)

    class Config:
        extra = "ignore"

    @field_validator('front', 'back')
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('Card text cannot be empty')
        return value

    @model_validator(mode='after')
    def sides_differ(self):
        if self.front.strip() == self.back.strip():
            raise ValueError('Front and back of a card must be different')
        return self


class CreateCardInput(CardInput):
    pass


class UpdateCardInput(CardInput):
    pass


class CreateDeckInput(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    cards: Optional[List[CardInput]] = None
    cards_text: Optional[str] = None

    class Config:
        extra = "ignore"

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('Deck name is required')
        return value


class UpdateDeckInput(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)

    class Config:
        extra = "ignore"

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('Deck name is required')
        return value


class BulkCardsInput(BaseModel):
    cards_text: str

    @field_validator('cards_text')
    @classmethod
    def long_enough(cls, value: str) -> str:
        if len(value.strip()) < 3:
            raise ValueError('Cards text must be at least 3 characters')
        return value


class GenerateCardsInput(BaseModel):
    description: str
    card_count: Optional[int] = Field(default=None, ge=1)

    @field_validator('description')
    @classmethod
    def long_enough(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 3:
            raise ValueError('Description must be at least 3 characters')
        return value


class AnswerInput(BaseModel):
    card_id: int
    answer: str = Field(max_length=MAX_CARD_SIDE_LENGTH)


class CardResultInput(BaseModel):
    card_id: int
    is_correct: bool


class StudySessionInput(BaseModel):
    mode: str = Field(pattern=r'^(flip|test)$')
    total_cards: int = Field(ge=0)
    correct_answers: int = Field(ge=0)
    card_results: List[CardResultInput] = Field(default_factory=list)

    @model_validator(mode='after')
    def correct_within_total(self):
        if self.correct_answers > self.total_cards:
            raise ValueError('correct_answers cannot exceed total_cards')
        return self


class RegisterInput(BaseModel):
    username: str = Field(min_length=3, max_length=80)
    email: str = Field(min_length=3, max_length=120, pattern=r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
    password: str = Field(min_length=8, max_length=128)

    @field_validator('username', 'email')
    @classmethod
    def strip_value(cls, value: str) -> str:
        return value.strip()


class LoginInput(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
