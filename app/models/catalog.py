from pydantic import BaseModel, Field


class Category(BaseModel):
    """Categoría de Open Trivia DB (el id es el mismo que usa la API)"""

    id: int = Field(..., alias="_id")
    name: str

    class Config:
        populate_by_name = True


class Difficulty(BaseModel):
    type: int = Field(..., alias="_id")  # 1 easy | 2 medium | 3 hard
    difficulty: str

    class Config:
        populate_by_name = True


class Question(BaseModel):
    """Pregunta lista para jugar, con las respuestas ya mezcladas"""

    category: str
    difficulty: str
    question: str
    correct_answer: str
    incorrect_answers: list[str]
    answers: list[str]
