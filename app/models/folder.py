from typing import Optional
from pydantic import BaseModel, Field

# Carpeta que se crea al registrarse y no se puede borrar ni renombrar
DEFAULT_FOLDER = "All"


class Folder(BaseModel):
    id: str = Field(..., alias="_id")
    user_id: str
    name: str

    class Config:
        populate_by_name = True


class FolderCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=25)


class FolderRename(BaseModel):
    new_name: str = Field(..., min_length=1, max_length=25)


class Trivia(BaseModel):
    """Pregunta guardada como favorita"""

    id: str = Field(..., alias="_id")
    user_id: str
    folder_id: str
    question: str
    answer: str

    class Config:
        populate_by_name = True


class TriviaCreate(BaseModel):
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    folder_name: Optional[str] = DEFAULT_FOLDER


class TriviaMove(BaseModel):
    folder_name: str = Field(..., min_length=1)


class FolderWithTrivia(BaseModel):
    folder_id: str
    folder_name: str
    trivia: list[Trivia] = []
