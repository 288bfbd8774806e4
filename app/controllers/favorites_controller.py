"""
Controlador de favoritos - Carpetas y preguntas guardadas del usuario
"""

from fastapi import APIRouter

from app.core.dependencies import Database, CorrectUserOrAdmin
from app.services.folder_service import FolderService
from app.models.folder import FolderCreate, FolderRename, TriviaCreate, TriviaMove

router = APIRouter(prefix="/users/{username}", tags=["favorites"])


# ============================================
# 📌 FOLDERS
# ============================================

@router.get("/folders")
async def list_folders(username: str, user: CorrectUserOrAdmin, db: Database):
    """Carpetas del usuario; "All" siempre va primero."""
    folders = await FolderService(db).list_folders(username)
    return {"folders": [f.model_dump() for f in folders]}


@router.post("/folders")
async def create_folder(username: str, request: FolderCreate, user: CorrectUserOrAdmin, db: Database):
    folder = await FolderService(db).create_folder(username, request.name)
    return {"created": folder.model_dump()}


@router.get("/folders/{folder_id}")
async def get_folder(username: str, folder_id: str, user: CorrectUserOrAdmin, db: Database):
    """Carpeta con las preguntas guardadas en ella."""
    folder = await FolderService(db).get_folder(username, folder_id)
    return {"folder": folder.model_dump()}


@router.patch("/folders/{folder_id}")
async def rename_folder(
    username: str,
    folder_id: str,
    request: FolderRename,
    user: CorrectUserOrAdmin,
    db: Database
):
    folder = await FolderService(db).rename_folder(username, folder_id, request.new_name)
    return {"updated": folder.model_dump()}


@router.delete("/folders/{folder_id}")
async def delete_folder(username: str, folder_id: str, user: CorrectUserOrAdmin, db: Database):
    """Borra la carpeta y sus preguntas. "All" no se puede borrar."""
    folder = await FolderService(db).delete_folder(username, folder_id)
    return {"deleted": folder.model_dump()}


# ============================================
# 📌 FAVORITE TRIVIA
# ============================================

@router.get("/fav")
async def list_trivia(username: str, user: CorrectUserOrAdmin, db: Database):
    trivia = await FolderService(db).list_trivia(username)
    return {"trivia": [t.model_dump() for t in trivia]}


@router.post("/fav")
async def add_trivia(username: str, request: TriviaCreate, user: CorrectUserOrAdmin, db: Database):
    """Guarda una pregunta en la carpeta indicada (por defecto "All")."""
    trivia = await FolderService(db).add_trivia(username, request)
    return {"added": trivia.model_dump()}


@router.get("/fav/{trivia_id}")
async def get_trivia(username: str, trivia_id: str, user: CorrectUserOrAdmin, db: Database):
    trivia = await FolderService(db).get_trivia(username, trivia_id)
    return {"trivia": trivia.model_dump()}


@router.patch("/fav/{trivia_id}")
async def move_trivia(
    username: str,
    trivia_id: str,
    request: TriviaMove,
    user: CorrectUserOrAdmin,
    db: Database
):
    """Mueve la pregunta a otra carpeta del mismo usuario."""
    trivia = await FolderService(db).move_trivia(username, trivia_id, request.folder_name)
    return {"trivia": trivia.model_dump()}


@router.delete("/fav/{trivia_id}")
async def delete_trivia(username: str, trivia_id: str, user: CorrectUserOrAdmin, db: Database):
    trivia = await FolderService(db).delete_trivia(username, trivia_id)
    return {"deleted": trivia.model_dump()}
