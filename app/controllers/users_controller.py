"""
Controlador de usuarios - Perfil, stats e insignias

Todas las rutas /users/{username}/... las puede usar el mismo usuario o un admin.
El listado y la creación de usuarios son solo para admins.
"""

from fastapi import APIRouter, status
from pydantic import BaseModel

from app.core.dependencies import Database, CurrentAdmin, CorrectUserOrAdmin
from app.services.auth_service import AuthService
from app.services.badge_service import BadgeService
from app.services.points_service import PointsService, to_response
from app.services.user_service import UserService
from app.models.badge import BadgeCreate
from app.models.results import as_payload
from app.models.stats import PointsUpdate
from app.models.user import UserCreate, UserUpdate, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


class CreatedUserResponse(BaseModel):
    user: UserResponse
    token: str


# ============================================
# 📌 USERS
# ============================================

@router.post("", response_model=CreatedUserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: UserCreate, admin: CurrentAdmin, db: Database):
    """
    Alta de usuario hecha por un admin (no es el registro público).

    El usuario nuevo puede ser admin.
    """
    auth_service = AuthService(db)
    user, token = await auth_service.register(request, allow_admin=True)

    return CreatedUserResponse(user=UserResponse.from_user(user), token=token)


@router.get("")
async def list_users(admin: CurrentAdmin, db: Database):
    """Listado de todos los usuarios (solo admin)."""
    users = await UserService(db).list_users()
    return {"users": [UserResponse.from_user(u) for u in users]}


@router.get("/{username}")
async def get_user(username: str, user: CorrectUserOrAdmin, db: Database):
    found = await UserService(db).get_user(username)
    return {"user": UserResponse.from_user(found)}


@router.patch("/{username}")
async def update_user(username: str, request: UserUpdate, user: CorrectUserOrAdmin, db: Database):
    """
    Actualización parcial del perfil.

    Campos: password, first_name, last_name, email
    """
    updated = await UserService(db).update_user(username, request)
    return {"user": UserResponse.from_user(updated)}


@router.delete("/{username}")
async def delete_user(username: str, user: CorrectUserOrAdmin, db: Database):
    """Borra el usuario junto con todos sus datos."""
    await UserService(db).remove_user(username)
    return {"deleted": username}


# ============================================
# 📌 STATS
# ============================================

@router.get("/{username}/stats")
async def get_stats(username: str, user: CorrectUserOrAdmin, db: Database):
    """Nivel, título, puntos y cuánto falta para el próximo nivel."""
    stats = await PointsService(db).get_stats(username)
    return {"stats": to_response(stats)}


@router.post("/{username}/stats")
async def add_points(username: str, request: PointsUpdate, user: CorrectUserOrAdmin, db: Database):
    """
    Suma `new_points` a las stats y cuenta un quiz completado.

    El nivel y el título se recalculan con la tabla de niveles.
    """
    stats = await PointsService(db).add_points_for(username, request.new_points)
    return {"updated": to_response(stats)}


# ============================================
# 📌 BADGES
# ============================================

@router.get("/{username}/badges")
async def get_badges(username: str, user: CorrectUserOrAdmin, db: Database):
    badges = await BadgeService(db).get_badges(username)
    return {"badges": badges}


@router.post("/{username}/badges")
async def award_badge(username: str, request: BadgeCreate, user: CorrectUserOrAdmin, db: Database):
    """Otorga una insignia; si ya la tenía responde con un mensaje."""
    result = await BadgeService(db).award(username, request.badge)
    return as_payload(result)
