"""
Controlador de autenticación - Registro y login con usuario/contraseña
"""

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from app.core.dependencies import Database, CurrentUser
from app.services.auth_service import AuthService
from app.models.user import UserCreate, UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])


# Cuerpo del login
class TokenRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1, max_length=128)


# Respuesta con JWT
class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"


@router.post("/token", response_model=TokenResponse)
async def login(request: TokenRequest, db: Database):
    """
    Login con usuario y contraseña.

    Devuelve un JWT para usar en la cabecera `Authorization: Bearer <token>`.
    Credenciales incorrectas → 401.
    """
    auth_service = AuthService(db)
    _, token = await auth_service.authenticate(request.username, request.password)

    return TokenResponse(token=token)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(request: UserCreate, db: Database):
    """
    Registro de un usuario nuevo.

    Crea también sus stats en cero y la carpeta de favoritos "All".
    Username repetido → 400.
    """
    auth_service = AuthService(db)
    _, token = await auth_service.register(request)

    return TokenResponse(token=token)


@router.get("/me", response_model=UserResponse)
async def get_current_user(user: CurrentUser):
    """
    Devuelve el usuario actualmente autenticado.

    Requiere un JWT válido en la cabecera `Authorization`.
    """
    return UserResponse.from_user(user)
