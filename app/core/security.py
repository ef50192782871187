from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Request, Response
from fastapi.security import OAuth2PasswordBearer

from sqlmodel import Session
from app.core.config import Settings, get_settings
from app.core.errors import Unauthenticated
from app.database import get_session
from app.models.user import User

# Manejo de contraseñas
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Header "Authorization: Bearer ..." opcional; la cookie tiene prioridad
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)

# Funciones de seguridad
def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

def create_access_token(subject: str, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode = {"sub": subject, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)

def decode_access_token(token: str, settings: Settings) -> UUID:
    """Devuelve el id de usuario contenido en el token o lanza Unauthenticated."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        raise Unauthenticated("Session expired. Please login again.")
    except JWTError:
        raise Unauthenticated("Invalid token. Please login again.")

    user_id_str = payload.get("sub")
    if user_id_str is None:
        raise Unauthenticated("Invalid token. Please login again.")
    try:
        return UUID(user_id_str)
    except ValueError:
        raise Unauthenticated("Invalid token. Please login again.")

def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )

def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )

def get_current_user(
    request: Request,
    bearer_token: Optional[str] = Depends(oauth2_scheme),
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> User:
    token = request.cookies.get(settings.cookie_name) or bearer_token
    if not token:
        raise Unauthenticated("Authentication required. Please login to continue.")

    user_id = decode_access_token(token, settings)

    user = session.get(User, user_id)
    if not user:
        raise Unauthenticated("User not found. Please login again.")

    request.state.user_id = str(user.id)
    return user
