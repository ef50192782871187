import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select
from app.models.user import User
from app.schemas.user import UserCreate, UserLogin, UserRead
from app.core.config import Settings, get_settings
from app.core.errors import Conflict, Unauthenticated
from app.core.security import (
    clear_session_cookie,
    create_access_token,
    get_current_user,
    get_password_hash,
    set_session_cookie,
    verify_password,
)
from app.database import get_session

router = APIRouter(tags=["auth"])

logger = logging.getLogger(__name__)

# Registro
@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(
    user_create: UserCreate,
    response: Response,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    user_exists = session.exec(select(User).where(User.email == user_create.email)).first()
    if user_exists:
        raise Conflict("User with this email already exists")

    user = User(
        first_name=user_create.first_name,
        last_name=user_create.last_name,
        email=user_create.email,
        hashed_password=get_password_hash(user_create.password),
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        # dos registros simultáneos: el índice único rechaza el segundo
        session.rollback()
        raise Conflict("User with this email already exists")
    session.refresh(user)
    logger.info("User %s registered", user.id)

    set_session_cookie(response, create_access_token(str(user.id), settings), settings)
    return {"message": "User registered successfully", "data": UserRead.model_validate(user)}

# Login
@router.post("/login")
def login(
    credentials: UserLogin,
    response: Response,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    user = session.exec(select(User).where(User.email == credentials.email)).first()
    if not user or not verify_password(credentials.password, user.hashed_password):
        raise Unauthenticated("Invalid email or password")

    set_session_cookie(response, create_access_token(str(user.id), settings), settings)
    return {"message": "Login successful", "data": UserRead.model_validate(user)}

@router.post("/logout")
def logout(response: Response, settings: Settings = Depends(get_settings)):
    clear_session_cookie(response, settings)
    return {"message": "User logged out successfully"}

# Rutas protegidas
@router.get("/profile")
def profile(user: User = Depends(get_current_user)):
    return {"message": "Profile fetched successfully", "data": UserRead.model_validate(user)}

@router.get("/check-auth")
def check_auth(user: User = Depends(get_current_user)):
    return {"authenticated": True, "user": UserRead.model_validate(user)}
