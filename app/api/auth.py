import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session, select
from uuid import UUID
from app.models.user import User
from app.schemas.user import UserCreate, UserRead
from app.core.errors import AuthError, ConflictError
from app.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    get_current_user,
)
from app.database import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# Registro
@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    user_exists = session.exec(select(User).where(User.email == user_create.email)).first()
    if user_exists:
        raise ConflictError("Email already registered")

    hashed_pwd = get_password_hash(user_create.password)
    user = User(email=user_create.email, hashed_password=hashed_pwd)
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Registered user %s", user.id)
    return UserRead(id=user.id, email=user.email)

# Login
@router.post("/login")
def login(form_data: OAuth2PasswordRequestForm = Depends(), session: Session = Depends(get_session)):
    user = session.exec(select(User).where(User.email == form_data.username)).first()
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise AuthError("Incorrect email or password")

    access_token = create_access_token(data={"sub": str(user.id)})
    return {"access_token": access_token, "token_type": "bearer"}

# Ruta protegida
@router.get("/me")
def read_users_me(user_id: UUID = Depends(get_current_user)):
    return {"user_id": str(user_id)}
