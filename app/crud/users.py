# File: /app/crud/users.py | Version: 1.0 | Path: /app/crud/users.py
from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import User
from app.schemas.user import UserInput
from app.security import get_password_hash

# -------- Users --------


def get_user_by_email(db: Session, *, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def email_exists(db: Session, *, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def create_user(db: Session, *, data: UserInput) -> User:
    """
    Insert a user from validated input. The password is stored as a bcrypt hash
    and the profile picture starts empty. IntegrityError (duplicate email) is
    re-raised after rollback.
    """
    user = User(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        hashed_password=get_password_hash(data.password),
        phone_number=data.phone_number,
        profile_picture="",
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(user)
    return user
