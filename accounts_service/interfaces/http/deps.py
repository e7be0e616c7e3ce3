from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ...config import Settings
from ...infrastructure.db import get_db
from ...infrastructure.repositories import AccountRepository
from ...infrastructure.security import PasswordHasher


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher

def get_repository(db: Session = Depends(get_db)) -> AccountRepository:
    return AccountRepository(db)
