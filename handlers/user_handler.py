"""
handlers/user_handler.py
-------------------------
HTTP endpoints for the users collection.
Each endpoint borrows one pooled connection for its own duration and lets
typed errors propagate to the handlers registered in ``app.py``.
"""

from typing import Any

from fastapi import APIRouter, Depends, Path, Request
from pydantic import BaseModel

from db.connection import ConnectionPool
from models.user import User
from repositories.user_repo import UserRepository

user_repo = UserRepository()

router = APIRouter(prefix="/users", tags=["users"])


class UserCreate(BaseModel):
    email: str
    first_name: str
    last_name: str
    username: str

    def to_user(self) -> User:
        return User(**self.model_dump(include=set(User.FIELDS)))


def get_pool(request: Request) -> ConnectionPool:
    """Dependency returning the pool attached by ``create_app``."""
    return request.app.state.pool


@router.post("")
def add_user(payload: UserCreate, db_pool: ConnectionPool = Depends(get_pool)) -> dict[str, Any]:
    """Create a user from the JSON body and echo the stored record."""
    with db_pool.connection() as conn:
        user = user_repo.add(conn, payload.to_user())
    return user.to_dict()


@router.get("")
def get_users(db_pool: ConnectionPool = Depends(get_pool)) -> list[dict[str, Any]]:
    with db_pool.connection() as conn:
        users = user_repo.get_all(conn)
    return [u.to_dict() for u in users]


@router.get("/{user_id}")
def get_user_by_id(
    user_id: int = Path(..., ge=0),
    db_pool: ConnectionPool = Depends(get_pool),
) -> dict[str, Any]:
    with db_pool.connection() as conn:
        user = user_repo.get_by_id(conn, user_id)
    return user.to_dict()
