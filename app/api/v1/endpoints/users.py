from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.user import User, UserCreate, UserUpdate
from app.services.user import user_service

router = APIRouter()


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    *,
    db: Session = Depends(get_db),
    user_in: UserCreate
) -> Any:
    """
    Create User

    Registers a new gym member.

    Raises:
        HTTPException 409: Email already registered.
    """
    return user_service.create_user(db, user_in)


@router.get("/{user_id}", response_model=User)
def read_user(
    user_id: int = Path(..., description="ID of the user"),
    db: Session = Depends(get_db)
) -> Any:
    """
    Get User by ID

    Raises:
        HTTPException 404: User not found.
    """
    user = user_service.get_user(db, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id {user_id} not found"
        )
    return user


@router.put("/{user_id}", response_model=User)
def update_user(
    *,
    user_id: int = Path(..., description="ID of the user"),
    db: Session = Depends(get_db),
    user_in: UserUpdate
) -> Any:
    """
    Update User

    Only the fields present in the body are written; `"phone": null` clears the phone.

    Raises:
        HTTPException 404: User not found.
        HTTPException 409: Email already registered by another user.
    """
    return user_service.update_user(db, user_id=user_id, user_in=user_in)
