from typing import List
from fastapi import APIRouter, Depends, HTTPException
import logging

from ..application.services.user_service import UserService
from ..dependencies import get_user_service, require_admin
from ..schemas.common.common import InsertResult, UpdateResult
from ..schemas.users.user import AdminStatusResponse, UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=InsertResult, response_model_exclude_none=True)
def create_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    try:
        user = user_service.register(user_data.email, user_data.name)
        if not user:
            return InsertResult(acknowledged=False, message="User already exists")
        return InsertResult(acknowledged=True, insertedId=user.id)
    except Exception as e:
        logger.error(f"Error creating user: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create user")


@router.get("", response_model=List[UserResponse])
def get_users(user_service: UserService = Depends(get_user_service)):
    try:
        return [
            UserResponse(id=u.id, email=u.email, name=u.name, role=u.role)
            for u in user_service.list_users()
        ]
    except Exception as e:
        logger.error(f"Error retrieving users: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve users")


@router.put("/admin/{user_id}", response_model=UpdateResult)
def make_admin(
    user_id: str,
    admin_email: str = Depends(require_admin),
    user_service: UserService = Depends(get_user_service),
):
    try:
        matched, modified = user_service.promote_to_admin(user_id)
        logger.info(f"{admin_email} promoted user {user_id} (matched={matched}, modified={modified})")
        return UpdateResult(matchedCount=matched, modifiedCount=modified)
    except Exception as e:
        logger.error(f"Error promoting user {user_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to update user role")


@router.get("/admin/{email}", response_model=AdminStatusResponse)
def get_admin_status(
    email: str,
    user_service: UserService = Depends(get_user_service),
):
    try:
        return AdminStatusResponse(isAdmin=user_service.is_admin(email))
    except Exception as e:
        logger.error(f"Error checking admin status: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to check admin status")
