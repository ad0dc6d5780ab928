from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
import logging

from ..application.services.auth_service import AuthService
from ..dependencies import get_auth_service
from ..schemas.users.user import AccessTokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["Authentication"])


@router.get("/jwt", response_model=AccessTokenResponse)
def issue_jwt(
    email: str = Query(..., min_length=1),
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        token = auth_service.issue_token(email)
    except Exception as e:
        logger.error(f"Error issuing token: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to issue token")

    if not token:
        logger.info("Token requested for an unregistered email")
        return JSONResponse(status_code=403, content={"accessToken": ""})
    return AccessTokenResponse(accessToken=token)
