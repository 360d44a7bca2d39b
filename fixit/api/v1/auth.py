"""
Session login API
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fixit.constants.operation_types import OperationType, OperationResult
from fixit.constants.repair import LOGIN_FAILED_MESSAGE
from fixit.core.security import create_access_token, get_current_user
from fixit.db.session import get_db
from fixit.schemas.common import ApiResponse, ResponseCode
from fixit.schemas.user_schemas import LoginRequest, LoginResult, UserOut
from fixit.services.user_service import UserService
from fixit.utils.log_helper import log_operation

router = APIRouter()


@router.post("/login", response_model=ApiResponse, summary="Log in")
def login(login_in: LoginRequest, db: Session = Depends(get_db)):
    """Check the stored password and hand out a session token"""
    user = UserService.authenticate(db, login_in.username, login_in.password)
    if user is None:
        log_operation(OperationType.AUTH_LOGIN_FAILED, login_in.username, login_in.username, OperationResult.FAILED)
        return ApiResponse(code=ResponseCode.UNAUTHORIZED, message=LOGIN_FAILED_MESSAGE)

    log_operation(OperationType.AUTH_LOGIN, user.username, user.username)
    return ApiResponse(
        code=ResponseCode.SUCCESS,
        message="Login successful",
        data=LoginResult(access_token=create_access_token(user), user=user),
    )


@router.get("/me", response_model=ApiResponse, summary="Current session user")
def read_me(current_user: UserOut = Depends(get_current_user)):
    return ApiResponse(code=ResponseCode.SUCCESS, message="OK", data=current_user)


@router.post("/logout", response_model=ApiResponse, summary="Log out")
def logout(current_user: UserOut = Depends(get_current_user)):
    """Sessions are stateless tokens; the client just forgets its token."""
    return ApiResponse(code=ResponseCode.SUCCESS, message="Logged out")
