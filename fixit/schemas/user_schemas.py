from pydantic import AliasChoices, Field
from typing import Optional, Literal

from fixit.schemas.common import BaseSchema

UserRole = Literal["staff", "user"]


class UserBase(BaseSchema):
    name: str = Field(..., min_length=1, description="display name")
    role: UserRole = "user"
    position: Optional[str] = None
    dept: Optional[str] = None


class UserCreate(UserBase):
    # "user"/"pass" are the keys used by bulk import payloads
    username: str = Field(..., min_length=1, validation_alias=AliasChoices("username", "user"))
    password: str = Field(..., min_length=1, validation_alias=AliasChoices("password", "pass"))


class UserOut(UserBase):
    username: str


class LoginRequest(BaseSchema):
    username: str
    password: str


class LoginResult(BaseSchema):
    access_token: str
    token_type: str = "bearer"
    user: UserOut


class BulkImportRequest(BaseSchema):
    """Either a JSON array of users or CSV lines: user,pass,name,role,position,dept"""
    content: str = Field(..., min_length=1)
