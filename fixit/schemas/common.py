"""
Shared response envelope and base schema
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Any
from datetime import datetime


class BaseSchema(BaseModel):
    """Base schema"""
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class ResponseCode:
    """Business status codes"""
    SUCCESS = 0                    # success
    PARAM_ERROR = 1001             # bad parameters
    NOT_FOUND = 1002               # resource not found
    ALREADY_EXISTS = 1003          # resource already exists
    PERMISSION_DENIED = 1004       # role not allowed
    UNAUTHORIZED = 1005            # not logged in / bad credentials
    BAD_REQUEST = 4000             # malformed request
    INTERNAL_ERROR = 5000          # internal error
    DATABASE_ERROR = 5001          # database error
    EXTERNAL_API_ERROR = 5002      # upstream API error


class ApiResponse(BaseSchema):
    """Standard API response"""
    code: int = Field(..., description="business code: 0 success, non-zero failure")
    message: str = Field(..., description="response message")
    data: Optional[Any] = Field(None, description="payload")
    timestamp: datetime = Field(default_factory=datetime.now, description="response time")


class ApiListResponse(BaseSchema):
    """Standard list response"""
    code: int = Field(..., description="business code: 0 success, non-zero failure")
    message: str = Field(..., description="response message")
    data: List[Any] = Field(default_factory=list, description="payload items")
    total: int = Field(0, description="total records")
    timestamp: datetime = Field(default_factory=datetime.now, description="response time")
