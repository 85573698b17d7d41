"""
Error models for API error responses
"""
from pydantic import BaseModel
from typing import Optional, List


class ErrorDetail(BaseModel):
    """Individual error detail"""
    field: Optional[str] = None
    message: str


class ErrorResponse(BaseModel):
    """Standard error response format"""
    error: str
    message: str
    details: Optional[List[ErrorDetail]] = None
    status_code: int
