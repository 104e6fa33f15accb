"""
Pydantic models shared across endpoints: error bodies, the health
check payload and the static service descriptor.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
    details: Optional[Any] = None


class HealthRead(BaseModel):
    status: str
    timestamp: str
    uptime: float
    environment: str


class ApiInfo(BaseModel):
    name: str
    version: str
    description: str
    endpoints: Dict[str, str]
