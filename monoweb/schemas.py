from pydantic import BaseModel, Field
from typing import Optional

class DownloadResponse(BaseModel):
    status: int
    contentType: str = Field(description="Upstream Content-Type header or 'unknown'")
    content: str

class TransformRequest(BaseModel):
    # Both optional on the wire so a missing field is reported as 400, not 422
    htmlContent: Optional[str] = None
    originalUrl: Optional[str] = None

class TransformResponse(BaseModel):
    modifiedContent: str
    warning: Optional[str] = Field(None, description="Set when links were not rewritten or the AI returned nothing")

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
