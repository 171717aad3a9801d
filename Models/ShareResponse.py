from pydantic import BaseModel, Field

class ShareResponse(BaseModel):
    """Represents the response returned from the /api/share endpoint."""
    message: str = Field(..., description="Human-readable delivery confirmation listing the recipients.")
