from pydantic import BaseModel

class ShareRequest(BaseModel):
    """Represents a validated /api/share request. `emails` is a comma-separated list."""
    summary: str
    emails: str
