from pydantic import BaseModel, Field

class SummaryResponse(BaseModel):
    """Represents the response returned from the /api/summarize endpoint."""
    summary: str = Field(..., description="The generated summary text.")
