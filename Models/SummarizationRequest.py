from pydantic import BaseModel

class SummarizationRequest(BaseModel):
    """Represents a validated /api/summarize request."""
    transcript: str
    prompt: str
