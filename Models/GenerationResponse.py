from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

class Part(BaseModel):
    model_config = ConfigDict(extra='ignore')

    text: Optional[str] = None

class Content(BaseModel):
    model_config = ConfigDict(extra='ignore')

    parts: Optional[List[Any]] = None

class Candidate(BaseModel):
    model_config = ConfigDict(extra='ignore')

    content: Optional[Content] = None

class GenerationResponse(BaseModel):
    """
    The subset of the Gemini generateContent response the service reads.
    Every level is optional; the provider omits candidates when a prompt is blocked.
    Only candidates[0] and its parts[0] are validated, later entries are never read.
    """
    model_config = ConfigDict(extra='ignore')

    candidates: Optional[List[Any]] = None

    def first_text(self) -> Optional[str]:
        """Raises pydantic.ValidationError when an element on the read path has the wrong shape."""
        if not self.candidates:
            return None
        content = Candidate.model_validate(self.candidates[0]).content
        if content is None or not content.parts:
            return None
        return Part.model_validate(content.parts[0]).text

class GenerationResult(BaseModel):
    text: str
