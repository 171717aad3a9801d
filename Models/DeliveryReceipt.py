from typing import List

from pydantic import BaseModel

class DeliveryReceipt(BaseModel):
    """Recipients a summary email was submitted to, in request order."""
    recipients: List[str]
