from typing import Optional
from pydantic import BaseModel


class WebhookResponse(BaseModel):
    """Acknowledgement returned to GitHub for every webhook delivery."""
    status: str
    reason: Optional[str] = None
    pr: Optional[str] = None
    event: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
