from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    authorized: bool

    model_config = {"frozen": True}  # Immutable
