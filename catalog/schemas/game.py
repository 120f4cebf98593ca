"""
Pydantic schemas - games
"""
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict, field_validator


class GameInput(BaseModel):
    """Data required to register or fully update a game"""
    name: str = Field(..., description="Game name", min_length=1, max_length=100, examples=["Chrono Trigger"])
    producer: str = Field(..., description="Game producer", min_length=1, max_length=100, examples=["Square"])
    price: float = Field(..., description="Game price", ge=0, allow_inf_nan=False, examples=[9.99])

    model_config = ConfigDict(extra='ignore')

    @field_validator("name", "producer")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class GameView(BaseModel):
    """Game as returned by the API"""
    id: UUID = Field(..., description="Game ID")
    name: str = Field(..., description="Game name")
    producer: str = Field(..., description="Game producer")
    price: float = Field(..., description="Game price")

    model_config = ConfigDict(from_attributes=True)
