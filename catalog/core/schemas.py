from pydantic import BaseModel, Field
from typing import Optional, List


class ErrorResponseDetail(BaseModel):
    """Single field-level error"""
    loc: List[str] = Field(default_factory=list, description="Location of the offending field")
    msg: str = Field(..., description="Error description")
    type: str = Field(..., description="Error type")


class ErrorResponse(BaseModel):
    """Standard error response body"""
    message: str = Field(..., description="Human readable error message")
    error_code: str = Field(..., description="Machine readable error code (e.g. game_not_found)")
    details: Optional[List[ErrorResponseDetail]] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Game does not exist", "error_code": "game_not_found"},
                {
                    "message": "A game with this name already exists for this producer",
                    "error_code": "game_already_exists",
                },
            ]
        }
    }
