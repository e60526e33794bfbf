from typing import Any, Optional

from pydantic import BaseModel, Field


class SuccessResponseModel(BaseModel):
    """
    Standardized success response model for API endpoints.

    Attributes:
        success (bool): Indicates successful operation (always True).
        data (Any): Actual response payload. Optional.
    """

    success: bool = Field(default=True, description="Indicates successful operation")
    data: Optional[Any] = Field(default=None, description="Response payload")
