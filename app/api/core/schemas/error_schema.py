from typing import Any, Dict

from pydantic import BaseModel, Field


class ErrorResponseModel(BaseModel):
    """
    Standardized error response model for API endpoints.

    Attributes:
        success (bool): Indicates failed operation (always False).
        error (dict): Error body with members:
            - code: machine-readable identifier
              (e.g., "VALIDATION_ERROR", "NOT_FOUND", "EMAIL_USED").
            - message: human-readable description of the error.
            - details: optional field-level errors; keys are field names,
              values are lists of error messages.
    """

    success: bool = Field(default=False, description="Indicates failed operation")
    error: Dict[str, Any] = Field(..., description="Error code, message and optional details")
