from typing import Optional
from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    """Incoming payload from the browser front end."""
    cssCode: Optional[str] = Field(
        None,
        description="Raw CSS text to convert; rejected by the relay when missing or blank."
    )
