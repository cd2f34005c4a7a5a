"""Product value object."""
from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A named product with a list price."""
    model_config = ConfigDict(frozen=True)

    name: str
    price: float = Field(..., ge=0, description="List price before any discount")
