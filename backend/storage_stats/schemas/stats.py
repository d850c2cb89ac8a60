"""
Stats response schemas.
"""
from pydantic import BaseModel, ConfigDict, Field


class StatsResult(BaseModel):
    """Storage size of one collection."""
    model_config = ConfigDict(populate_by_name=True)

    database: str = Field(..., description="Database name")
    collection: str = Field(..., description="Collection name")
    storage_size: int = Field(
        ...,
        alias="storageSize",
        ge=0,
        description="On-disk size in bytes as reported by collStats",
    )


class ErrorResponse(BaseModel):
    """Body returned for every non-2xx response."""
    error: str
