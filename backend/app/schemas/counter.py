from pydantic import BaseModel, Field

class ReferenceNumberResponse(BaseModel):
    reference_number: str

class VisitorCountResponse(BaseModel):
    visitor_count: int = Field(..., alias="visitorCount")

    class Config:
        populate_by_name = True
