from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Any, Optional
from app.schemas.common import ObjectIdStr, stringify_id


class BidJobCreate(BaseModel):
    """입찰 등록용 (추가 필드 허용)"""
    model_config = ConfigDict(extra="allow")

    email: EmailStr
    jobId: ObjectIdStr
    buyer: Optional[EmailStr] = None
    status: str = "pending"


class BidStatusUpdate(BaseModel):
    status: str


class BidJobResponse(BaseModel):
    """입찰 응답 스키마"""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., alias="_id")
    email: str
    jobId: str
    buyer: Optional[Any] = None
    status: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        return stringify_id(value)
