from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from datetime import date, datetime
from typing import Any, Dict, Optional, Union
from app.schemas.common import stringify_id


class Buyer(BaseModel):
    """공고 등록자 정보 (email 외 필드는 자유롭게 허용)"""
    model_config = ConfigDict(extra="allow")

    email: EmailStr


class JobBase(BaseModel):
    """공고 기본 필드 스키마 (추가 필드 허용)"""
    model_config = ConfigDict(extra="allow")

    title: str
    category: str
    deadline: Union[datetime, date]
    buyer: Buyer


class JobCreate(JobBase):
    """공고 등록용"""
    bid_count: int = Field(0, ge=0)


class JobUpdate(JobBase):
    """공고 전체 수정(upsert)용"""
    bid_count: Optional[int] = Field(None, ge=0)


class JobResponse(BaseModel):
    """공고 응답 스키마"""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: Optional[str] = None
    category: Optional[str] = None
    deadline: Optional[Union[datetime, str]] = None
    buyer: Optional[Dict[str, Any]] = None
    bid_count: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        return stringify_id(value)
