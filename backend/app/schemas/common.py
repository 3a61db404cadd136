from bson import ObjectId
from pydantic import AfterValidator, BaseModel
from typing import Annotated, Any, Optional
from app.utils.exceptions import BadRequestException


def _check_object_id(value: str) -> str:
    if not ObjectId.is_valid(value):
        raise ValueError(f"'{value}' is not a valid ObjectId")
    return value

# 24자리 hex 문자열 형태의 MongoDB ObjectId
ObjectIdStr = Annotated[str, AfterValidator(_check_object_id)]


def parse_object_id(value: Any) -> ObjectId:
    """경로 파라미터 등 문자열 id 를 ObjectId 로 변환 (형식 오류 시 400)"""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise BadRequestException(f"Invalid id: {value}", error_code="INVALID_ID")
    return ObjectId(value)


def stringify_id(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


class SuccessResponse(BaseModel):
    success: bool = True


class InsertResult(BaseModel):
    """insertOne 결과"""
    acknowledged: bool = True
    insertedId: str


class UpdateResult(BaseModel):
    """updateOne 결과 (upsert 시 upsertedId 포함)"""
    acknowledged: bool = True
    matchedCount: int
    modifiedCount: int
    upsertedId: Optional[str] = None
    upsertedCount: int = 0


class DeleteResult(BaseModel):
    """deleteOne 결과"""
    acknowledged: bool = True
    deletedCount: int
