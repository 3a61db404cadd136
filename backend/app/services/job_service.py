import re
from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Optional
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING
from app.schemas.common import DeleteResult, InsertResult, UpdateResult, parse_object_id
from app.utils.exceptions import NotFoundException
from app.utils.logger import app_logger


def sort_direction(sort: str) -> int:
    # "asc" 외의 값은 모두 내림차순
    return ASCENDING if sort == "asc" else DESCENDING


def to_document(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    date 값은 자정 기준 datetime 으로, 시간대가 있는 datetime 은 UTC naive 로 변환
    (MongoDB 는 UTC 로 저장하고 naive datetime 으로 돌려줌)
    """
    document = dict(data)
    deadline = document.get("deadline")
    if isinstance(deadline, datetime):
        if deadline.tzinfo is not None:
            document["deadline"] = deadline.astimezone(timezone.utc).replace(tzinfo=None)
    elif isinstance(deadline, date):
        document["deadline"] = datetime.combine(deadline, time.min)
    return document


def build_job_query(filter: Optional[str] = None, search: Optional[str] = None) -> Dict[str, Any]:
    """카테고리 일치 + 제목 부분 일치(대소문자 무시) 조건 생성"""
    query: Dict[str, Any] = {}
    if search:
        query["title"] = {"$regex": re.escape(search), "$options": "i"}
    if filter:
        query["category"] = filter
    return query


class JobService:
    """jobs 컬렉션 CRUD"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def list_jobs(self) -> List[Dict[str, Any]]:
        return await self.collection.find().to_list(length=None)

    async def list_all(
        self,
        filter: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """필터/검색/마감일 정렬이 적용된 전체 공고 조회"""
        options: Dict[str, Any] = {}
        if sort:
            options["sort"] = [("deadline", sort_direction(sort))]
        return await self.collection.find(build_job_query(filter, search), **options).to_list(length=None)

    async def list_by_buyer_email(self, email: str) -> List[Dict[str, Any]]:
        return await self.collection.find({"buyer.email": email}).to_list(length=None)

    async def get_by_id(self, job_id: str) -> Dict[str, Any]:
        job = await self.collection.find_one({"_id": parse_object_id(job_id)})
        if job is None:
            raise NotFoundException("Job")
        return job

    async def create(self, job_data: Dict[str, Any]) -> InsertResult:
        document = to_document(job_data)
        document.setdefault("bid_count", 0)
        result = await self.collection.insert_one(document)
        app_logger.info(f"공고 등록 완료: {result.inserted_id}")
        return InsertResult(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))

    async def replace_or_create(self, job_id: str, job_data: Dict[str, Any]) -> UpdateResult:
        """
        id 위치의 문서를 job_data 로 덮어씁니다.
        해당 id 의 문서가 없으면 그 id 로 새 문서가 생성됩니다 (upsert).
        """
        update: Dict[str, Any] = {"$set": to_document(job_data)}
        if "bid_count" not in job_data:
            # 새로 생성되는 공고에만 입찰 수 0 지정
            update["$setOnInsert"] = {"bid_count": 0}
        result = await self.collection.update_one(
            {"_id": parse_object_id(job_id)},
            update,
            upsert=True,
        )
        upserted_id = result.upserted_id
        if upserted_id is not None:
            app_logger.info(f"존재하지 않는 공고 id 로 신규 생성: {upserted_id}")
        return UpdateResult(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedId=str(upserted_id) if upserted_id is not None else None,
            upsertedCount=1 if upserted_id is not None else 0,
        )

    async def delete_by_id(self, job_id: str) -> DeleteResult:
        result = await self.collection.delete_one({"_id": parse_object_id(job_id)})
        return DeleteResult(acknowledged=result.acknowledged, deletedCount=result.deleted_count)
