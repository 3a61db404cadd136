from typing import Any, Dict, List
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError
from app.schemas.common import InsertResult, UpdateResult, parse_object_id
from app.utils.logger import app_logger

DUPLICATE_BID_MESSAGE = "You have already placed a bid on this job"


class DuplicateBidError(Exception):
    """같은 사용자가 같은 공고에 이미 입찰한 경우"""

    def __init__(self, email: str, job_id: str):
        super().__init__(DUPLICATE_BID_MESSAGE)
        self.email = email
        self.job_id = job_id


class BidService:
    """bidJobs 컬렉션 처리 및 공고 입찰 수(bid_count) 갱신"""

    def __init__(self, bids: AsyncIOMotorCollection, jobs: AsyncIOMotorCollection):
        self.bids = bids
        self.jobs = jobs

    async def place_bid(self, bid_data: Dict[str, Any]) -> InsertResult:
        """
        입찰 등록 순서:
          1. (email, jobId) 중복 확인 - 있으면 DuplicateBidError
          2. 입찰 문서 insert
          3. 해당 공고의 bid_count 를 $inc 로 1 증가

        2와 3은 별개의 연산이라 3에서 실패해도 2는 롤백되지 않습니다.
        """
        email = bid_data["email"]
        job_id = bid_data["jobId"]

        already_exist = await self.bids.find_one({"email": email, "jobId": job_id})
        if already_exist:
            app_logger.info(f"중복 입찰 거부: email={email}, jobId={job_id}")
            raise DuplicateBidError(email, job_id)

        try:
            result = await self.bids.insert_one(dict(bid_data))
        except DuplicateKeyError as e:
            # 동시 요청이 중복 확인을 함께 통과한 경우 유니크 인덱스에서 걸러짐
            app_logger.info(f"중복 입찰 거부 (unique index): email={email}, jobId={job_id}")
            raise DuplicateBidError(email, job_id) from e

        await self.jobs.update_one(
            {"_id": parse_object_id(job_id)},
            {"$inc": {"bid_count": 1}},
        )
        return InsertResult(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))

    async def list_for_user(self, email: str, as_buyer: bool = False) -> List[Dict[str, Any]]:
        """as_buyer 이면 내 공고에 들어온 입찰, 아니면 내가 넣은 입찰"""
        query = {"buyer": email} if as_buyer else {"email": email}
        return await self.bids.find(query).to_list(length=None)

    async def update_status(self, bid_id: str, status: str) -> UpdateResult:
        result = await self.bids.update_one(
            {"_id": parse_object_id(bid_id)},
            {"$set": {"status": status}},
        )
        return UpdateResult(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
        )
