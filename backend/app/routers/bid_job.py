from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse
from typing import List, Optional
from app.schemas.bid_job import BidJobCreate, BidJobResponse, BidStatusUpdate
from app.schemas.common import InsertResult, UpdateResult
from app.services.bid_service import BidService, DuplicateBidError
from app.utils.dependencies import get_bid_service, protect_mutation, require_email_owner

router = APIRouter(tags=["bid jobs"])

FALSY_FLAGS = ("", "false", "0", "no")


def is_truthy_flag(value: Optional[str]) -> bool:
    # buyer= / buyer=false 는 입찰자 기준 조회
    return value is not None and value.strip().lower() not in FALSY_FLAGS


@router.post(
    "/add-bidJob",
    response_model=InsertResult,
    operation_id="add_bid_job",
    summary="입찰 등록",
    description="""
공고에 입찰합니다.

- 같은 이메일로 같은 공고(`jobId`)에 이미 입찰한 경우 `400` 과 함께 텍스트 메시지를 반환합니다.
- 성공 시 해당 공고의 `bid_count` 가 1 증가합니다.
""",
    responses={400: {"description": "이미 입찰한 공고", "content": {"text/plain": {}}}},
)
async def add_bid_job(bid: BidJobCreate, service: BidService = Depends(get_bid_service)):
    try:
        return await service.place_bid(bid.model_dump())
    except DuplicateBidError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)


@router.get(
    "/bid-jobs/{email}",
    response_model=List[BidJobResponse],
    operation_id="read_bid_jobs",
    summary="내 입찰 / 받은 입찰 조회",
    description="""
토큰 쿠키의 이메일과 경로의 `email` 이 같아야 조회할 수 있습니다.

- `buyer=true`: 내 공고에 들어온 입찰 요청
- 그 외: 내가 넣은 입찰
""",
)
async def read_bid_jobs(
    email: str,
    buyer: Optional[str] = Query(None, description="공고 등록자 기준 조회 여부 (true/false, 빈 값은 false)"),
    current_email: str = Depends(require_email_owner),
    service: BidService = Depends(get_bid_service),
):
    return await service.list_for_user(current_email, as_buyer=is_truthy_flag(buyer))


@router.patch(
    "/bid-status-update/{id}",
    response_model=UpdateResult,
    operation_id="update_bid_status",
    summary="입찰 상태 변경",
    description="status 필드만 변경합니다. 허용 값 검증은 하지 않습니다.",
    dependencies=[Depends(protect_mutation)],
)
async def update_bid_status(
    id: str,
    data: BidStatusUpdate,
    service: BidService = Depends(get_bid_service),
):
    return await service.update_status(id, data.status)
