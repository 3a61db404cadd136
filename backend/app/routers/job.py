from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from app.schemas.common import DeleteResult, InsertResult, UpdateResult
from app.schemas.job import JobCreate, JobResponse, JobUpdate
from app.services.job_service import JobService
from app.utils.dependencies import get_job_service, protect_mutation
from app.utils.logger import app_logger

router = APIRouter(tags=["jobs"])


@router.get(
    "/jobs",
    response_model=List[JobResponse],
    operation_id="read_jobs",
    summary="전체 공고 조회",
)
async def read_jobs(service: JobService = Depends(get_job_service)):
    return await service.list_jobs()


@router.post(
    "/add-jobs",
    response_model=InsertResult,
    operation_id="add_job",
    summary="공고 등록",
    description="공고를 등록합니다. `bid_count` 를 보내지 않으면 0 으로 저장됩니다."
)
async def add_job(job: JobCreate, service: JobService = Depends(get_job_service)):
    return await service.create(job.model_dump())


@router.get(
    "/jobs/{email}",
    response_model=List[JobResponse],
    operation_id="read_jobs_by_buyer",
    summary="등록자 이메일로 공고 조회",
)
async def read_jobs_by_buyer(email: str, service: JobService = Depends(get_job_service)):
    return await service.list_by_buyer_email(email)


@router.delete(
    "/job/{id}",
    response_model=DeleteResult,
    operation_id="delete_job",
    summary="공고 삭제",
    description="존재하지 않는 id 는 오류 없이 `deletedCount: 0` 을 반환합니다.",
    dependencies=[Depends(protect_mutation)],
)
async def delete_job(id: str, service: JobService = Depends(get_job_service)):
    return await service.delete_by_id(id)


@router.get(
    "/job/{id}",
    response_model=JobResponse,
    operation_id="read_job",
    summary="공고 단건 조회",
)
async def read_job(id: str, service: JobService = Depends(get_job_service)):
    return await service.get_by_id(id)


@router.put(
    "/update-job/{id}",
    response_model=UpdateResult,
    operation_id="update_job",
    summary="공고 수정 (upsert)",
    description="""
공고 전체를 덮어씁니다.

- 해당 id 의 공고가 없으면 **그 id 로 새 공고가 생성**됩니다 (`upsertedId` 반환).
""",
    dependencies=[Depends(protect_mutation)],
)
async def update_job(id: str, job: JobUpdate, service: JobService = Depends(get_job_service)):
    job_data = job.model_dump()
    if job_data.get("bid_count") is None:
        job_data.pop("bid_count", None)
    return await service.replace_or_create(id, job_data)


@router.get(
    "/all-jobs",
    response_model=List[JobResponse],
    operation_id="read_all_jobs",
    summary="공고 검색 (카테고리/제목/마감일 정렬)",
    description="""
- `filter`: 카테고리 완전 일치
- `search`: 제목 부분 일치 (대소문자 무시)
- `sort`: `asc` 이면 마감일 오름차순, 그 외 값은 내림차순 (없으면 저장 순서)
"""
)
async def read_all_jobs(
    filter: Optional[str] = Query(None, description="카테고리"),
    search: Optional[str] = Query(None, description="제목 검색어"),
    sort: Optional[str] = Query(None, description="마감일 정렬 방향"),
    service: JobService = Depends(get_job_service),
):
    jobs = await service.list_all(filter=filter, search=search, sort=sort)
    app_logger.info(f"공고 검색 완료: {len(jobs)}건 (filter={filter}, search={search}, sort={sort})")
    return jobs
