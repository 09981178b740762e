from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, List, Optional

from job_portal.schemas.job import JobCreate, JobUpdate
from job_portal.schemas.results import DeleteAck, InsertAck, UpdateAck
from job_portal.services.job_service import JobService, get_job_service
from job_portal.utils.dependencies import get_current_user, require_owner
from job_portal.utils.exceptions import BadRequestException
from job_portal.utils.logger import app_logger
from job_portal.utils.serializers import require_object_id, serialize_document, serialize_documents

router = APIRouter(tags=["jobs"])


@router.get(
    "/jobs",
    summary="공고 목록 조회",
    description="""
    - `title`: 제목 부분 일치 (대소문자 무시)\n
    - `jobType`: 고용 형태 정확히 일치\n
    - 두 파라미터가 함께 오면 `jobType`만 적용됩니다.
    """,
)
async def list_jobs(
    title: Optional[str] = Query(None, description="제목 검색어"),
    job_type: Optional[str] = Query(None, alias="jobType", description="고용 형태"),
    jobs: JobService = Depends(get_job_service),
) -> List[Dict[str, Any]]:
    result = await jobs.list_jobs(title=title, job_type=job_type)
    return serialize_documents(result)


@router.get("/availableJobs", summary="지원 가능한 공고 조회 (최대 6개)")
async def list_available_jobs(jobs: JobService = Depends(get_job_service)) -> List[Dict[str, Any]]:
    result = await jobs.list_available_jobs()
    return serialize_documents(result)


@router.get("/jobs/{job_id}", summary="공고 단건 조회")
async def get_job(job_id: str, jobs: JobService = Depends(get_job_service)) -> Optional[Dict[str, Any]]:
    # 없으면 null 반환 (404 아님)
    job = await jobs.get_job(require_object_id(job_id))
    return serialize_document(job)


@router.get("/user-jobs/{email}", summary="내가 등록한 공고 조회")
async def list_user_jobs(
    email: str,
    current_user: Dict[str, Any] = Depends(get_current_user),
    jobs: JobService = Depends(get_job_service),
) -> List[Dict[str, Any]]:
    require_owner(email, current_user)
    result = await jobs.list_jobs_by_hr(email)
    return serialize_documents(result)


@router.post("/jobs", response_model=InsertAck, summary="공고 등록")
async def create_job(job: JobCreate, jobs: JobService = Depends(get_job_service)):
    result = await jobs.create_job(job.to_document())
    return InsertAck.from_result(result)


@router.put("/jobs/{job_id}", response_model=UpdateAck, summary="공고 수정 (필드 단위 덮어쓰기)")
async def update_job(job_id: str, job: JobUpdate, jobs: JobService = Depends(get_job_service)):
    object_id = require_object_id(job_id)
    data = job.to_document()
    if not data:
        raise BadRequestException("No fields to update")
    result = await jobs.update_job(object_id, data)
    app_logger.info(f"공고 수정: {job_id} (fields={sorted(data)})")
    return UpdateAck.from_result(result)


@router.delete("/jobs/{job_id}", response_model=DeleteAck, summary="공고 삭제")
async def delete_job(job_id: str, jobs: JobService = Depends(get_job_service)):
    result = await jobs.delete_job(require_object_id(job_id))
    return DeleteAck.from_result(result)
