from fastapi import APIRouter, Depends
from typing import Any, Dict, List, Optional

from job_portal.schemas.application import ApplicationCreate, ApplicationStatusUpdate
from job_portal.schemas.results import DeleteAck, InsertAck, UpdateAck
from job_portal.services.application_service import ApplicationService, get_application_service
from job_portal.utils.dependencies import get_current_user, require_owner
from job_portal.utils.serializers import require_object_id, serialize_document, serialize_documents

router = APIRouter(tags=["applications"])


@router.get("/applications", summary="전체 지원서 조회 (공고 제목/회사 포함)")
async def list_applications(
    applications: ApplicationService = Depends(get_application_service),
) -> List[Dict[str, Any]]:
    result = await applications.list_applications()
    return serialize_documents(result)


@router.get("/applications/jobs/{job_id}", summary="공고별 지원서 조회")
async def list_job_applications(
    job_id: str,
    applications: ApplicationService = Depends(get_application_service),
) -> List[Dict[str, Any]]:
    result = await applications.list_by_job(job_id)
    return serialize_documents(result)


@router.get("/applications/{application_id}", summary="지원서 단건 조회")
async def get_application(
    application_id: str,
    applications: ApplicationService = Depends(get_application_service),
) -> Optional[Dict[str, Any]]:
    application = await applications.get_application(require_object_id(application_id))
    return serialize_document(application)


@router.get("/user-applications/{email}", summary="내 지원서 조회")
async def list_user_applications(
    email: str,
    current_user: Dict[str, Any] = Depends(get_current_user),
    applications: ApplicationService = Depends(get_application_service),
) -> List[Dict[str, Any]]:
    require_owner(email, current_user)
    result = await applications.list_by_applicant(email)
    return serialize_documents(result)


@router.post("/applications", response_model=InsertAck, summary="지원서 제출")
async def create_application(
    application: ApplicationCreate,
    applications: ApplicationService = Depends(get_application_service),
):
    result = await applications.create_application(application.to_document())
    return InsertAck.from_result(result)


@router.patch("/applications/{application_id}", response_model=UpdateAck, summary="지원 상태 변경")
async def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    applications: ApplicationService = Depends(get_application_service),
):
    result = await applications.update_status(require_object_id(application_id), update.status)
    return UpdateAck.from_result(result)


@router.delete("/applications/{application_id}", response_model=DeleteAck, summary="지원서 삭제")
async def delete_application(
    application_id: str,
    applications: ApplicationService = Depends(get_application_service),
):
    result = await applications.delete_application(require_object_id(application_id))
    return DeleteAck.from_result(result)
