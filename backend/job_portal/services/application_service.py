from typing import Any, Dict, List, Optional, Sequence

from bson import ObjectId
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from job_portal.database import APPLICATIONS_COLLECTION, get_mongo_db
from job_portal.services.job_service import JobService
from job_portal.utils.exceptions import NotFoundException
from job_portal.utils.logger import db_logger
from job_portal.utils.serializers import parse_object_id

# 지원서 조회 시 공고에서 복사해 오는 필드
SUMMARY_JOB_FIELDS = ("title", "company")
DETAIL_JOB_FIELDS = ("title", "company", "company_logo")


class ApplicationService:
    """applications 컬렉션 접근 및 공고 정보 결합"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection: AsyncIOMotorCollection = db[APPLICATIONS_COLLECTION]
        self.jobs = JobService(db)

    async def attach_job_fields(
        self,
        applications: List[Dict[str, Any]],
        fields: Sequence[str] = SUMMARY_JOB_FIELDS,
    ) -> List[Dict[str, Any]]:
        """
        각 지원서에 참조 공고의 필드를 덧붙입니다 (저장하지 않음).

        공고가 없거나 job_id 형식이 잘못된 경우 해당 지원서는 그대로 둡니다.
        """
        for application in applications:
            job_id = parse_object_id(application.get("job_id"))
            if job_id is None:
                continue
            job = await self.jobs.get_job(job_id)
            if job is None:
                continue
            for field in fields:
                if field in job:
                    application[field] = job[field]
        return applications

    async def list_applications(self) -> List[Dict[str, Any]]:
        applications = await self.collection.find().to_list(length=None)
        return await self.attach_job_fields(applications)

    async def get_application(self, application_id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": application_id})

    async def list_by_applicant(self, email: str) -> List[Dict[str, Any]]:
        applications = await self.collection.find({"applicant_email": email}).to_list(length=None)
        return await self.attach_job_fields(applications)

    async def list_by_job(self, job_id: str) -> List[Dict[str, Any]]:
        # job_id는 문자열로 저장되어 있으므로 문자열 그대로 비교
        applications = await self.collection.find({"job_id": job_id}).to_list(length=None)
        return await self.attach_job_fields(applications, DETAIL_JOB_FIELDS)

    async def create_application(self, data: Dict[str, Any]) -> InsertOneResult:
        """지원서 저장 후 공고의 applicants_count 증가"""
        job_id = parse_object_id(data.get("job_id"))
        if job_id is None or await self.jobs.get_job(job_id) is None:
            raise NotFoundException("Job")

        result = await self.collection.insert_one(data)
        update = await self.jobs.increment_applicants(job_id)
        if update.matched_count == 0:
            # 조회와 증가 사이에 공고가 삭제된 경우
            db_logger.warning(f"지원서 {result.inserted_id}: 공고 {job_id}가 사라져 지원자 수를 갱신하지 못함")
        db_logger.info(f"지원서 등록: {result.inserted_id} (job: {job_id})")
        return result

    async def update_status(self, application_id: ObjectId, status: str) -> UpdateResult:
        return await self.collection.update_one({"_id": application_id}, {"$set": {"status": status}})

    async def delete_application(self, application_id: ObjectId) -> DeleteResult:
        # 공고의 applicants_count는 감소시키지 않음
        return await self.collection.delete_one({"_id": application_id})


def get_application_service(db: AsyncIOMotorDatabase = Depends(get_mongo_db)) -> ApplicationService:
    return ApplicationService(db)
