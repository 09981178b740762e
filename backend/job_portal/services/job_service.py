import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from job_portal.config import settings
from job_portal.database import JOBS_COLLECTION, get_mongo_db
from job_portal.utils.logger import db_logger


def today_iso() -> str:
    """오늘 날짜 (UTC, YYYY-MM-DD)"""
    return datetime.now(timezone.utc).date().isoformat()


def build_jobs_query(title: Optional[str] = None, job_type: Optional[str] = None) -> Dict[str, Any]:
    """
    공고 목록 필터 생성

    - title: 대소문자 무시 부분 일치
    - jobType: 정확히 일치
    두 조건이 함께 오면 jobType 조건만 적용됩니다 (기존 클라이언트 호환).
    """
    query: Dict[str, Any] = {}
    if title:
        query = {"title": {"$regex": re.escape(title), "$options": "i"}}
    if job_type:
        query = {"jobType": job_type}
    return query


class JobService:
    """jobs 컬렉션 접근 전담"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection: AsyncIOMotorCollection = db[JOBS_COLLECTION]

    async def list_jobs(self, title: Optional[str] = None, job_type: Optional[str] = None) -> List[Dict[str, Any]]:
        query = build_jobs_query(title, job_type)
        return await self.collection.find(query).to_list(length=None)

    async def list_available_jobs(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """마감일이 오늘 이후인 공고 (최대 limit개)"""
        limit = limit or settings.AVAILABLE_JOBS_LIMIT
        cursor = self.collection.find({"applicationDeadline": {"$gte": today_iso()}}, limit=limit)
        return await cursor.to_list(length=limit)

    async def get_job(self, job_id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": job_id})

    async def list_jobs_by_hr(self, email: str) -> List[Dict[str, Any]]:
        return await self.collection.find({"hr_email": email}).to_list(length=None)

    async def create_job(self, data: Dict[str, Any]) -> InsertOneResult:
        result = await self.collection.insert_one(data)
        db_logger.info(f"공고 등록: {result.inserted_id}")
        return result

    async def update_job(self, job_id: ObjectId, data: Dict[str, Any]) -> UpdateResult:
        """전달된 필드만 덮어쓰기 ($set)"""
        return await self.collection.update_one({"_id": job_id}, {"$set": data})

    async def delete_job(self, job_id: ObjectId) -> DeleteResult:
        # 해당 공고의 지원서는 삭제하지 않음
        result = await self.collection.delete_one({"_id": job_id})
        db_logger.info(f"공고 삭제: {job_id} (deleted={result.deleted_count})")
        return result

    async def increment_applicants(self, job_id: ObjectId) -> UpdateResult:
        """지원자 수 원자적 증가 (필드가 없으면 1로 생성)"""
        return await self.collection.update_one({"_id": job_id}, {"$inc": {"applicants_count": 1}})


def get_job_service(db: AsyncIOMotorDatabase = Depends(get_mongo_db)) -> JobService:
    return JobService(db)
