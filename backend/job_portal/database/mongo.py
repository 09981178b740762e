from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.server_api import ServerApi

from job_portal.config import settings
from job_portal.utils.logger import db_logger

JOBS_COLLECTION = "jobs"
APPLICATIONS_COLLECTION = "applications"

motor_client: Optional[AsyncIOMotorClient] = None

def init_mongo() -> AsyncIOMotorClient:
    """프로세스당 한 번 MongoDB 클라이언트 생성 (실제 연결은 첫 요청 시)"""
    global motor_client
    if motor_client is None:
        motor_client = AsyncIOMotorClient(
            settings.mongo_uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        db_logger.info(f"MongoDB 클라이언트 생성 완료 (db: {settings.MONGO_DB_NAME})")
    return motor_client

async def close_mongo():
    """MongoDB 연결을 안전하게 종료합니다."""
    global motor_client
    if motor_client:
        motor_client.close()
        motor_client = None

def get_mongo_db() -> AsyncIOMotorDatabase:
    """라우트에 주입되는 데이터베이스 핸들"""
    client = motor_client or init_mongo()
    return client[settings.MONGO_DB_NAME]
