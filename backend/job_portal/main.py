from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from job_portal.config import settings
from job_portal.database import close_mongo, init_mongo
from job_portal.routers import applications, auth, jobs
from job_portal.utils.exceptions import register_exception_handlers
from job_portal.utils.logger import app_logger

# 앱 시작 시 MongoDB 클라이언트 생성, 종료 시 정리
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_mongo()
    app_logger.info(f"Job Portal API 시작 (env: {settings.NODE_ENV})")
    yield
    await close_mongo()
    app_logger.info("Job Portal API 종료")

# FastAPI 앱 생성
app = FastAPI(
    title="Job Portal API",
    lifespan=lifespan
)

@app.get("/", response_class=PlainTextResponse)
async def root():
    """서버 상태 확인"""
    return "My server is running"

# CORS 설정 (허용된 프론트엔드 도메인만, 쿠키 포함 요청 허용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# 라우터 등록
app.include_router(auth.router)
app.include_router(jobs.router)
app.include_router(applications.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("job_portal.main:app", host="0.0.0.0", port=settings.PORT)
