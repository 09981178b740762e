from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class JobBase(BaseModel):
    """채용공고 문서 (알려지지 않은 필드도 그대로 저장)"""
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = Field(None, description="공고 제목")
    job_type: Optional[str] = Field(None, alias="jobType", description="고용 형태 (정확히 일치 검색)")
    hr_email: Optional[str] = Field(None, description="공고 등록자 이메일")
    application_deadline: Optional[str] = Field(
        None, alias="applicationDeadline", description="지원 마감일 (YYYY-MM-DD)"
    )
    company: Optional[str] = Field(None, description="회사명")
    company_logo: Optional[str] = Field(None, description="회사 로고 URL")

    def to_document(self) -> Dict[str, Any]:
        """요청에 실제로 포함된 필드만 저장용 dict로 변환"""
        return self.model_dump(by_alias=True, exclude_unset=True)


class JobCreate(JobBase):
    pass


class JobUpdate(JobBase):
    def to_document(self) -> Dict[str, Any]:
        data = super().to_document()
        data.pop("_id", None)  # _id는 변경 불가
        return data
