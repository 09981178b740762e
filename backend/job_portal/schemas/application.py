from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class ApplicationCreate(BaseModel):
    """지원서 문서 (알려지지 않은 필드도 그대로 저장)"""
    model_config = ConfigDict(extra="allow")

    job_id: str = Field(..., description="지원한 공고의 _id (문자열)")
    applicant_email: Optional[str] = Field(None, description="지원자 이메일")
    status: Optional[str] = Field(None, description="진행 상태 (예: pending, accepted)")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ApplicationStatusUpdate(BaseModel):
    status: str = Field(..., description="변경할 진행 상태")
