from typing import Any, Dict, List, Optional

from bson import ObjectId
from fastapi.encoders import jsonable_encoder

from job_portal.utils.exceptions import BadRequestException


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """문자열을 ObjectId로 변환 (형식이 잘못되면 None)"""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """MongoDB 문서를 JSON 응답용 dict로 변환 (ObjectId -> str)"""
    if document is None:
        return None
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


def serialize_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_document(document) for document in documents]


def require_object_id(value: str) -> ObjectId:
    """경로 파라미터용: 형식이 잘못된 id는 400"""
    object_id = parse_object_id(value)
    if object_id is None:
        raise BadRequestException("Invalid id", error_code="INVALID_ID")
    return object_id
