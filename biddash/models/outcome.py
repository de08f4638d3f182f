"""
Fetch outcome models
조회 결과 분류 모델
"""

from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field

from biddash.config import dashboard_config


class Success(BaseModel):
    """조회 성공 (원본 항목 포함)"""
    kind: Literal["success"] = "success"
    items: List[Dict[str, Any]] = Field(description="API 원본 입찰 항목")


class EmptyResult(BaseModel):
    """정상 조회, 결과 없음"""
    kind: Literal["empty"] = "empty"


class DomainError(BaseModel):
    """API가 요청을 거부하거나 업무 오류를 보고한 경우"""
    kind: Literal["domain"] = "domain"
    message: str
    result_code: Optional[str] = None


class MissingCredential(DomainError):
    """인증키 미입력 (네트워크 호출 없음)"""
    kind: Literal["missing_credential"] = "missing_credential"
    message: str = dashboard_config.MESSAGES["missing_credential"]


class TransportError(BaseModel):
    """네트워크/전송 오류"""
    kind: Literal["transport"] = "transport"
    detail: Optional[str] = None


FetchOutcome = Union[Success, EmptyResult, DomainError, TransportError]
