"""
Dashboard API Pydantic Models
대시보드 API 요청/응답 모델
"""

from typing import Optional
from pydantic import BaseModel, Field


DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class SearchRequest(BaseModel):
    """조회 요청 모델"""
    start_date: Optional[str] = Field(
        default=None,
        pattern=DATE_PATTERN,
        description="조회 시작일 (YYYY-MM-DD). 미지정시 현재 설정 유지"
    )
    end_date: Optional[str] = Field(
        default=None,
        pattern=DATE_PATTERN,
        description="조회 종료일 (YYYY-MM-DD). 미지정시 현재 설정 유지"
    )


class CredentialRequest(BaseModel):
    """인증키 설정 요청 모델"""
    api_key: str = Field(description="공공데이터포털 API 인증키")


class CredentialResponse(BaseModel):
    """인증키 상태 응답 모델"""
    configured: bool = Field(description="인증키 설정 여부")
    masked: Optional[str] = Field(default=None, description="마스킹된 인증키")
