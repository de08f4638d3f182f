"""
Bid information data models
입찰 정보 데이터 모델
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from biddash.config import dashboard_config


class DateRange(BaseModel):
    """조회 기간 (YYYY-MM-DD)"""

    start_date: str = Field(description="조회 시작일 (YYYY-MM-DD)")
    end_date: str = Field(description="조회 종료일 (YYYY-MM-DD)")


class QueryWindow(BaseModel):
    """API 조회 구간 (YYYYMMDDHHMM)"""

    begin_timestamp: str
    end_timestamp: str


class BidRecord(BaseModel):
    """입찰 공고 모델

    API 원본 항목에서 정규화된 공고 1건. 원본에 없던 필드는 None으로 남는다.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    announcement_id: Optional[str] = None
    announcement_order: Optional[str] = None
    category: Optional[str] = None
    announcing_institution: Optional[str] = None
    demand_institution: Optional[str] = None
    announced_at: Optional[str] = None
    closing_date: Optional[str] = None
    closing_time: Optional[str] = None
    detail_url: Optional[str] = None

    @property
    def is_urgent(self) -> bool:
        """긴급 공고 여부"""
        return dashboard_config.URGENCY_MARKER in self.title

    def closes_on(self, day: date) -> bool:
        """해당 일자에 마감되는지 여부"""
        if self.closing_date is None:
            return False
        return self.closing_date == day.strftime("%Y%m%d")

    def display_key(self, index: int) -> str:
        """목록 표시용 키 (공고번호 중복 시 위치로 구분)"""
        return f"{self.announcement_id}-{index}"
