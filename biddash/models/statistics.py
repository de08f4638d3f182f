"""
Dashboard statistics and state models
대시보드 통계/상태 모델
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from biddash.config import dashboard_config
from biddash.models.bid_info import BidRecord, DateRange


class StatCard(BaseModel):
    """통계 카드"""
    key: str
    title: str
    value: int


class Statistics(BaseModel):
    """입찰 공고 통계"""
    total: int = 0
    urgent: int = 0
    closing_today: int = 0

    def as_cards(self) -> List[StatCard]:
        labels = dashboard_config.STAT_LABELS
        return [
            StatCard(key="total", title=labels["total"], value=self.total),
            StatCard(key="urgent", title=labels["urgent"], value=self.urgent),
            StatCard(key="closing_today", title=labels["closing_today"], value=self.closing_today),
        ]


class BidRow(BaseModel):
    """목록 표시용 공고 행"""
    key: str = Field(description="표시 키 (공고번호-순번)")
    record: BidRecord
    is_urgent: bool
    is_closing_today: bool


class DashboardState(BaseModel):
    """표시 계층이 소비하는 대시보드 상태"""
    records: List[BidRow] = []
    statistics: Statistics = Statistics()
    stat_cards: List[StatCard] = []
    error: Optional[str] = None
    error_kind: Optional[str] = None
    loading: bool = False
    date_range: DateRange
    credential_configured: bool = False
    last_fetched_at: Optional[datetime] = None
    generated_at: datetime
