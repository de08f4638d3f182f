"""
Dashboard controller
조회 상태 관리 및 조회 사이클 실행
"""

import asyncio
from datetime import datetime
from typing import Callable, List, Optional

from biddash.config import dashboard_config, settings
from biddash.crawler.g2b_client import G2BBidClient
from biddash.crawler.normalizer import normalize
from biddash.database.connection import CredentialStore
from biddash.models.bid_info import BidRecord, DateRange
from biddash.models.outcome import (
    DomainError,
    EmptyResult,
    FetchOutcome,
    Success,
    TransportError,
)
from biddash.models.statistics import BidRow, DashboardState, Statistics
from biddash.services.stats import aggregate
from biddash.utils.date_window import default_date_range, to_query_window
from biddash.utils.logger import get_logger

logger = get_logger(__name__)


class DashboardController:
    """대시보드 컨트롤러

    상태 쓰기는 이 클래스만 한다. 표시 계층은 snapshot()으로 읽기만 한다.
    상태 흐름: Idle -> Loading -> {Success, EmptyResult, DomainError, TransportError} -> Idle
    """

    def __init__(
        self,
        client: G2BBidClient,
        credential_store: CredentialStore,
        clock: Callable[[], datetime] = datetime.now,
        fetch_timeout: Optional[float] = None,
        range_days: Optional[int] = None,
    ):
        self.client = client
        self.credential_store = credential_store
        self.clock = clock
        self.fetch_timeout = fetch_timeout if fetch_timeout is not None else settings.FETCH_TIMEOUT_SECONDS

        self._credential = credential_store.load() or ""
        days = range_days if range_days is not None else settings.DEFAULT_RANGE_DAYS
        self.date_range = default_date_range(clock().date(), days)

        self._records: List[BidRecord] = []
        self.error: Optional[str] = None
        self.error_kind: Optional[str] = None
        self.loading = False
        self.last_fetched_at: Optional[datetime] = None

    @property
    def credential(self) -> str:
        return self._credential

    def set_credential(self, value: str) -> None:
        """인증키 변경 (변경 시마다 저장)"""
        value = value or ""
        self.credential_store.save(value)
        self._credential = value
        logger.info("API 인증키 변경 저장 완료")

    def set_date_range(self, start_date: str, end_date: str) -> None:
        self.date_range = DateRange(start_date=start_date, end_date=end_date)

    @property
    def records(self) -> List[BidRecord]:
        return list(self._records)

    @property
    def statistics(self) -> Statistics:
        """현재 시각 기준 통계 (읽을 때마다 재집계)"""
        return aggregate(self._records, self.clock())

    def _set_records(self, records: List[BidRecord]) -> None:
        self._records = list(records)

    async def fetch_bids(self) -> Optional[FetchOutcome]:
        """조회 사이클 1회 실행. 이미 조회 중이면 무시하고 None 반환"""
        if self.loading:
            logger.warning("이미 조회가 진행 중이어서 요청을 무시합니다.")
            return None

        self.loading = True
        self.error = None
        self.error_kind = None

        try:
            window = to_query_window(self.date_range)
            outcome = await self._fetch(window)
            self._apply(outcome)
            self.last_fetched_at = self.clock()
            return outcome
        finally:
            self.loading = False

    async def _fetch(self, window) -> FetchOutcome:
        call = self.client.fetch(self._credential, window)
        if self.fetch_timeout is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=self.fetch_timeout)
        except asyncio.TimeoutError:
            logger.error(f"G2B API 응답 대기 시간 초과 ({self.fetch_timeout}초)")
            return TransportError(detail="timeout")

    def _apply(self, outcome: FetchOutcome) -> None:
        messages = dashboard_config.MESSAGES

        if isinstance(outcome, Success):
            records = normalize(outcome.items)
            if records:
                self._set_records(records)
                logger.info(f"입찰 공고 {len(records)}건 조회 완료")
                return
            # 모든 항목이 정규화 실패
            outcome = EmptyResult()

        self._set_records([])
        if isinstance(outcome, EmptyResult):
            self.error = messages["empty"]
            self.error_kind = "empty"
        elif isinstance(outcome, DomainError):
            self.error = outcome.message
            self.error_kind = outcome.kind
        elif isinstance(outcome, TransportError):
            self.error = messages["transport"]
            self.error_kind = "transport"

    def snapshot(self, now: Optional[datetime] = None) -> DashboardState:
        """표시 계층용 상태 스냅샷 (now 한 번 캡처)"""
        now = now or self.clock()
        today = now.date()
        rows = [
            BidRow(
                key=record.display_key(idx),
                record=record,
                is_urgent=record.is_urgent,
                is_closing_today=record.closes_on(today),
            )
            for idx, record in enumerate(self._records)
        ]
        statistics = aggregate(self._records, now)

        return DashboardState(
            records=rows,
            statistics=statistics,
            stat_cards=statistics.as_cards(),
            error=self.error,
            error_kind=self.error_kind,
            loading=self.loading,
            date_range=self.date_range,
            credential_configured=bool(self._credential),
            last_fetched_at=self.last_fetched_at,
            generated_at=now,
        )
