"""
Statistics aggregation
입찰 공고 통계 집계
"""

from datetime import datetime
from typing import Iterable

from biddash.models.bid_info import BidRecord
from biddash.models.statistics import Statistics


def aggregate(records: Iterable[BidRecord], now: datetime) -> Statistics:
    """전체/긴급/오늘 마감 건수 집계

    now는 호출자가 한 번 캡처해 넘긴다. 같은 입력이면 항상 같은 결과.
    """
    today = now.date()
    total = urgent = closing_today = 0

    for record in records:
        total += 1
        if record.is_urgent:
            urgent += 1
        if record.closes_on(today):
            closing_today += 1

    return Statistics(total=total, urgent=urgent, closing_today=closing_today)
