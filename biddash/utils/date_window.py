"""
Date window utilities
조회 기간 -> API 조회 구간 변환
"""

from datetime import date, timedelta

from biddash.models.bid_info import DateRange, QueryWindow


def to_query_window(date_range: DateRange) -> QueryWindow:
    """YYYY-MM-DD 기간을 API의 bidNtceBgnDt/bidNtceEndDt 형식으로 변환

    시작일은 0000, 종료일은 2359를 붙여 하루 전체를 포함한다.
    입력 검증은 하지 않는다.
    """
    return QueryWindow(
        begin_timestamp=date_range.start_date.replace("-", "") + "0000",
        end_timestamp=date_range.end_date.replace("-", "") + "2359",
    )


def default_date_range(today: date, days: int = 3) -> DateRange:
    """기본 조회 기간: 오늘 기준 N일 전 ~ 오늘"""
    return DateRange(
        start_date=(today - timedelta(days=days)).strftime("%Y-%m-%d"),
        end_date=today.strftime("%Y-%m-%d"),
    )
