"""
Bid item normalizer
API 원본 항목 -> BidRecord 정규화
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from biddash.models.bid_info import BidRecord
from biddash.utils.logger import get_logger

logger = get_logger(__name__)

# 정규화 필드 -> 원본 키 (앞의 키 우선)
FIELD_KEYS: Dict[str, List[str]] = {
    "announcement_id": ["bidNtceNo"],
    "announcement_order": ["bidNtceOrd"],
    "category": ["bsnsDivNm"],
    "title": ["bidNtceNm", "ntceNm"],
    "announcing_institution": ["ntceInsttNm"],
    "demand_institution": ["dmndInsttNm"],
    "announced_at": ["bidNtceDate"],
    "closing_date": ["bidClseDate"],
    "closing_time": ["bidClseTm"],
    "detail_url": ["bidNtceUrl"],
}


class MalformedItemError(ValueError):
    """정규화할 수 없는 원본 항목"""

    def __init__(self, reason: str, item: Any = None):
        super().__init__(reason)
        self.reason = reason
        self.item = item


def _scalar_text(value: Any) -> Optional[str]:
    """스칼라 값을 문자열로 변환. None/컨테이너는 None"""
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return None
    if isinstance(value, bool):
        return str(value).lower()
    return value if isinstance(value, str) else str(value)


def _first_present(item: Mapping[str, Any], keys: Iterable[str]) -> Optional[str]:
    for key in keys:
        if key in item:
            text = _scalar_text(item[key])
            if text is not None:
                return text
    return None


def normalize_item(item: Any) -> BidRecord:
    """원본 항목 1건 정규화

    Raises:
        MalformedItemError: 매핑이 아니거나 공고명이 없는 경우
    """
    if not isinstance(item, Mapping):
        raise MalformedItemError(f"항목이 객체 형식이 아닙니다: {type(item).__name__}", item)

    fields = {}
    for field, keys in FIELD_KEYS.items():
        value = _first_present(item, keys)
        if value is not None:
            fields[field] = value

    if "title" not in fields:
        raise MalformedItemError("공고명(bidNtceNm)이 없습니다", item)

    try:
        return BidRecord(**fields)
    except ValidationError as e:
        raise MalformedItemError(str(e), item) from e


def normalize(raw_items: Iterable[Any]) -> List[BidRecord]:
    """원본 항목 목록 정규화. 잘못된 항목은 건너뛴다."""
    records: List[BidRecord] = []
    skipped = 0

    for idx, item in enumerate(raw_items):
        try:
            records.append(normalize_item(item))
        except MalformedItemError as e:
            skipped += 1
            logger.warning(f"[{idx + 1}] 잘못된 입찰 항목 건너뜀: {e.reason}")
            continue

    if skipped:
        logger.info(f"정규화 완료: {len(records)}건 (건너뜀 {skipped}건)")
    return records
