"""G2B (나라장터) 공공데이터개방표준서비스 API client."""

import asyncio
import json
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Tuple

import aiohttp

from biddash.config import dashboard_config, settings
from biddash.models.bid_info import QueryWindow
from biddash.models.outcome import (
    DomainError,
    EmptyResult,
    FetchOutcome,
    MissingCredential,
    Success,
    TransportError,
)
from biddash.utils.logger import get_logger

logger = get_logger(__name__)

RESPONSE_ERROR_KEY = "nkoneps.com.response.ResponseError"
GATEWAY_ERROR_TAG = "OpenAPI_ServiceResponse"


def mask_api_key(api_key: str) -> str:
    """API 키 마스킹"""
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:4]}...{api_key[-4:]}"


class G2BBidClient:
    """나라장터 입찰공고 API 클라이언트

    요청 1회당 정확히 한 번의 GET을 보내고, 응답을 FetchOutcome 중 하나로 분류한다.
    재시도와 타임아웃은 호출자 책임이다.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        rows_per_page: Optional[int] = None,
        page_no: Optional[int] = None,
    ):
        self.endpoint = endpoint if endpoint is not None else settings.g2b_endpoint
        self.rows_per_page = rows_per_page if rows_per_page is not None else settings.G2B_ROWS_PER_PAGE
        self.page_no = page_no if page_no is not None else settings.G2B_PAGE_NO

    async def fetch(self, credential: Optional[str], window: QueryWindow) -> FetchOutcome:
        """입찰 공고 조회"""
        if not credential:
            logger.warning("G2B API 키가 설정되지 않아 조회를 건너뜁니다.")
            return MissingCredential()

        params = self._build_params(credential, window)
        logger.info(
            f"🔍 G2B 표준 API 조회 - 기간: {window.begin_timestamp} ~ {window.end_timestamp}, "
            f"키: {mask_api_key(credential)}"
        )

        try:
            status, text = await self._get(params)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logger.error(f"G2B API 호출 실패 (전송 오류): {e!r}")
            return TransportError(detail=repr(e))

        outcome = self._classify(status, text)
        logger.info(f"G2B API 응답 분류: {outcome.kind} (HTTP {status})")
        return outcome

    def _build_params(self, credential: str, window: QueryWindow) -> Dict[str, Any]:
        return {
            "ServiceKey": credential,
            "type": dashboard_config.RESPONSE_TYPE,
            "bidNtceBgnDt": window.begin_timestamp,
            "bidNtceEndDt": window.end_timestamp,
            "numOfRows": self.rows_per_page,
            "pageNo": self.page_no,
        }

    async def _get(self, params: Dict[str, Any]) -> Tuple[int, str]:
        """GET 요청 후 (상태코드, 본문) 반환"""
        timeout = aiohttp.ClientTimeout(total=None)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(self.endpoint, params=params) as response:
                text = await response.text(errors="replace")
                return response.status, text

    def _classify(self, status: int, text: str) -> FetchOutcome:
        """응답 분류: 전송 오류 -> 업무 오류 -> 결과 유무 순"""
        envelope = self._parse_envelope(text)
        if envelope is None:
            if 200 <= status < 300:
                logger.error(f"API 응답 형식을 해석할 수 없습니다. 응답 내용: {text[:200]}")
            else:
                logger.error(f"API 호출 실패: HTTP {status}")
            return TransportError(detail=f"HTTP {status}")

        header, body = envelope
        result_code = header.get("resultCode") or header.get("resultcode")
        if result_code is not None:
            result_code = str(result_code)
        if result_code != dashboard_config.SUCCESS_CODE:
            message = str(header.get("resultMsg") or dashboard_config.MESSAGES["domain_fallback"])
            logger.warning(f"G2B API 오류: {message} (코드: {result_code})")
            return DomainError(message=message, result_code=result_code)

        items = self._normalize_items(body.get("items"))
        if not items:
            logger.info("G2B 표준 API 검색 결과 없음")
            return EmptyResult()

        logger.info(f"📋 G2B 표준 API에서 {len(items)}건의 입찰 데이터 반환 (전체 {body.get('totalCount', '?')}건)")
        return Success(items=items)

    def _parse_envelope(self, text: str) -> Optional[Tuple[Dict[str, Any], Dict[str, Any]]]:
        """응답 본문에서 (header, body) 추출. API 형식이 아니면 None"""
        content = (text or "").strip()
        if not content:
            return None

        if content.startswith("<"):
            return self._parse_gateway_error(content)

        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            return None
        if not isinstance(data, dict):
            return None

        if "response" in data and isinstance(data["response"], dict):
            response = data["response"]
            header = response.get("header")
            body = response.get("body")
            return (
                header if isinstance(header, dict) else {},
                body if isinstance(body, dict) else {},
            )

        if RESPONSE_ERROR_KEY in data and isinstance(data[RESPONSE_ERROR_KEY], dict):
            header = data[RESPONSE_ERROR_KEY].get("header")
            return (header if isinstance(header, dict) else {}), {}

        return None

    def _parse_gateway_error(self, content: str) -> Optional[Tuple[Dict[str, Any], Dict[str, Any]]]:
        """공공데이터포털 게이트웨이 XML 오류 응답 파싱"""
        try:
            root = ET.fromstring(content)
        except ET.ParseError:
            return None

        if root.tag != GATEWAY_ERROR_TAG:
            return None

        header = root.find("cmmMsgHeader")
        if header is None:
            header = root
        reason_code = (header.findtext("returnReasonCode") or "").strip()
        message = (header.findtext("returnAuthMsg") or header.findtext("errMsg") or "").strip()
        logger.error(f"🚫 G2B 게이트웨이 오류 응답 수신 (오류코드: {reason_code or '?'}): {message}")
        # 게이트웨이 응답은 항상 오류로 분류
        if not reason_code or reason_code == dashboard_config.SUCCESS_CODE:
            reason_code = "gateway"
        return {"resultCode": reason_code, "resultMsg": message}, {}

    def _normalize_items(self, items: Any) -> List[Dict[str, Any]]:
        """API 응답 items 구조를 리스트로 정규화"""
        if isinstance(items, list):
            return [item for item in items if isinstance(item, dict)]

        if isinstance(items, dict):
            if "item" in items:
                nested = items["item"]
                if isinstance(nested, list):
                    return [item for item in nested if isinstance(item, dict)]
                if isinstance(nested, dict):
                    return [nested]
                return []
            return [items] if items else []

        return []
