"""공통 pytest 픽스처"""

import asyncio
import json
from datetime import datetime
from typing import Any, Dict, List, Optional

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from biddash.models.outcome import FetchOutcome

API_PATH = "/1230000/ao/PubDataOpnStdService/getDataSetOpnStdBidPblancInfo"
FIXED_NOW = datetime(2024, 5, 3, 10, 30)


def envelope(items: Any = None, code: str = "00", msg: Optional[str] = "NORMAL SERVICE.") -> Dict[str, Any]:
    """표준 API 응답 형식 생성"""
    header: Dict[str, Any] = {"resultCode": code}
    if msg is not None:
        header["resultMsg"] = msg
    body: Dict[str, Any] = {"numOfRows": 50, "pageNo": 1}
    if items is not None:
        body["items"] = items
        body["totalCount"] = len(items) if isinstance(items, list) else 1
    return {"response": {"header": header, "body": body}}


def raw_bid(**overrides) -> Dict[str, Any]:
    item = {
        "bidNtceNo": "R24BK00012345",
        "bidNtceOrd": "000",
        "bsnsDivNm": "공사",
        "bidNtceNm": "청사 보수공사",
        "ntceInsttNm": "조달청 서울지방조달청",
        "dmndInsttNm": "서울특별시",
        "bidNtceDate": "20240501",
        "bidClseDate": "20240510",
        "bidClseTm": "1000",
        "bidNtceUrl": "https://www.g2b.go.kr/link/R24BK00012345",
    }
    item.update(overrides)
    return item


class FakeG2BApi:
    """로컬 aiohttp 서버에서 동작하는 가짜 G2B API"""

    def __init__(self):
        self.calls: List[Dict[str, str]] = []
        self.status = 200
        self.body = json.dumps(envelope([]))
        self.content_type = "application/json"
        self.endpoint = ""

    def respond_json(self, payload: Any, status: int = 200):
        self.status = status
        self.body = json.dumps(payload, ensure_ascii=False)
        self.content_type = "application/json"

    def respond_text(self, text: str, status: int = 200, content_type: str = "text/plain"):
        self.status = status
        self.body = text
        self.content_type = content_type

    async def handle(self, request: web.Request) -> web.Response:
        self.calls.append(dict(request.query))
        return web.Response(status=self.status, text=self.body, content_type=self.content_type)


@pytest_asyncio.fixture
async def g2b_api():
    api = FakeG2BApi()
    app = web.Application()
    app.router.add_get(API_PATH, api.handle)
    server = TestServer(app)
    await server.start_server()
    api.endpoint = str(server.make_url(API_PATH))
    yield api
    await server.close()


class FakeClient:
    """미리 정한 결과를 돌려주는 G2B 클라이언트 대역"""

    def __init__(self, outcome: Optional[FetchOutcome] = None, delay: float = 0.0):
        self.outcome = outcome
        self.delay = delay
        self.calls = []
        self.release: Optional[asyncio.Event] = None

    async def fetch(self, credential, window) -> FetchOutcome:
        self.calls.append((credential, window))
        if self.release is not None:
            await self.release.wait()
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.outcome


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
