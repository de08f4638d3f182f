"""
BidDash Server
나라장터 입찰공고 대시보드 FastAPI 애플리케이션
"""

from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from biddash import __version__
from biddash.crawler.g2b_client import G2BBidClient, mask_api_key
from biddash.database.connection import DatabaseCredentialStore, check_database, init_database
from biddash.models.dashboard_api import CredentialRequest, CredentialResponse, SearchRequest
from biddash.models.statistics import DashboardState
from biddash.services.dashboard import DashboardController
from biddash.utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리"""
    if getattr(app.state, "controller", None) is None:
        engine = init_database()
        app.state.engine = engine
        app.state.controller = DashboardController(
            client=G2BBidClient(),
            credential_store=DatabaseCredentialStore(engine),
        )
        logger.info("✅ 대시보드 컨트롤러 초기화 완료")

    yield

    engine = getattr(app.state, "engine", None)
    if engine is not None:
        engine.dispose()
    logger.info("🛑 서버 종료 중...")


# FastAPI 앱 생성
app = FastAPI(
    title="BidDash",
    description="나라장터 입찰공고 조회 대시보드",
    version=__version__,
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _controller(request: Request) -> DashboardController:
    return request.app.state.controller


def _masked(controller: DashboardController) -> CredentialResponse:
    key = controller.credential
    return CredentialResponse(
        configured=bool(key),
        masked=mask_api_key(key) if key else None,
    )


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "BidDash",
        "version": __version__,
        "status": "running",
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "dashboard": "GET /dashboard",
            "search": "POST /dashboard/search",
            "credential": "GET|PUT /credential",
        }
    }


@app.get("/health")
async def health_check(request: Request):
    """헬스 체크"""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        db_status = "not_configured"
    else:
        db_status = "ok" if check_database(engine) else "error"

    return {
        "status": "healthy" if db_status != "error" else "degraded",
        "timestamp": datetime.now().isoformat(),
        "database": db_status,
        "version": __version__
    }


@app.get("/dashboard", response_model=DashboardState)
async def get_dashboard(request: Request):
    """현재 대시보드 상태 조회"""
    return _controller(request).snapshot()


@app.post("/dashboard/search", response_model=DashboardState)
async def search_bids(request: Request, search: SearchRequest = None):
    """입찰 공고 조회 실행"""
    controller = _controller(request)
    if controller.loading:
        raise HTTPException(status_code=409, detail="이미 조회가 진행 중입니다")

    if search:
        controller.set_date_range(
            search.start_date or controller.date_range.start_date,
            search.end_date or controller.date_range.end_date,
        )

    logger.info(f"입찰 공고 조회 요청: {controller.date_range.start_date} ~ {controller.date_range.end_date}")
    await controller.fetch_bids()
    return controller.snapshot()


@app.get("/credential", response_model=CredentialResponse)
async def get_credential(request: Request):
    """인증키 설정 상태 조회"""
    return _masked(_controller(request))


@app.put("/credential", response_model=CredentialResponse)
async def put_credential(request: Request, body: CredentialRequest):
    """인증키 설정"""
    controller = _controller(request)
    try:
        controller.set_credential(body.api_key)
    except Exception as e:
        logger.error(f"인증키 저장 실패: {e}")
        raise HTTPException(status_code=500, detail="인증키를 저장하지 못했습니다")
    return _masked(controller)
