"""
Configuration settings for BidDash
BidDash 설정
"""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

# .env 파일 명시적 로딩
load_dotenv()


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # 서버 설정
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = True

    # 데이터베이스 설정 (SQLite, 인증키 1건만 저장)
    DATABASE_URL: str = "sqlite:///./biddash.db"

    # 조달청 공공데이터개방표준서비스 API
    G2B_API_BASE_URL: str = "http://apis.data.go.kr/1230000/ao/PubDataOpnStdService"
    G2B_STANDARD_OPERATION: str = "getDataSetOpnStdBidPblancInfo"
    G2B_ROWS_PER_PAGE: int = 50
    G2B_PAGE_NO: int = 1

    # 조회 설정
    FETCH_TIMEOUT_SECONDS: Optional[float] = None  # None이면 타임아웃 없음
    DEFAULT_RANGE_DAYS: int = 3

    # 로깅 설정
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # SSL 설정
    SSL_ENABLED: bool = False
    SSL_CERTFILE: str = "certs/cert.pem"
    SSL_KEYFILE: str = "certs/key.pem"

    @property
    def g2b_endpoint(self) -> str:
        return f"{self.G2B_API_BASE_URL.rstrip('/')}/{self.G2B_STANDARD_OPERATION}"


class DashboardConfig:
    """대시보드 고정 설정"""

    CREDENTIAL_KEY = "pps_api_key"
    URGENCY_MARKER = "긴급"
    SUCCESS_CODE = "00"
    RESPONSE_TYPE = "json"

    MESSAGES = {
        "missing_credential": "API 인증키가 필요합니다. 상단 설정에서 입력해주세요.",
        "domain_fallback": "인증 오류가 발생했습니다. 키를 확인해주세요.",
        "empty": "검색 결과가 없습니다.",
        "transport": "데이터를 불러오는 중 오류가 발생했습니다. CORS 설정을 확인하거나 나중에 다시 시도해주세요.",
    }

    STAT_LABELS = {
        "total": "전체 공고",
        "urgent": "긴급 공고",
        "closing_today": "오늘 마감",
    }


# 전역 설정 인스턴스
settings = Settings()
dashboard_config = DashboardConfig()
