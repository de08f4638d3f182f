"""
SQLite Database Connection and Credential Store
SQLite 데이터베이스 연결 및 인증키 저장소
"""

from datetime import datetime
from typing import Dict, Optional

from sqlalchemy import Column, DateTime, String, Text, create_engine, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from biddash.config import dashboard_config, settings
from biddash.utils.logger import get_logger

logger = get_logger(__name__)

# Base 모델
Base = declarative_base()


class AppSettingModel(Base):
    """키/값 설정 데이터베이스 모델"""

    __tablename__ = "app_settings"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


def init_database(database_url: Optional[str] = None) -> Engine:
    """데이터베이스 초기화 (테이블 생성)"""
    url = database_url or settings.DATABASE_URL
    try:
        engine = create_engine(url, future=True)
        Base.metadata.create_all(engine)
        logger.info("데이터베이스 초기화 완료")
        return engine
    except Exception as e:
        logger.error(f"데이터베이스 초기화 실패: {e}")
        raise


def check_database(engine: Engine) -> bool:
    """데이터베이스 연결 확인"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"데이터베이스 연결 확인 실패: {e}")
        return False


class CredentialStore:
    """인증키 저장소 인터페이스"""

    def load(self) -> str:
        raise NotImplementedError

    def save(self, value: str) -> None:
        raise NotImplementedError


class MemoryCredentialStore(CredentialStore):
    """메모리 인증키 저장소 (테스트/임시 실행용)"""

    def __init__(self, initial: str = ""):
        self._values: Dict[str, str] = {}
        if initial:
            self._values[dashboard_config.CREDENTIAL_KEY] = initial

    def load(self) -> str:
        return self._values.get(dashboard_config.CREDENTIAL_KEY, "")

    def save(self, value: str) -> None:
        self._values[dashboard_config.CREDENTIAL_KEY] = value


class DatabaseCredentialStore(CredentialStore):
    """SQLite 인증키 저장소

    app_settings 테이블의 pps_api_key 행 하나만 사용한다.
    """

    def __init__(self, engine: Engine, key: str = dashboard_config.CREDENTIAL_KEY):
        self.engine = engine
        self.key = key
        self._session_maker = sessionmaker(engine, expire_on_commit=False)

    def load(self) -> str:
        with self._session_maker() as session:
            row = session.execute(
                select(AppSettingModel).where(AppSettingModel.key == self.key)
            ).scalar_one_or_none()
            value = row.value if row else ""

        logger.info("저장된 API 인증키 로드" if value else "저장된 API 인증키 없음")
        return value

    def save(self, value: str) -> None:
        with self._session_maker() as session:
            try:
                row = session.get(AppSettingModel, self.key)
                if row is None:
                    session.add(AppSettingModel(key=self.key, value=value))
                else:
                    row.value = value
                session.commit()
            except Exception as e:
                session.rollback()
                logger.error(f"API 인증키 저장 실패: {e}")
                raise
