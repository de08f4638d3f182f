#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
BidDash 서버 실행 스크립트
"""

import os
import sys

import uvicorn

from biddash.config import settings
from biddash.utils.logger import setup_logger

logger = setup_logger(settings.LOG_LEVEL, settings.LOG_DIR).bind(name=__name__)


def main():
    """메인 실행 함수"""
    try:
        ssl_config = {}
        scheme = "http"

        if settings.SSL_ENABLED:
            cert_path = os.path.join(os.getcwd(), settings.SSL_CERTFILE)
            key_path = os.path.join(os.getcwd(), settings.SSL_KEYFILE)

            if os.path.exists(cert_path) and os.path.exists(key_path):
                ssl_config = {
                    "ssl_certfile": cert_path,
                    "ssl_keyfile": key_path
                }
                scheme = "https"
                logger.info("🔐 SSL 인증서가 감지되어 HTTPS로 실행합니다")
            else:
                logger.warning(
                    "SSL이 활성화되어 있지만 인증서를 찾을 수 없습니다. HTTP로 실행합니다"
                )

        logger.info("🚀 BidDash 서버 시작")
        logger.info(f"서버 주소: {scheme}://{settings.HOST}:{settings.PORT}")
        logger.info(f"API 문서: {scheme}://{settings.HOST}:{settings.PORT}/docs")

        reload_mode = settings.DEBUG and not ssl_config

        # 서버 실행
        uvicorn.run(
            "biddash.main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=reload_mode,
            log_level="info",
            **ssl_config
        )

    except Exception as e:
        logger.error(f"서버 실행 오류: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
