"""
api/app.py — FastAPI 앱 인스턴스 + 세션 미들웨어

화면 렌더링은 외부 프론트엔드 몫이다. 루트(/)는 서비스 상태 요약만 반환한다.
"""

import logging
import threading
import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import SESSION_CLEANUP_INTERVAL
from api.routes import router
import api.session as session
from iot_readiness.services.catalog import default_catalog

SESSION_COOKIE = "readiness_session"
SERVICE_NAME = "IoT Security Readiness Assessment"

logger = logging.getLogger(__name__)


def create_app(start_cleanup: bool = True) -> FastAPI:
    # 잘못된 카탈로그면 여기서 즉시 실패 (세션 시작 전)
    catalog = default_catalog()

    app = FastAPI(title=SERVICE_NAME, docs_url=None, redoc_url=None)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 세션 미들웨어: 쿠키에서 세션 ID를 읽고, 없으면 새로 발급
    @app.middleware("http")
    async def session_middleware(request: Request, call_next):
        sid = request.cookies.get(SESSION_COOKIE)
        if not sid or session.get_session(sid) is None:
            sid = session.create_session()

        request.state.session_id = sid
        response: Response = await call_next(request)
        response.set_cookie(
            key=SESSION_COOKIE,
            value=sid,
            httponly=True,
            samesite="lax",
            max_age=session.SESSION_TTL,
        )
        return response

    app.include_router(router)

    @app.get("/")
    async def service_status():
        return {
            "service": SERVICE_NAME,
            "status": "ok",
            "sections": [s.value for s in catalog.sections()],
            "total_questions": catalog.total_questions(),
            "catalog_url": "/api/catalog",
        }

    def _cleanup_loop():
        while True:
            time.sleep(SESSION_CLEANUP_INTERVAL)
            removed = session.cleanup_expired()
            if removed:
                logger.info(f"만료 세션 {removed}개 정리")

    if start_cleanup:
        threading.Thread(target=_cleanup_loop, daemon=True).start()

    return app
