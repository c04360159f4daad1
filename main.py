"""
main.py — IoT 보안 진로 진단 API 서버 실행

    python main.py          # HOST / PORT 환경 변수로 바인딩 주소 변경
"""

import logging
import sys

import uvicorn

from config import DEFAULT_HOST, DEFAULT_PORT, LOG_FILE


def _configure_logging() -> None:
    handlers = [logging.StreamHandler(sys.stdout)]
    try:
        handlers.append(logging.FileHandler(LOG_FILE, encoding='utf-8'))
    except PermissionError:
        # 로그 파일을 열 수 없으면 콘솔 출력만 사용
        pass
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=handlers,
    )


def main() -> None:
    _configure_logging()
    logger = logging.getLogger(__name__)

    from api.app import create_app

    logger.info(f"=== 진단 API 서버 시작: http://{DEFAULT_HOST}:{DEFAULT_PORT} ===")
    uvicorn.run(create_app(), host=DEFAULT_HOST, port=DEFAULT_PORT, log_level="warning")


if __name__ == "__main__":
    main()
