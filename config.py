import os

# 기본 디렉토리 설정
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# 경로 설정
LOG_FILE = os.path.join(BASE_DIR, "launch.log")

# 서버 설정
DEFAULT_HOST = os.getenv("HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("PORT", "8000"))

# 세션 설정
SESSION_TTL = int(os.getenv("SESSION_TTL", "3600"))    # 1시간
SESSION_CLEANUP_INTERVAL = 300                          # 5분

# 추천 등급 기준 (종합 점수 0~100)
RECOMMEND_YES_THRESHOLD = 75    # 이상이면 Yes
RECOMMEND_NO_THRESHOLD = 50     # 미만이면 No, 그 사이는 Maybe

# 강점/개선점 분류 설정
STRENGTH_THRESHOLD = 70         # 차원 점수가 이 이상이면 강점으로 분류
MAX_GUIDANCE_ITEMS = 4          # 강점/개선점 목록 최대 길이
