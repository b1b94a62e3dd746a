"""환경 설정"""

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

# 규칙 파일 디렉토리 (환경 변수로 교체 가능)
RULES_DIR = Path(os.getenv("REALTY_CALC_RULES_DIR", str(PACKAGE_DIR / "rules")))

# API 로그 레벨
LOG_LEVEL = os.getenv("REALTY_CALC_LOG_LEVEL", "INFO").upper()

API_TITLE = "부동산 계산기 API"
API_VERSION = "0.1.0"
