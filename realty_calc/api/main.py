"""FastAPI 애플리케이션 메인"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import config
from ..core import get_rule_engine
from .routers import calculators, regions, rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # 시작 시 규칙 파일을 미리 로드하여 설정 오류를 바로 드러냄
    engine = get_rule_engine()
    logger.info("규칙 버전 %s 로드 (%s)", engine.version, engine.rules_dir)
    yield


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)

# FastAPI 앱 생성
app = FastAPI(
    title=config.API_TITLE,
    description="세금·대출·전월세·수수료·가치평가·배당 계산",
    version=config.API_VERSION,
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

# 라우터 등록
app.include_router(
    calculators.router,
    prefix="/api/v1/calculators",
    tags=["계산기"]
)

app.include_router(
    regions.router,
    prefix="/api/v1/regions",
    tags=["규제지역"]
)

app.include_router(
    rules.router,
    prefix="/api/v1/rules",
    tags=["규칙"]
)


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": config.API_TITLE,
        "version": config.API_VERSION,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("realty_calc.api.main:app", host="0.0.0.0", port=8000, reload=True)
