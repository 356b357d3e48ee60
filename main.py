import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import uvicorn

import config
from db.database import engine
from db import models
from db.db_uploader import init_data
from exceptions import AppError
from routers import api
from schemas.base import HealthOutput

logging.basicConfig(level=config.LOG_LEVEL)

logger = logging.getLogger(__name__)


def initialize_database() -> None:
    try:
        models.Base.metadata.create_all(bind=engine)
        init_data()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check SQLALCHEMY_DATABASE_URL.')


initialize_database()

description = """
커뮤니티 공간 예약 시스템 API
유저, 공간 예약, 기부 내역을 관리합니다. `/`를 제외한 모든 API는 identity provider가 발급한 Bearer 토큰이 필요합니다.

## Users

* **유저 목록 / 조회 / 생성 / 수정 / 삭제**
* **내 정보 조회** (처음 로그인한 유저는 자동으로 생성됩니다)

## Reservations
* **예약 목록 / 조회 / 생성 / 수정 / 삭제**

## Donations
* **기부 목록 / 조회 / 생성 / 수정 / 삭제**
"""
tags_metadata = [
    {
        'name': 'Users',
        'description': '유저와 관련된 API. **내 정보 조회** API도 여기에 있습니다'
    },
    {
        'name': 'Reservations',
        'description': '공간 예약과 관련된 API'
    },
    {
        'name': 'Donations',
        'description': '기부 내역과 관련된 API'
    }
]

app = FastAPI(
    title='Community Space API',
    description=description,
    summary='커뮤니티 공간 예약 처리 시스템',
    openapi_tags=tags_metadata
)

app.include_router(api.router)


@app.exception_handler(AppError)
def handle_app_error(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(SQLAlchemyError)
def handle_persistence_error(request: Request, exc: SQLAlchemyError):
    logger.exception('Persistence failure on %s %s', request.method, request.url.path)
    return JSONResponse(status_code=500, content={'message': str(exc)})


@app.get('/', response_model=HealthOutput, name='상태 확인')
def read_root():
    """
    API 상태와 현재 시간(ms)을 반환합니다.
    """
    return {'api': 'up', 'timestamp': int(time.time() * 1000)}


if __name__ == '__main__':
    uvicorn.run('main:app')
