"""
기본 role 데이터(`admin`, `user`)를 넣는 데 사용됩니다. 이미 있는 role은 건너뜁니다.
"""
import logging

from sqlalchemy.orm import Session

import config
from db.database import engine
from db.models import Role

logger = logging.getLogger(__name__)

DEFAULT_ROLES = [
    {'id': 1, 'name': 'admin'},
    {'id': 2, 'name': 'user'},
]


def init_data(bind=None):
    # 테스트 실행 시에는 사전 데이터 실행 스킵
    if bind is None and config.ENVIRONMENT == 'test':
        return

    with Session(bind=bind or engine) as session:
        logger.info('---inserting role data started---')

        existing = {role.id for role in session.query(Role).all()}
        for role in DEFAULT_ROLES:
            if role['id'] not in existing:
                session.add(Role(**role))

        session.commit()

    logger.info('---inserting role data ended---')
