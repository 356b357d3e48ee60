import uuid
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from db.database import Base
from exceptions import DuplicateRecordError, PersistenceError

UNIQUE_VIOLATION_PGCODE = '23505'


def _is_unique_violation(exc: IntegrityError) -> bool:
    if getattr(exc.orig, 'pgcode', None) == UNIQUE_VIOLATION_PGCODE:
        return True
    return 'UNIQUE constraint failed' in str(exc.orig)


class CrudRepository:
    """
    테이블 하나에 대한 CRUD를 담당합니다. 조회 결과는 `projection`으로, 생성/수정 결과는 `detail_projection`으로 반환합니다.
    """
    model: Type[Base]
    projection: Type[BaseModel]
    detail_projection: Optional[Type[BaseModel]] = None

    def __init__(self, session: Session):
        self.session = session

    def _query(self):
        return self.session.query(self.model)

    def _detail(self, record) -> BaseModel:
        return (self.detail_projection or self.projection).model_validate(record)

    def _prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    @contextmanager
    def _write(self):
        """
        블록 안의 쓰기 작업을 커밋합니다. bulk update/delete는 실행 시점에 제약 위반이 발생하므로 실행과 커밋을 함께 감쌉니다.
        """
        try:
            yield
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if _is_unique_violation(exc):
                raise DuplicateRecordError(str(exc.orig)) from exc
            raise PersistenceError(str(exc.orig)) from exc

    def get_all(self) -> List[BaseModel]:
        return [self.projection.model_validate(record) for record in self._query().all()]

    def get_by_id(self, _id: str) -> Optional[BaseModel]:
        record = self._query().filter_by(id=_id).first()
        return self.projection.model_validate(record) if record else None

    def get_by_filter(self, **filters) -> List[BaseModel]:
        return [self.projection.model_validate(record) for record in self._query().filter_by(**filters)]

    def exist_by_id(self, _id: str) -> bool:
        return self._query().filter_by(id=_id).first() is not None

    def create(self, data: Dict[str, Any]) -> BaseModel:
        values = self._prepare({key: value for key, value in data.items() if value is not None})
        values.setdefault('id', str(uuid.uuid4()))

        record = self.model(**values)
        with self._write():
            self.session.add(record)
        self.session.refresh(record)

        return self._detail(record)

    def update(self, _id: str, data: Dict[str, Any]) -> Optional[BaseModel]:
        values = self._prepare(dict(data))
        values.pop('id', None)

        if values:
            with self._write():
                self._query().filter_by(id=_id).update(values, synchronize_session='fetch')

        record = self._query().filter_by(id=_id).populate_existing().first()
        return self._detail(record) if record else None

    def remove(self, _id: str) -> int:
        with self._write():
            count = self._query().filter_by(id=_id).delete(synchronize_session='fetch')
        return count
