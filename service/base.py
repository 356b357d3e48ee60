import logging
from typing import List, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from exceptions import ConflictError, DuplicateRecordError, NotFoundError
from repository.base import CrudRepository

logger = logging.getLogger(__name__)


class ResourceService:
    """
    리소스 하나의 생성 / 조회 / 수정 / 삭제 흐름을 처리합니다.
    존재 여부 확인과 변경은 같은 세션에서 실행되고, 동시에 들어온 생성 요청은 DB의 unique 제약으로 판정합니다.
    """
    resource_name: str
    repository_class: Type[CrudRepository]

    def __init__(self, session: Session):
        self.repository = self.repository_class(session)

    @property
    def not_found_tag(self) -> str:
        return f'{self.resource_name}NotFound'

    def _not_found(self, _id) -> NotFoundError:
        return NotFoundError(f"Could not find {self.resource_name.lower()} '{_id or ''}'")

    def get_all(self) -> List[BaseModel]:
        return self.repository.get_all()

    def get(self, _id: str) -> BaseModel:
        record = self.repository.get_by_id(_id)
        if not record:
            raise NotFoundError.tagged(self.not_found_tag)
        return record

    def create(self, data: BaseModel) -> BaseModel:
        values = data.model_dump(exclude_none=True)
        _id = values.get('id')

        if _id is not None and self.repository.exist_by_id(_id):
            raise ConflictError(f'{self.resource_name} already exists.')

        try:
            record = self.repository.create(values)
        except DuplicateRecordError:
            # lost the race against a concurrent insert of the same id
            if _id is not None and self.repository.exist_by_id(_id):
                raise ConflictError(f'{self.resource_name} already exists.')
            raise

        logger.info('%s %s created', self.resource_name, record.id)
        return record

    def update(self, _id: str, data: BaseModel) -> BaseModel:
        if not _id or not self.repository.exist_by_id(_id):
            raise self._not_found(_id)

        values = data.model_dump(exclude_unset=True)
        values.pop('id', None)

        record = self.repository.update(_id, values)
        if record is None:
            raise self._not_found(_id)
        return record

    def delete(self, _id: str) -> BaseModel:
        record = self.repository.get_by_id(_id)
        if not record:
            raise self._not_found(_id)

        self.repository.remove(_id)
        logger.info('%s %s deleted', self.resource_name, _id)
        return record
