from typing import Any, Iterable

from sqlalchemy import inspect, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database
from src.shared.database.entity_mapper import EntityMapper


class UnitOfWork:
    def __init__(
        self,
        db: Database,
        entity_mapper: EntityMapper,
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.entity_mapper = entity_mapper

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()
        if self.session:
            await self.session.close()

    def _map_to_entity(self, model_instance: Any):
        return self.entity_mapper.map_to_entity(model_instance)

    def add(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        self.session.add(entity)

    def add_all(self, model_instances: Iterable[Any]):
        self.session.add_all([self._map_to_entity(instance) for instance in model_instances])

    async def update(self, model_instance: Any, previous: Any = None) -> bool:
        """
        Write the model's columns onto the stored row with the same primary key.

        Never inserts: if the row is gone, nothing is written.

        Args:
            model_instance: Model carrying the new values
            previous: Model as it was read; when given, only the columns that
                differ from it are written

        Returns:
            True if a stored row was updated, False if there was none
        """
        entity = self._map_to_entity(model_instance)
        mapper = inspect(entity).mapper
        keys = {mapper.get_property_by_column(column).key for column in mapper.primary_key}
        values = {
            attr.key: getattr(entity, attr.key)
            for attr in mapper.column_attrs
            if attr.key not in keys
        }
        if previous is not None:
            before = self._map_to_entity(previous)
            values = {key: value for key, value in values.items() if getattr(before, key) != value}

        statement = update(type(entity)).where(
            *(getattr(type(entity), key) == getattr(entity, key) for key in keys)
        )
        if values:
            statement = statement.values(**values)
        else:
            # Nothing changed; touch the key so the row is still matched
            key = next(iter(keys))
            statement = statement.values({key: getattr(entity, key)})
        result = await self.session.execute(statement)
        return result.rowcount > 0

    async def delete(self, model_instance: Any):
        """Delete the stored row matching the model's primary key, if there still is one."""
        entity = self._map_to_entity(model_instance)
        identity = tuple(inspect(entity).mapper.primary_key_from_instance(entity))
        persistent = await self.session.get(type(entity), identity)
        if persistent is not None:
            await self.session.delete(persistent)

    async def commit(self):
        try:
            await self.session.commit()
        except Exception as e:
            await self.rollback()
            raise e

    async def rollback(self):
        await self.session.rollback()
