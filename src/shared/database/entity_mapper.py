"""Routes domain models to the mapper that turns them into database entities."""
from typing import Any, Callable, Mapping


class EntityMapper:
    def __init__(self, entity_mappings: Mapping[type, Callable[[Any], Any]]):
        self.entity_mappings = dict(entity_mappings)

    def map_to_entity(self, model_instance: Any):
        to_entity = self.entity_mappings.get(type(model_instance))
        if to_entity is None:
            raise TypeError(f"No entity mapping registered for {type(model_instance).__name__}")
        return to_entity(model_instance)
