"""
Persistence for attribute values.
This is the only layer that talks to the ORM; errors surface from here.
"""

from typing import Any, Dict, List, Optional

from apps.catalog.models import AttributeValue


class AttributeValueRepository:

    @staticmethod
    def find_all() -> List[AttributeValue]:
        return list(AttributeValue.objects.select_related('attribute'))

    @staticmethod
    def find_by_id(pk) -> Optional[AttributeValue]:
        return AttributeValue.objects.select_related('attribute').filter(pk=pk).first()

    @staticmethod
    def create(data: Dict[str, Any]) -> AttributeValue:
        return AttributeValue.objects.create(**data)

    @staticmethod
    def update(pk, data: Dict[str, Any]) -> AttributeValue:
        attribute_value = AttributeValue.objects.get(pk=pk)
        for field, value in data.items():
            setattr(attribute_value, field, value)
        attribute_value.save()
        return attribute_value

    @staticmethod
    def delete(pk) -> bool:
        AttributeValue.objects.get(pk=pk).delete()
        return True
