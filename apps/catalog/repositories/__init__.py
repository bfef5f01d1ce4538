from .attribute_value import AttributeValueRepository

__all__ = [
    'AttributeValueRepository',
]
