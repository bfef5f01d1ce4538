from apps.catalog.repositories import AttributeValueRepository


class AttributeValueService:
    """
    Attribute value operations used by the API.
    Delegates straight to the repository; persistence errors propagate unchanged.
    """

    @staticmethod
    def get_all():
        return AttributeValueRepository.find_all()

    @staticmethod
    def get_by_id(pk):
        return AttributeValueRepository.find_by_id(pk)

    @staticmethod
    def create(data):
        return AttributeValueRepository.create(data)

    @staticmethod
    def update(pk, data):
        return AttributeValueRepository.update(pk, data)

    @staticmethod
    def delete(pk):
        return AttributeValueRepository.delete(pk)
