import pytest
from django.db import IntegrityError

from apps.catalog.models import AttributeValue
from apps.catalog.services import AttributeValueService


@pytest.mark.django_db
class TestAttributeValueService:

    def test_get_all(self, black, color):
        white = AttributeValue.objects.create(attribute=color, value='white', display_order=1)
        assert AttributeValueService.get_all() == [black, white]

    def test_get_by_id(self, black):
        assert AttributeValueService.get_by_id(black.pk) == black

    def test_get_by_id_missing(self):
        assert AttributeValueService.get_by_id(999) is None

    def test_create(self, color):
        value = AttributeValueService.create({'attribute': color, 'value': 'red', 'color_hex': '#FF0000'})
        assert value.pk is not None
        assert AttributeValue.objects.get(pk=value.pk).color_hex == '#FF0000'

    def test_create_passes_data_through_unchecked(self, color):
        # No validation layer: the bad hex is stored as given
        value = AttributeValueService.create({'attribute': color, 'value': 'odd', 'color_hex': 'zzz'})
        assert AttributeValue.objects.get(pk=value.pk).color_hex == 'zzz'

    def test_create_duplicate_propagates_integrity_error(self, black, color):
        with pytest.raises(IntegrityError):
            AttributeValueService.create({'attribute': color, 'value': 'black'})

    def test_update(self, black):
        updated = AttributeValueService.update(black.pk, {'display_value': 'Jet Black'})
        assert updated.display_value == 'Jet Black'
        black.refresh_from_db()
        assert black.get_display_value() == 'Jet Black'

    def test_update_missing_propagates(self):
        with pytest.raises(AttributeValue.DoesNotExist):
            AttributeValueService.update(999, {'value': 'x'})

    def test_delete(self, black):
        assert AttributeValueService.delete(black.pk) is True
        assert not AttributeValue.objects.filter(pk=black.pk).exists()

    def test_delete_missing_propagates(self):
        with pytest.raises(AttributeValue.DoesNotExist):
            AttributeValueService.delete(999)

    def test_changes_are_tracked_in_history(self, black):
        AttributeValueService.update(black.pk, {'value': 'onyx'})
        assert black.history.count() == 2
