import pytest

from apps.catalog.models import AttributeValue
from apps.catalog.services.variant_selection import UNAVAILABLE_NOTICE


@pytest.mark.django_db
class TestAttributeValueAPI:
    url = '/api/attribute-values/'

    def test_list(self, api_client, black):
        response = api_client.get(self.url)
        assert response.status_code == 200
        assert response.json() == [{
            'id': black.pk,
            'attribute': black.attribute_id,
            'attribute_name': 'Color',
            'attribute_slug': 'color',
            'value': 'black',
            'display_value': 'Black',
            'color_hex': '#000000',
            'display_order': 0,
        }]

    def test_list_by_attribute(self, api_client, black):
        assert api_client.get(self.url, {'attribute': 'size'}).json() == []
        assert len(api_client.get(self.url, {'attribute': 'color'}).json()) == 1

    def test_retrieve(self, api_client, black):
        response = api_client.get(f'{self.url}{black.pk}/')
        assert response.status_code == 200
        assert response.json()['value'] == 'black'

    def test_retrieve_missing(self, api_client, db):
        assert api_client.get(f'{self.url}999/').status_code == 404

    def test_create(self, api_client, color):
        response = api_client.post(self.url, {'attribute': color.pk, 'value': 'red'}, format='json')
        assert response.status_code == 201
        assert AttributeValue.objects.filter(attribute=color, value='red').exists()

    def test_create_invalid(self, api_client, color):
        response = api_client.post(self.url, {'attribute': color.pk}, format='json')
        assert response.status_code == 400
        assert 'value' in response.json()

    def test_partial_update(self, api_client, black):
        response = api_client.patch(f'{self.url}{black.pk}/', {'display_value': 'Onyx'}, format='json')
        assert response.status_code == 200
        black.refresh_from_db()
        assert black.display_value == 'Onyx'

    def test_update_missing(self, api_client, db):
        response = api_client.patch(f'{self.url}999/', {'value': 'x'}, format='json')
        assert response.status_code == 404

    def test_delete(self, api_client, black):
        response = api_client.delete(f'{self.url}{black.pk}/')
        assert response.status_code == 204
        assert not AttributeValue.objects.filter(pk=black.pk).exists()

    def test_delete_missing(self, api_client, db):
        assert api_client.delete(f'{self.url}999/').status_code == 404

    def test_non_numeric_id_is_404(self, api_client, black):
        url = f'{self.url}abc/'
        assert api_client.get(url).status_code == 404
        assert api_client.put(url, {'attribute': black.attribute_id, 'value': 'x'}, format='json').status_code == 404
        assert api_client.patch(url, {'value': 'x'}, format='json').status_code == 404
        assert api_client.delete(url).status_code == 404
        assert AttributeValue.objects.filter(pk=black.pk).exists()


@pytest.mark.django_db
class TestProductAPI:

    def test_detail(self, api_client, product, variants, images):
        response = api_client.get(f'/api/products/{product.slug}/')
        assert response.status_code == 200
        data = response.json()
        assert data['brand'] == 'Stride'
        assert data['category'] == 'Footwear > Running'
        assert data['cover_image'] == 'https://cdn.example.com/front.jpg'
        assert [v['display_price'] for v in data['variants']] == ['100.00', '150.00']
        assert data['variants'][1]['is_in_stock'] is False
        assert data['min_price'] == 100.0

    def test_detail_without_variants(self, api_client, empty_product):
        data = api_client.get(f'/api/products/{empty_product.slug}/').json()
        assert data['variants'] == []
        assert data['min_price'] is None
        assert data['brand'] is None

    def test_list_filters_by_price(self, api_client, product, variants, empty_product):
        response = api_client.get('/api/products/', {'min_price': 120})
        assert [p['slug'] for p in response.json()] == ['trail-runner']

    def test_list_filters_by_attribute(self, api_client, product, variants, black):
        variants[0].attribute_values.add(black)
        response = api_client.get('/api/products/', {'attribute': 'color:black'})
        assert [p['slug'] for p in response.json()] == ['trail-runner']
        assert api_client.get('/api/products/', {'attribute': 'color:white'}).json() == []

    def test_add_to_cart(self, api_client, product, variants):
        response = api_client.post(
            f'/api/products/{product.slug}/add-to-cart/',
            {'variant': variants[1].pk, 'quantity': 2},
            format='json',
        )
        assert response.status_code == 201
        assert response.json()['item'] == {
            'id': variants[1].pk, 'name': 'Trail Runner', 'price': 150.0, 'quantity': 2, 'sku': 'TR-43',
        }

    def test_add_to_cart_default_variant(self, api_client, product, variants):
        response = api_client.post(f'/api/products/{product.slug}/add-to-cart/', {}, format='json')
        assert response.status_code == 201
        assert response.json()['item']['sku'] == 'TR-42'

    def test_add_to_cart_unknown_variant(self, api_client, product, variants):
        response = api_client.post(
            f'/api/products/{product.slug}/add-to-cart/', {'variant': 9999}, format='json'
        )
        assert response.status_code == 404

    def test_add_to_cart_without_variants(self, api_client, empty_product):
        response = api_client.post(f'/api/products/{empty_product.slug}/add-to-cart/', {}, format='json')
        assert response.status_code == 400
        assert response.json() == {'error': UNAVAILABLE_NOTICE}
