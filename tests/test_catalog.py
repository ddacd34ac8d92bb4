"""Tests for the product catalog service."""

import random
import sys
import threading
from unittest.mock import patch

import pytest

from novaeco.models import DEFAULT_PRODUCTS, ProductIcon
from novaeco.services import InvalidProductError, ProductCatalog


def product_fields(**overrides):
    fields = {
        'name': 'Kraft Tape',
        'description': 'Paper tape with natural rubber adhesive.',
        'price': 4.25,
        'category': 'Accessories',
        'image': 'https://example.com/tape.jpg',
        'icon': 'Recycle',
    }
    fields.update(overrides)
    return fields


class TestProductCatalog:

    def test_starts_with_default_products(self, store):
        catalog = ProductCatalog(store)
        assert [p.id for p in catalog.list()] == ['1', '2', '3']
        assert catalog.list()[0].name == DEFAULT_PRODUCTS[0]['name']

    def test_corrupt_data_uses_defaults(self, store):
        store.save('products', [{'id': '9'}])
        catalog = ProductCatalog(store)
        assert len(catalog.list()) == len(DEFAULT_PRODUCTS)

    def test_duplicate_ids_keep_first_record(self, store):
        first = dict(DEFAULT_PRODUCTS[0])
        second = dict(DEFAULT_PRODUCTS[1], id='1')
        store.save('products', [first, second, DEFAULT_PRODUCTS[2]])
        catalog = ProductCatalog(store)
        assert [p.name for p in catalog.list()] == ['Biodegradable Boxes', 'Protective Solutions']

    def test_saved_empty_catalog_stays_empty(self, store):
        store.save('products', [])
        assert ProductCatalog(store).list() == []

    def test_add_appends_and_persists(self, store):
        catalog = ProductCatalog(store)
        product = catalog.add(product_fields())

        assert catalog.list()[-1] == product
        assert product.id not in {'1', '2', '3'}

        reloaded = ProductCatalog(store)
        assert reloaded.list() == catalog.list()

    def test_rapid_adds_get_unique_ids(self, store):
        catalog = ProductCatalog(store)
        for i in range(20):
            catalog.add(product_fields(name=f'Product {i}'))

        ids = [p.id for p in catalog.list()]
        assert len(ids) == len(set(ids)) == 23

    def test_concurrent_adds_keep_every_product(self, store):
        catalog = ProductCatalog(store, defaults=[])

        def add_many(worker):
            for i in range(50):
                catalog.add(product_fields(name=f'W{worker}-{i}'))

        interval = sys.getswitchinterval()
        sys.setswitchinterval(1e-6)
        try:
            with patch('novaeco.utils.ids.time.time', return_value=1700000000.0):
                threads = [threading.Thread(target=add_many, args=(w,)) for w in range(8)]
                for thread in threads:
                    thread.start()
                for thread in threads:
                    thread.join()
        finally:
            sys.setswitchinterval(interval)

        ids = [p.id for p in catalog.list()]
        assert len(ids) == 400
        assert len(set(ids)) == 400
        assert len(ProductCatalog(store).list()) == 400

    def test_add_defaults_icon_to_box(self, store):
        fields = product_fields()
        del fields['icon']
        product = ProductCatalog(store).add(fields)
        assert product.icon == ProductIcon.BOX.value

    def test_add_normalizes_unknown_icon(self, store):
        product = ProductCatalog(store).add(product_fields(icon='Rocket'))
        assert product.icon == ProductIcon.BOX.value

    def test_add_accepts_numeric_strings_for_price(self, store):
        product = ProductCatalog(store).add(product_fields(price='12.40'))
        assert product.price == pytest.approx(12.40)

    @pytest.mark.parametrize('overrides, field', [
        ({'price': -1}, 'price'),
        ({'price': 'free'}, 'price'),
        ({'price': float('nan')}, 'price'),
        ({'price': True}, 'price'),
        ({'name': '   '}, 'name'),
        ({'description': ''}, 'description'),
        ({'image': None}, 'image'),
        ({'colour': 'green'}, 'colour'),
    ])
    def test_add_rejects_invalid_fields(self, store, overrides, field):
        catalog = ProductCatalog(store)
        with pytest.raises(InvalidProductError) as excinfo:
            catalog.add(product_fields(**overrides))

        assert field in excinfo.value.errors
        assert len(catalog.list()) == 3

    def test_add_requires_all_fields(self, store):
        with pytest.raises(InvalidProductError) as excinfo:
            ProductCatalog(store).add({'name': 'Only a name'})
        assert set(excinfo.value.errors) == {'description', 'price', 'category', 'image'}

    def test_zero_price_is_allowed(self, store):
        assert ProductCatalog(store).add(product_fields(price=0)).price == 0

    def test_update_merges_fields(self, store):
        catalog = ProductCatalog(store)
        updated = catalog.update('2', {'price': 19.99, 'name': 'Home-Compost Mailers'})

        assert updated.price == 19.99
        assert updated.name == 'Home-Compost Mailers'
        assert updated.category == 'Mailers'
        assert ProductCatalog(store).get('2') == updated

    def test_update_missing_id_is_noop(self, store):
        catalog = ProductCatalog(store)
        before = catalog.list()

        assert catalog.update('404', {'name': 'Ghost'}) is None
        assert catalog.list() == before

    def test_update_missing_id_wins_over_invalid_changes(self, store):
        catalog = ProductCatalog(store)
        assert catalog.update('404', {'price': -1}) is None

    def test_update_cannot_change_id(self, store):
        catalog = ProductCatalog(store)
        with pytest.raises(InvalidProductError):
            catalog.update('1', {'id': '99'})
        assert catalog.get('1') is not None

    def test_update_rejects_negative_price(self, store):
        catalog = ProductCatalog(store)
        with pytest.raises(InvalidProductError):
            catalog.update('1', {'price': -5})
        assert catalog.get('1').price == 25.99

    def test_delete_is_idempotent(self, store):
        catalog = ProductCatalog(store)

        assert catalog.delete('1') is True
        after_first = catalog.list()
        assert catalog.delete('1') is False
        assert catalog.list() == after_first
        assert [p.id for p in ProductCatalog(store).list()] == ['2', '3']

    def test_list_returns_copies(self, store):
        catalog = ProductCatalog(store)
        catalog.list()[0].name = 'Tampered'
        assert catalog.get('1').name == 'Biodegradable Boxes'

    def test_random_operation_sequences(self, store):
        """The catalog always equals a plain dict model of the same operations."""
        rng = random.Random(7)
        catalog = ProductCatalog(store, defaults=[])
        expected = {}

        for step in range(200):
            action = rng.choice(['add', 'update', 'delete'])
            known = list(expected) + ['missing']
            if action == 'add':
                product = catalog.add(product_fields(name=f'P{step}', price=rng.randint(0, 50)))
                expected[product.id] = product.to_dict()
            elif action == 'update':
                target = rng.choice(known)
                catalog.update(target, {'price': step})
                if target in expected:
                    expected[target]['price'] = float(step)
            else:
                target = rng.choice(known)
                catalog.delete(target)
                expected.pop(target, None)

            products = catalog.list()
            assert [p.to_dict() for p in products] == list(expected.values())
            assert len({p.id for p in products}) == len(products)
