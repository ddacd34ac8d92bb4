"""Product catalog service."""

import logging
import math
import threading
from dataclasses import replace
from novaeco.models import Product, ProductIcon, DEFAULT_PRODUCTS
from novaeco.utils.ids import new_id, drop_duplicate_ids

logger = logging.getLogger(__name__)

TEXT_FIELDS = ('name', 'description', 'category', 'image')
EDITABLE_FIELDS = TEXT_FIELDS + ('price', 'icon')


class InvalidProductError(ValueError):
    """Product fields failed validation."""
    
    def __init__(self, errors):
        super().__init__('; '.join(f'{k}: {v}' for k, v in errors.items()))
        self.errors = errors


def clean_product_fields(fields, partial=False):
    """Validate and normalize product fields.
    
    With ``partial`` set only the given fields are checked, as for an
    update. Raises ``InvalidProductError`` with a field -> message map.
    """
    errors = {}
    cleaned = {}
    
    for name in sorted(set(fields) - set(EDITABLE_FIELDS)):
        errors[name] = 'Unknown field.'
    
    for name in TEXT_FIELDS:
        if name not in fields:
            if not partial:
                errors[name] = 'This field is required.'
            continue
        value = fields[name]
        if not isinstance(value, str) or not value.strip():
            errors[name] = 'This field is required.'
        else:
            cleaned[name] = value.strip()
    
    if 'price' in fields:
        price = _parse_price(fields['price'])
        if price is None:
            errors['price'] = 'Price must be a number of at least 0.'
        else:
            cleaned['price'] = price
    elif not partial:
        errors['price'] = 'This field is required.'
    
    if 'icon' in fields:
        cleaned['icon'] = ProductIcon.parse(fields['icon']).value
    elif not partial:
        cleaned['icon'] = ProductIcon.BOX.value
    
    if errors:
        raise InvalidProductError(errors)
    return cleaned


def _parse_price(value):
    if isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(price) or price < 0:
        return None
    return price


class ProductCatalog:
    """Ordered product list, written through to the store on every change.
    
    Request threads share one catalog; every mutation holds ``_lock`` from
    id generation through the save.
    """
    
    def __init__(self, store, key='products', defaults=DEFAULT_PRODUCTS):
        self.store = store
        self.key = key
        self._lock = threading.Lock()
        self._products = self._load(defaults)
    
    def _load(self, defaults):
        records = self.store.load(self.key, default=defaults)
        try:
            products = [Product.from_dict(record) for record in records]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning('Unreadable product data under %r, using defaults: %s', self.key, e)
            return [Product.from_dict(record) for record in defaults]
        return drop_duplicate_ids(products, self.key)
    
    def _save(self):
        self.store.save(self.key, [p.to_dict() for p in self._products])
    
    def _find(self, product_id):
        for product in self._products:
            if product.id == product_id:
                return product
        return None
    
    def list(self):
        """Products in insertion order."""
        with self._lock:
            return [replace(p) for p in self._products]
    
    def get(self, product_id):
        with self._lock:
            product = self._find(product_id)
            return replace(product) if product else None
    
    def add(self, fields):
        """Append a new product and return it."""
        cleaned = clean_product_fields(fields)
        with self._lock:
            product = Product(id=new_id({p.id for p in self._products}), **cleaned)
            self._products.append(product)
            self._save()
        logger.info('Added product %s (%s)', product.id, product.name)
        return replace(product)
    
    def update(self, product_id, changes):
        """Merge ``changes`` into a product. Returns None if it does not exist.
        
        A missing id wins over invalid ``changes``.
        """
        with self._lock:
            product = self._find(product_id)
            if product is None:
                logger.info('Update skipped, no product %s', product_id)
                return None
            
            cleaned = clean_product_fields(changes, partial=True)
            for name, value in cleaned.items():
                setattr(product, name, value)
            self._save()
            updated = replace(product)
        logger.info('Updated product %s', product_id)
        return updated
    
    def delete(self, product_id):
        """Remove a product. Returns False if it does not exist."""
        with self._lock:
            product = self._find(product_id)
            if product is None:
                logger.info('Delete skipped, no product %s', product_id)
                return False
            
            self._products.remove(product)
            self._save()
        logger.info('Deleted product %s', product_id)
        return True
