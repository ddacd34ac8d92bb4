"""Product model."""

from dataclasses import dataclass, asdict
from enum import Enum


class ProductIcon(str, Enum):
    """Glyphs a product card can show."""
    BOX = 'Package2'
    RECYCLE = 'Recycle'
    SHIELD = 'Shield'
    
    @classmethod
    def parse(cls, value):
        """Map a stored icon name to a variant, falling back to the box."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.BOX
    
    @property
    def glyph(self):
        """Bootstrap Icons class used to render the glyph."""
        return _GLYPHS[self]
    
    @property
    def label(self):
        return _LABELS[self]


_GLYPHS = {
    ProductIcon.BOX: 'bi-box-seam',
    ProductIcon.RECYCLE: 'bi-recycle',
    ProductIcon.SHIELD: 'bi-shield-check',
}

_LABELS = {
    ProductIcon.BOX: 'Package',
    ProductIcon.RECYCLE: 'Recycle',
    ProductIcon.SHIELD: 'Shield',
}


@dataclass
class Product:
    """A packaging product in the catalog."""
    id: str
    name: str
    description: str
    price: float
    category: str
    image: str
    icon: str = ProductIcon.BOX.value
    
    @property
    def glyph(self):
        return ProductIcon.parse(self.icon).glyph
    
    def to_dict(self):
        return asdict(self)
    
    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data['id']),
            name=data['name'],
            description=data['description'],
            price=float(data['price']),
            category=data['category'],
            image=data['image'],
            icon=data.get('icon', ProductIcon.BOX.value),
        )
    
    def __repr__(self):
        return f'<Product {self.name}>'


# Catalog shown before the admin has saved anything
DEFAULT_PRODUCTS = [
    {
        'id': '1',
        'name': 'Biodegradable Boxes',
        'description': 'Made from 100% recycled materials, our boxes decompose naturally without harming the environment.',
        'price': 25.99,
        'category': 'Boxes',
        'image': 'https://images.unsplash.com/photo-1558618666-fcd25c85cd64?auto=format&fit=crop&q=80&w=800',
        'icon': ProductIcon.BOX.value,
    },
    {
        'id': '2',
        'name': 'Compostable Mailers',
        'description': 'Plant-based mailers that break down completely in home compost within 180 days.',
        'price': 18.50,
        'category': 'Mailers',
        'image': 'https://images.unsplash.com/photo-1586075010923-2dd4570fb338?auto=format&fit=crop&q=80&w=800',
        'icon': ProductIcon.RECYCLE.value,
    },
    {
        'id': '3',
        'name': 'Protective Solutions',
        'description': 'Eco-friendly bubble wrap alternatives and protective packaging made from organic materials.',
        'price': 32.75,
        'category': 'Protection',
        'image': 'https://images.unsplash.com/photo-1605600659908-0ef719419d41?auto=format&fit=crop&q=80&w=800',
        'icon': ProductIcon.SHIELD.value,
    },
]
