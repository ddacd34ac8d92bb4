"""WTForms used by the public page and the admin panel."""

from .auth import LoginForm
from .contact import ContactForm
from .product import ProductForm

__all__ = ['LoginForm', 'ContactForm', 'ProductForm']
