"""Product management form."""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, DecimalField, SelectField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange
from novaeco.models import ProductIcon


class ProductForm(FlaskForm):
    """Add/edit product form."""
    name = StringField('Product Name', validators=[
        DataRequired(message='Name is required'),
        Length(max=150)
    ])
    description = TextAreaField('Description', validators=[
        DataRequired(message='Description is required'),
        Length(max=1000)
    ])
    price = DecimalField('Price', places=2, validators=[
        InputRequired(message='Price is required'),
        NumberRange(min=0, message='Price cannot be negative')
    ])
    category = StringField('Category', validators=[
        DataRequired(message='Category is required'),
        Length(max=100)
    ])
    image = StringField('Image URL', validators=[
        DataRequired(message='Image URL is required'),
        Length(max=500)
    ])
    icon = SelectField('Icon', choices=[(icon.value, icon.label) for icon in ProductIcon],
                       default=ProductIcon.BOX.value)
    
    def to_fields(self):
        """Field values in the shape the catalog expects."""
        return {
            'name': self.name.data,
            'description': self.description.data,
            'price': self.price.data,
            'category': self.category.data,
            'image': self.image.data,
            'icon': self.icon.data,
        }
