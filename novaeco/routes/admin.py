"""Admin panel actions."""

from flask import Blueprint, render_template, redirect, url_for, flash, request
from novaeco.forms import ProductForm
from novaeco.services import get_state, InvalidMessageError, InvalidProductError
from novaeco.utils.decorators import admin_required

admin_bp = Blueprint('admin', __name__)


def flash_errors(errors):
    for field, message in errors.items():
        flash(f'{field}: {message}', 'danger')


# --- Product Management ---
@admin_bp.route('/products/new', methods=['GET', 'POST'])
@admin_required
def add_product():
    """Add a new product."""
    form = ProductForm()
    if form.validate_on_submit():
        try:
            get_state().catalog.add(form.to_fields())
        except InvalidProductError as e:
            flash_errors(e.errors)
        else:
            flash('Product added successfully!', 'success')
            return redirect(url_for('main.index', tab='products'))
    
    return render_template('admin/product_form.html', form=form, product=None)


@admin_bp.route('/products/<product_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_product(product_id):
    """Edit an existing product."""
    catalog = get_state().catalog
    product = catalog.get(product_id)
    if product is None:
        flash('Product not found.', 'warning')
        return redirect(url_for('main.index', tab='products'))
    
    form = ProductForm(obj=product)
    if form.validate_on_submit():
        try:
            catalog.update(product_id, form.to_fields())
        except InvalidProductError as e:
            flash_errors(e.errors)
        else:
            flash('Product updated successfully!', 'success')
            return redirect(url_for('main.index', tab='products'))
    
    return render_template('admin/product_form.html', form=form, product=product)


@admin_bp.route('/products/<product_id>/delete', methods=['POST'])
@admin_required
def delete_product(product_id):
    """Delete a product."""
    if get_state().catalog.delete(product_id):
        flash('Product deleted successfully!', 'success')
    else:
        flash('Product not found.', 'warning')
    return redirect(url_for('main.index', tab='products'))


# --- Contact Messages ---
@admin_bp.route('/messages/<message_id>')
@admin_required
def message_detail(message_id):
    """Single message view."""
    message = get_state().inbox.get(message_id)
    if message is None:
        flash('Message not found.', 'warning')
        return redirect(url_for('main.index', tab='messages'))
    return render_template('admin/message_detail.html', message=message)


@admin_bp.route('/messages/<message_id>/status', methods=['POST'])
@admin_required
def update_message_status(message_id):
    """Move a message to another status."""
    status = request.form.get('status', '')
    try:
        message = get_state().inbox.set_status(message_id, status)
    except InvalidMessageError:
        flash('Invalid status.', 'danger')
        return redirect(url_for('main.index', tab='messages'))
    
    if message is None:
        flash('Message not found.', 'warning')
    else:
        flash(f'Message marked as {message.status}', 'success')
    return redirect(url_for('main.index', tab='messages',
                            status=request.form.get('filter', 'all')))


@admin_bp.route('/messages/<message_id>/delete', methods=['POST'])
@admin_required
def delete_message(message_id):
    """Delete a message."""
    if get_state().inbox.delete(message_id):
        flash('Message deleted successfully', 'success')
    else:
        flash('Message not found.', 'warning')
    return redirect(url_for('main.index', tab='messages'))
