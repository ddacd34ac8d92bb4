"""JSON API endpoints for AJAX operations.

Mutating requests are CSRF-protected: fetch a token from ``/api/csrf-token``
and send it back in the ``X-CSRFToken`` header.
"""

from flask import Blueprint, jsonify, request
from flask_wtf.csrf import generate_csrf
from novaeco.services import current_gate, get_state, InvalidMessageError, InvalidProductError
from novaeco.utils.decorators import api_admin_required

api_bp = Blueprint('api', __name__)


def json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def not_found(what):
    return jsonify({'success': False, 'message': f'{what} not found'}), 404


# --- Products ---
@api_bp.route('/products')
def list_products():
    """Public product listing."""
    products = get_state().catalog.list()
    return jsonify({'products': [p.to_dict() for p in products]})


@api_bp.route('/products', methods=['POST'])
@api_admin_required
def create_product():
    data = json_body()
    if data is None:
        return jsonify({'success': False, 'message': 'JSON object expected'}), 400
    
    try:
        product = get_state().catalog.add(data)
    except InvalidProductError as e:
        return jsonify({'success': False, 'errors': e.errors}), 400
    
    return jsonify({'success': True, 'product': product.to_dict()}), 201


@api_bp.route('/products/<product_id>', methods=['PATCH', 'PUT'])
@api_admin_required
def update_product(product_id):
    data = json_body()
    if data is None:
        return jsonify({'success': False, 'message': 'JSON object expected'}), 400
    
    try:
        product = get_state().catalog.update(product_id, data)
    except InvalidProductError as e:
        return jsonify({'success': False, 'errors': e.errors}), 400
    
    if product is None:
        return not_found('Product')
    return jsonify({'success': True, 'product': product.to_dict()})


@api_bp.route('/products/<product_id>', methods=['DELETE'])
@api_admin_required
def delete_product(product_id):
    if not get_state().catalog.delete(product_id):
        return not_found('Product')
    return jsonify({'success': True})


# --- Contact messages ---
@api_bp.route('/messages')
@api_admin_required
def list_messages():
    """Messages newest first, optionally filtered by ?status=."""
    inbox = get_state().inbox
    try:
        messages = inbox.filter(request.args.get('status'))
    except InvalidMessageError as e:
        return jsonify({'success': False, 'message': str(e)}), 400
    
    return jsonify({
        'messages': [m.to_dict() for m in messages],
        'counts': inbox.counts(),
    })


@api_bp.route('/messages/<message_id>')
@api_admin_required
def get_message(message_id):
    message = get_state().inbox.get(message_id)
    if message is None:
        return not_found('Message')
    return jsonify({'message': message.to_dict()})


@api_bp.route('/messages/<message_id>', methods=['PATCH'])
@api_admin_required
def update_message(message_id):
    data = json_body()
    if data is None or 'status' not in data:
        return jsonify({'success': False, 'message': 'status is required'}), 400
    
    try:
        message = get_state().inbox.set_status(message_id, data['status'])
    except InvalidMessageError as e:
        return jsonify({'success': False, 'message': str(e)}), 400
    
    if message is None:
        return not_found('Message')
    return jsonify({'success': True, 'message': message.to_dict()})


@api_bp.route('/messages/<message_id>', methods=['DELETE'])
@api_admin_required
def delete_message(message_id):
    if not get_state().inbox.delete(message_id):
        return not_found('Message')
    return jsonify({'success': True})


# --- Session ---
@api_bp.route('/session')
def session_state():
    """Current authentication snapshot."""
    return jsonify(current_gate().snapshot())


@api_bp.route('/csrf-token')
def csrf_token():
    """Token for the X-CSRFToken header, bound to this client's session."""
    return jsonify({'csrfToken': generate_csrf()})
