"""Public page and admin panel entry point."""

from flask import Blueprint, render_template, request, redirect, url_for, flash
from novaeco.forms import ContactForm
from novaeco.models import MessageStatus
from novaeco.services import current_gate, get_state
from novaeco.services.contacts import ALL, InvalidMessageError

main_bp = Blueprint('main', __name__)

ADMIN_TABS = ('products', 'messages')


@main_bp.route('/')
def index():
    """Admin panel for the logged-in admin, public page for everyone else."""
    state = get_state()
    if current_gate().is_admin:
        return admin_panel(state)
    
    return render_template('main/index.html',
                         products=state.catalog.list(),
                         form=ContactForm())


def admin_panel(state):
    active_tab = request.args.get('tab', 'products')
    if active_tab not in ADMIN_TABS:
        active_tab = 'products'
    
    status = request.args.get('status', ALL)
    try:
        messages = state.inbox.filter(status)
    except InvalidMessageError:
        status = ALL
        messages = state.inbox.list()
    
    return render_template('admin/panel.html',
                         active_tab=active_tab,
                         products=state.catalog.list(),
                         messages=messages,
                         counts=state.inbox.counts(),
                         current_status=status,
                         statuses=[s.value for s in MessageStatus])


@main_bp.route('/contact', methods=['POST'])
def contact():
    """Record a contact message and notify the company by email."""
    form = ContactForm()
    if not form.validate_on_submit():
        for errors in form.errors.values():
            for error in errors:
                flash(error, 'danger')
        return redirect(url_for('main.index', _anchor='contact'))
    
    state = get_state()
    state.inbox.add(form.name.data, form.email.data, form.message.data)
    
    # Stored above regardless of how the notification goes
    sent = state.relay.send_contact_notification(
        form.name.data, form.email.data, form.message.data
    )
    if sent:
        flash('Message sent successfully!', 'success')
    else:
        flash('We received your message, but the email notification could not be sent.', 'warning')
    
    return redirect(url_for('main.index', _anchor='contact'))
