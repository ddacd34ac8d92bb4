"""Authentication routes."""

from flask import Blueprint, render_template, redirect, url_for, flash, request
from flask_login import login_required
from novaeco.forms import LoginForm
from novaeco.services import current_gate

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login."""
    gate = current_gate()
    if gate.is_authenticated:
        return redirect(url_for('main.index'))
    
    form = LoginForm()
    if form.validate_on_submit():
        if gate.login(form.email.data, form.password.data):
            flash('Login successful!', 'success')
            
            next_page = request.args.get('next')
            if next_page and next_page.startswith('/') and not next_page.startswith('//'):
                return redirect(next_page)
            return redirect(url_for('main.index'))
        
        flash('Invalid credentials', 'danger')
    
    return render_template('auth/login.html', form=form)


@auth_bp.route('/logout')
@login_required
def logout():
    """Admin logout."""
    current_gate().logout()
    flash('You have been logged out.', 'info')
    return redirect(url_for('main.index'))
