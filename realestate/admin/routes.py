"""
Admin Routes

Login and logout for the single admin account, plus the listing
management endpoints. Every mutating route goes through one of the
decorators in realestate.admin.decorators.
"""

import logging

from flask import current_app, flash, jsonify, redirect, render_template, request, session, url_for
from flask_login import current_user, login_user, logout_user

from realestate.admin import admin_bp
from realestate.admin.decorators import admin_api_required, admin_required
from realestate.errors import InvalidCredentials, ServiceError
from realestate.services import authenticate, end_session, property_service, start_session

logger = logging.getLogger(__name__)


def _close_current_session():
    """Invalidate the server-side session (if any) and clear the cookie."""
    if current_user.is_authenticated:
        end_session(current_user.get_id())
    logout_user()
    session.clear()


@admin_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login page and credential check."""
    if request.method == 'GET':
        if current_user.is_authenticated:
            return redirect(url_for('admin.dashboard'))
        return render_template('admin/login.html')

    data = request.get_json(silent=True) if request.is_json else request.form
    if not isinstance(data, dict):
        data = {}
    username = str(data.get('username') or '')
    password = str(data.get('password') or '')

    try:
        principal = authenticate(username, password)
    except InvalidCredentials as e:
        logger.warning('Failed admin login from %s', request.remote_addr)
        _close_current_session()
        flash(e.message, 'danger')
        return redirect(url_for('admin.login'))

    # Fresh token on every login
    _close_current_session()
    principal = start_session(principal)
    login_user(principal)
    session.permanent = True
    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    """Admin logout - invalidates the server-side session."""
    _close_current_session()
    flash('You have been logged out of the admin panel.', 'info')
    return redirect(url_for('admin.login'))


@admin_bp.route('')
@admin_required
def dashboard():
    """Admin dashboard: upload form and current listings."""
    properties = property_service().list_listings()
    return render_template('admin/dashboard.html',
                           properties=properties,
                           admin_username=current_user.username,
                           max_kb=current_app.config['MAX_IMAGE_BYTES'] // 1000)


@admin_bp.route('/upload', methods=['POST'])
@admin_required
def upload():
    """Create a listing from a multipart form: image file plus property fields."""
    image = request.files.get('image')
    if image is None or not image.filename:
        return 'No file uploaded', 400

    # One byte past the limit is enough to know it is too large
    limit = current_app.config['MAX_IMAGE_BYTES']
    data = image.stream.read(limit + 1)

    try:
        prop = property_service().create_listing(data, image.filename, request.form.to_dict())
    except ServiceError as e:
        return e.message, e.status_code

    flash(f'Property "{prop.title}" added successfully.', 'success')
    return redirect(url_for('public.index'))


@admin_bp.route('/update/<int:property_id>', methods=['PUT'])
@admin_api_required
def update_property(property_id):
    """Apply a partial JSON update to a listing."""
    fields = request.get_json(silent=True)
    if not isinstance(fields, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    try:
        prop = property_service().update_listing(property_id, fields)
    except ServiceError as e:
        return jsonify({'error': e.message}), e.status_code

    return jsonify(prop.to_dict())


@admin_bp.route('/delete/<int:property_id>', methods=['DELETE'])
@admin_api_required
def delete_property(property_id):
    """Delete a listing and its image."""
    try:
        property_service().delete_listing(property_id)
    except ServiceError as e:
        return e.message, e.status_code

    return 'Property deleted successfully'
