"""
Public Routes
"""

from flask import abort, current_app, jsonify, render_template, send_from_directory

from realestate.public import public_bp
from realestate.services import property_service


@public_bp.route('/')
def index():
    """Listing page"""
    return render_template('index.html', properties=property_service().list_listings())


@public_bp.route('/properties')
def list_properties():
    """All listings as JSON"""
    properties = property_service().list_listings()
    return jsonify([p.to_dict() for p in properties])


@public_bp.route('/uploads/<key>')
def uploaded_image(key):
    files = current_app.extensions['file_store']
    if not files.exists(key):
        abort(404)
    return send_from_directory(files.root, key)
