from flask import Blueprint, request, render_template, redirect, url_for, session
from flask_login import login_user, logout_user
import logging

from certificate import get_full_list, insert_certificate, delete_certificate
from models import AdminUser
from utils import admin_required, check_admin_password, is_admin, submitted_fields

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


@admin_bp.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'GET' and is_admin():
        return redirect(url_for('admin.dashboard'))
    if request.method == 'POST':
        password = submitted_fields().get('password')
        if check_admin_password(password):
            login_user(AdminUser())
            session['user_type'] = 'admin'
            logging.info('[ADMIN LOGIN] Admin signed in')
            return redirect(url_for('admin.dashboard'))
        logging.warning(f'[ADMIN LOGIN] Invalid password from {request.remote_addr}')
        return render_template('admin_login.html', error='Invalid password')
    return render_template('admin_login.html', error=None)


@admin_bp.route('/logout')
def logout():
    logout_user()
    session.clear()
    return redirect(url_for('main.index'))


@admin_bp.route('', methods=['GET'])
@admin_required
def dashboard():
    certs = get_full_list()
    return render_template('admin.html', certs=certs)


@admin_bp.route('/create', methods=['POST'])
@admin_required
def create():
    fields = submitted_fields()
    # DuplicateCertificateId propagates to the error view
    new_id = insert_certificate(fields)
    logging.info(f'[ADMIN CREATE] Certificate id={new_id} created')
    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/delete', methods=['POST'])
@admin_required
def delete():
    raw_id = submitted_fields().get('id')
    try:
        key = int(raw_id)
    except (TypeError, ValueError):
        logging.warning(f'[ADMIN DELETE] Ignoring invalid id: {raw_id!r}')
        return redirect(url_for('admin.dashboard'))
    if not delete_certificate(key):
        logging.info(f'[ADMIN DELETE] No certificate with id={key}')
    return redirect(url_for('admin.dashboard'))
