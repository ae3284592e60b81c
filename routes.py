"""
Public routes for the certificate portal: listing, detail, PDF download,
JSON listing and verification. All read-only.
"""
from flask import Blueprint, render_template, request, jsonify, make_response

from certificate import (
    list_summaries,
    list_public_summaries,
    require_by_public_id,
    get_verification_summary,
)
from generate_certificate import render_certificate_pdf

main_bp = Blueprint('main', __name__)


# Home route
@main_bp.route('/')
def index():
    certs = list_summaries()
    return render_template('index.html', certs=certs)


@main_bp.route('/cert/<cert_id>')
def certificate_detail(cert_id):
    cert = require_by_public_id(cert_id)
    return render_template('certificate.html', cert=cert)


@main_bp.route('/cert/<cert_id>/pdf')
def certificate_pdf(cert_id):
    """Render the certificate as a PDF attachment named after its public id."""
    cert = require_by_public_id(cert_id)
    pdf_bytes = render_certificate_pdf(cert)
    response = make_response(pdf_bytes)
    response.headers['Content-Type'] = 'application/pdf'
    response.headers['Content-Disposition'] = f'attachment; filename={cert.cert_id}.pdf'
    return response


@main_bp.route('/api/certificates.json')
def certificates_json():
    return jsonify(list_public_summaries())


@main_bp.route('/verify')
def verify():
    # Low-disclosure: signature and notes are never selected for this page
    query = request.args.get('cert') or ''
    if not query:
        return render_template('verify.html', searched=False, query='', result=None)
    result = get_verification_summary(query)
    return render_template('verify.html', searched=True, query=query, result=result)
