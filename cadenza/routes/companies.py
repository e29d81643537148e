"""Company directory routes."""
import logging

from flask import Blueprint, jsonify, request
from flask_babel import gettext as _

from cadenza.models import db, Company
from cadenza.services.listing import apply_search, paginated_response

companies_bp = Blueprint('companies', __name__, url_prefix='/api/companies')
logger = logging.getLogger(__name__)


@companies_bp.route('', methods=['GET'])
def list_companies():
    """List companies, optionally filtered by `search`."""
    query = apply_search(Company.query, Company, request.args.get('search'))
    return jsonify(paginated_response(query.order_by(Company.name.asc(), Company.id.asc())))


@companies_bp.route('/<int:company_id>', methods=['GET'])
def get_company(company_id):
    company = db.get_or_404(Company, company_id, description=_('Company not found'))
    return jsonify({'success': True, 'data': company.to_dict()})


@companies_bp.route('', methods=['POST'])
def create_company():
    company = Company(**Company.writable(request.get_json(silent=True)))
    db.session.add(company)
    db.session.commit()
    logger.info("Created company %s (%s)", company.id, company.name)
    return jsonify({'success': True, 'data': company.to_dict()}), 201


@companies_bp.route('/<int:company_id>', methods=['PUT'])
def update_company(company_id):
    company = db.get_or_404(Company, company_id, description=_('Company not found'))
    company.apply(request.get_json(silent=True))
    db.session.commit()
    return jsonify({'success': True, 'data': company.to_dict()})


@companies_bp.route('/<int:company_id>', methods=['DELETE'])
def delete_company(company_id):
    company = db.get_or_404(Company, company_id, description=_('Company not found'))
    db.session.delete(company)
    db.session.commit()
    logger.info("Deleted company %s", company_id)
    return jsonify({'success': True, 'message': _('Company deleted successfully')})
