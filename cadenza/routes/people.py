"""People directory routes."""
import logging

from flask import Blueprint, jsonify, request
from flask_babel import gettext as _

from cadenza.models import db, Person
from cadenza.services.listing import apply_search, paginated_response

people_bp = Blueprint('people', __name__, url_prefix='/api/people')
logger = logging.getLogger(__name__)


@people_bp.route('', methods=['GET'])
def list_people():
    query = apply_search(Person.query, Person, request.args.get('search'))
    return jsonify(paginated_response(query.order_by(Person.name.asc(), Person.id.asc())))


@people_bp.route('/<int:person_id>', methods=['GET'])
def get_person(person_id):
    person = db.get_or_404(Person, person_id, description=_('Person not found'))
    return jsonify({'success': True, 'data': person.to_dict()})


@people_bp.route('', methods=['POST'])
def create_person():
    person = Person(**Person.writable(request.get_json(silent=True)))
    db.session.add(person)
    db.session.commit()
    logger.info("Created person %s (%s)", person.id, person.name)
    return jsonify({'success': True, 'data': person.to_dict()}), 201


@people_bp.route('/<int:person_id>', methods=['PUT'])
def update_person(person_id):
    person = db.get_or_404(Person, person_id, description=_('Person not found'))
    person.apply(request.get_json(silent=True))
    db.session.commit()
    return jsonify({'success': True, 'data': person.to_dict()})


@people_bp.route('/<int:person_id>', methods=['DELETE'])
def delete_person(person_id):
    person = db.get_or_404(Person, person_id, description=_('Person not found'))
    db.session.delete(person)
    db.session.commit()
    logger.info("Deleted person %s", person_id)
    return jsonify({'success': True, 'message': _('Person deleted successfully')})
