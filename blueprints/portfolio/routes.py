"""
Portfolio Routes - Ownership-scoped CRUD for every portfolio section

GET is public and lists the records of ?userId= (or the session user, or
the site owner). POST/PATCH/DELETE require a session and only touch records
owned by it.
"""

from flask import jsonify
from utils.data import resolve_portfolio_owner
from utils.decorators import login_required, current_user_id
from utils.helpers import get_payload
from utils.records import RECORD_SERVICES
from . import portfolio_bp

SECTIONS = '<any(' + ', '.join(RECORD_SERVICES) + '):section>'


@portfolio_bp.route(f'/{SECTIONS}', methods=['GET'])
def list_records(section):
    service = RECORD_SERVICES[section]
    owner = resolve_portfolio_owner()
    records = service.list(owner.id if owner else None)
    return jsonify([service.to_dict(r) for r in records])


@portfolio_bp.route(f'/{SECTIONS}', methods=['POST'])
@login_required
def create_record(section):
    service = RECORD_SERVICES[section]
    record = service.create(current_user_id(), get_payload())
    return jsonify(service.to_dict(record)), 201


@portfolio_bp.route(f'/{SECTIONS}/<record_id>', methods=['PATCH'])
@login_required
def update_record(section, record_id):
    service = RECORD_SERVICES[section]
    record = service.update(current_user_id(), record_id, get_payload())
    return jsonify(service.to_dict(record))


@portfolio_bp.route(f'/{SECTIONS}/<record_id>', methods=['DELETE'])
@login_required
def delete_record(section, record_id):
    RECORD_SERVICES[section].delete(current_user_id(), record_id)
    return jsonify({'success': True})
