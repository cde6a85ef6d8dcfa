"""
Resource Table Routes
JSON API and HTML page for every registered list resource
"""
from flask import Blueprint, Response, abort, current_app, jsonify, request

from office_portal.core import current_session, get_backend, login_required
from office_portal.core.pages import render_page
from .service import ResourceTableService, UnknownResource

resource_tables_bp = Blueprint('resource_tables', __name__)

SECTIONS = ('admin', 'data-manager', 'store', 'finance-manager', 'hr', 'employee')


def _service():
    return ResourceTableService(get_backend())


def _allowed_sections(portal_session):
    """Role areas the caller may open, plus the employee area for employee logins"""
    area_roles = current_app.config['AREA_ROLES']
    allowed = [s for s in SECTIONS if portal_session.has_any_role(area_roles.get(s, []))]
    if portal_session.is_employee:
        allowed.append('employee')
    return allowed


def _resolve(slug):
    """Descriptor for ``slug`` if the caller may see it, else an error response"""
    service = _service()
    try:
        descriptor = service.get_descriptor(slug)
    except UnknownResource as e:
        return service, None, (jsonify({'error': str(e)}), 404)
    if descriptor.section not in _allowed_sections(current_session()):
        return service, None, (jsonify({'error': 'Forbidden'}), 403)
    return service, descriptor, None


@resource_tables_bp.route('/api/resources')
@login_required()
def api_catalogue():
    """Resources the caller may open"""
    return jsonify(_service().catalogue(_allowed_sections(current_session())))


@resource_tables_bp.route('/api/resources/<slug>')
@login_required()
def api_resource_list(slug):
    """Normalized, filtered rows of one resource"""
    service, descriptor, error = _resolve(slug)
    if error:
        return error

    result = service.load(
        slug,
        current_session().token,
        q=request.args.get('q', ''),
        facet=request.args.get('facet'),
        employee_id=current_session().employee_id
    )
    if result['error']:
        return jsonify(result), 503
    return jsonify(result)


@resource_tables_bp.route('/api/resources/<slug>/export')
@login_required()
def api_resource_export(slug):
    """CSV download of the rows currently shown"""
    service, descriptor, error = _resolve(slug)
    if error:
        return error

    filename, csv_text, failure = service.export(
        slug,
        current_session().token,
        q=request.args.get('q', ''),
        facet=request.args.get('facet'),
        employee_id=current_session().employee_id
    )
    if failure:
        return jsonify({'error': failure}), 503
    return Response(
        csv_text,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'}
    )


@resource_tables_bp.route('/api/resources/<slug>/<item_id>')
@login_required()
def api_resource_detail(slug, item_id):
    """Read-only detail view of one row"""
    service, descriptor, error = _resolve(slug)
    if error:
        return error

    portal_session = current_session()
    detail, failure = service.detail(slug, item_id, portal_session.token, portal_session.employee_id)
    if failure:
        return jsonify({'error': failure}), 503
    if detail is None:
        return jsonify({'error': f'Item not found: {item_id}'}), 404
    return jsonify(detail)


@resource_tables_bp.route('/<any("admin", "data-manager", "store", "finance-manager", "hr", "employee"):section>/<slug>')
@login_required()
def resource_page(section, slug):
    """Render a list page (errors are shown in the page body)"""
    service, descriptor, error = _resolve(slug)
    if error:
        abort(error[1])
    if descriptor.section != section:
        abort(404)

    state = service.load(
        slug,
        current_session().token,
        q=request.args.get('q', ''),
        facet=request.args.get('facet'),
        employee_id=current_session().employee_id
    )
    detail = None
    if request.args.get('view'):
        detail = service.find_detail(descriptor, state['items'], request.args['view'])

    return render_page('resource_table.html', section, state=state, detail=detail)
