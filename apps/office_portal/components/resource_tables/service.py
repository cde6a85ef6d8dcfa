"""
Generic list-resource service
fetch -> normalize -> filter -> render/export, for any registered resource
"""
import logging

from office_portal.components import registry
from office_portal.core import BackendError
from office_portal.core.table import facet_filter, facet_options, filter_rows, to_csv

logger = logging.getLogger(__name__)


class UnknownResource(LookupError):
    """Raised for a slug with no registered descriptor"""


class ResourceTableService:
    """Service for the generic data-table component"""

    def __init__(self, backend):
        self.backend = backend

    def get_descriptor(self, slug):
        descriptor = registry.get(slug)
        if descriptor is None:
            raise UnknownResource(f"Unknown resource: {slug}")
        return descriptor

    def fetch_items(self, descriptor, token, employee_id=None):
        """Fetch and normalize every item of a resource (raises BackendError)"""
        path, params = descriptor.request_for(employee_id)
        raw_items = self.backend.get_list(path, token=token, params=params)
        return [descriptor.normalize_item(raw) for raw in raw_items]

    def load(self, slug, token, q='', facet=None, employee_id=None):
        """Table state for one resource

        A failed fetch yields an error string and an empty item list.
        """
        descriptor = self.get_descriptor(slug)
        result = {
            'resource': descriptor.slug,
            'title': descriptor.title,
            'columns': [f.to_dict() for f in descriptor.fields],
            'items': [],
            'count': 0,
            'total': 0,
            'error': None,
            'query': q or '',
            'facet': {'field': descriptor.facet, 'value': facet or 'all', 'options': []},
            'exportFilename': descriptor.csv_filename,
        }

        try:
            items = self.fetch_items(descriptor, token, employee_id)
        except BackendError as e:
            logger.warning("Failed to load %s: %s", slug, e.message)
            result['error'] = f"Failed to fetch {descriptor.title.lower()}: {e.message}"
            return result

        visible = filter_rows(items, q, descriptor.search_fields)
        visible = facet_filter(visible, descriptor.facet, facet)

        result['items'] = visible
        result['count'] = len(visible)
        result['total'] = len(items)
        result['facet']['options'] = facet_options(items, descriptor.facet)
        return result

    def export(self, slug, token, q='', facet=None, employee_id=None):
        """CSV of exactly the rows the table shows for the same query

        Returns (filename, csv_text, error).
        """
        state = self.load(slug, token, q=q, facet=facet, employee_id=employee_id)
        descriptor = self.get_descriptor(slug)
        if state['error']:
            return descriptor.csv_filename, None, state['error']
        return descriptor.csv_filename, to_csv(state['items'], descriptor.columns), None

    def detail(self, slug, item_id, token, employee_id=None):
        """Read-only detail view of one item, resolved from the list

        Returns (detail, error); detail is None when the item is not found.
        """
        descriptor = self.get_descriptor(slug)
        try:
            items = self.fetch_items(descriptor, token, employee_id)
        except BackendError as e:
            logger.warning("Failed to load %s for detail view: %s", slug, e.message)
            return None, f"Failed to fetch {descriptor.title.lower()}: {e.message}"

        return self.find_detail(descriptor, items, item_id), None

    def find_detail(self, descriptor, items, item_id):
        """Detail view for the row with ``item_id`` among normalized ``items``"""
        for item in items:
            if str(item.get('id')) == str(item_id):
                return {
                    'title': f"{descriptor.title} Details",
                    'id': item.get('id'),
                    'fields': [
                        dict(field.to_dict(), value=item.get(field.name))
                        for field in descriptor.fields
                    ],
                }
        return None

    def catalogue(self, sections=None):
        """Descriptors visible for the given sections (all when None)"""
        return [
            descriptor.to_dict() for descriptor in registry.all()
            if sections is None or descriptor.section in sections
        ]
