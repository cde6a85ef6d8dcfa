"""
Resource descriptors
A descriptor tells the generic table view where a list lives on the backend,
how to normalize its items and which fields are searchable and exportable.
"""
from typing import Callable, Dict, List, Optional

from office_portal.core.normalize import format_date, parse_amount

FIELD_TYPES = ('text', 'date', 'currency', 'number', 'status')


class _RawValues(dict):
    """format_map source that renders missing keys as empty strings"""

    def __missing__(self, key):
        return ''


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


class ViewField:
    """One column of a list page and one line of its read-only detail view"""

    def __init__(self, name: str, label: str, type: str = 'text',
                 source: Optional[str] = None, default=None, lower: bool = False):
        if type not in FIELD_TYPES:
            raise ValueError(f"Unknown field type: {type}")
        self.name = name
        self.label = label
        self.type = type
        self.source = source or name
        self.default = default
        self.lower = lower

    def _default(self, raw):
        if isinstance(self.default, str):
            return self.default.format_map(_RawValues(raw))
        return self.default

    def convert(self, raw: Dict) -> object:
        """Normalize this field's value out of a raw backend item"""
        value = raw.get(self.source)

        if self.type == 'date':
            text = format_date(value)
            if not text and isinstance(value, str) and value.strip():
                # Non-ISO strings are shown as sent
                text = value.strip()
            return text or (self._default(raw) or '')

        if self.type in ('currency', 'number'):
            if _is_blank(value) and self.default is not None:
                return self._default(raw)
            number = parse_amount(value)
            if self.type == 'number' and number.is_integer():
                return int(number)
            return number

        if _is_blank(value):
            value = self._default(raw)
            if value is None:
                return ''
        text = value if isinstance(value, str) else str(value)
        return text.lower() if self.lower else text

    def to_dict(self):
        return {'name': self.name, 'label': self.label, 'type': self.type}


class ResourceDescriptor:
    """A backend collection rendered as a searchable, exportable table"""

    def __init__(self, slug: str, title: str, endpoint: str, section: str,
                 fields: List[ViewField], search_fields: List[str],
                 facet: Optional[str] = None, csv_filename: Optional[str] = None,
                 postprocess: Optional[Callable[[Dict, Dict], Dict]] = None,
                 params: Optional[Dict[str, str]] = None):
        field_names = {f.name for f in fields}
        unknown = [name for name in search_fields if name not in field_names]
        if unknown:
            raise ValueError(f"{slug}: search fields not in view fields: {unknown}")
        if facet and facet not in field_names:
            raise ValueError(f"{slug}: facet field not in view fields: {facet}")

        self.slug = slug
        self.title = title
        self.endpoint = endpoint
        self.section = section
        self.fields = fields
        self.search_fields = search_fields
        self.facet = facet
        self.csv_filename = csv_filename or f"{slug.replace('-', '_')}.csv"
        self.postprocess = postprocess
        self.params = params or {}

    @property
    def employee_scoped(self):
        """True when the endpoint is filled in with the signed-in employee's id"""
        templates = [self.endpoint] + list(self.params.values())
        return any('{employeeId}' in text for text in templates)

    def request_for(self, employee_id=None):
        """(path, params) to fetch this resource, with {employeeId} filled in"""
        values = _RawValues(employeeId=employee_id or '')
        path = self.endpoint.format_map(values)
        params = {key: value.format_map(values) for key, value in self.params.items()}
        return path, params or None

    @property
    def columns(self):
        """(key, label) pairs in display order"""
        return [(f.name, f.label) for f in self.fields]

    def normalize_item(self, raw: Dict) -> Dict:
        """Map one raw backend item onto the descriptor's view fields"""
        if not isinstance(raw, dict):
            raw = {}
        row = {'id': raw.get('id')}
        for field in self.fields:
            row[field.name] = field.convert(raw)
        if self.postprocess:
            row = self.postprocess(row, raw)
        return row

    def to_dict(self):
        return {
            'slug': self.slug,
            'title': self.title,
            'section': self.section,
            'path': f'/{self.section}/{self.slug}',
            'fields': [f.to_dict() for f in self.fields],
            'searchFields': self.search_fields,
            'facet': self.facet,
        }
