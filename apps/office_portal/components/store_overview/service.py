"""
Store Overview Business Logic
"""
from office_portal.components import registry
from office_portal.components.resource_tables import catalog  # noqa: F401  (store descriptors)

STORE_SECTIONS = [
    {
        'title': 'Inventory & Asset Management',
        'description': 'Manage office supplies and assets',
        'resources': ['stationary-regular', 'stationary-fixed', 'stationary-inventory'],
    },
    {
        'title': 'Laboratory Equipment',
        'description': 'Laboratory equipment and supplies management',
        'resources': ['lab-instruments', 'lab-components', 'lab-materials', 'lab-inventory'],
    },
    {
        'title': 'Inventory Segments',
        'description': 'Permanent office equipment and furniture',
        'resources': ['assets-furniture', 'assets-systems', 'assets-printers'],
    },
    {
        'title': 'Materials In/Out',
        'description': 'Manage all material movements (in and out)',
        'resources': ['materials'],
    },
]


class StoreOverviewService:
    """Service for the store dashboard"""

    def __init__(self, backend):
        self.backend = backend

    def get_overview(self, token):
        """Item counts per store table, grouped by section"""
        descriptors = {
            slug: registry.get(slug)
            for section in STORE_SECTIONS for slug in section['resources']
        }
        lists = self.backend.fetch_many([d.endpoint for d in descriptors.values()], token=token)

        sections = []
        for section in STORE_SECTIONS:
            items = []
            for slug in section['resources']:
                descriptor = descriptors[slug]
                items.append({
                    'slug': slug,
                    'title': descriptor.title,
                    'path': f'/store/{slug}',
                    'count': len(lists.get(descriptor.endpoint, [])),
                })
            sections.append({
                'title': section['title'],
                'description': section['description'],
                'count': sum(item['count'] for item in items),
                'items': items,
            })
        return {'sections': sections, 'total': sum(s['count'] for s in sections)}
