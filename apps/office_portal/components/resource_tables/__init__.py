"""
Resource Tables Component
One searchable, exportable table view shared by every list page
"""
from . import catalog  # registers the resource catalogue
from .descriptors import ResourceDescriptor, ViewField
from .routes import resource_tables_bp
from .service import ResourceTableService, UnknownResource


def init_resource_tables(app):
    """Initialize Resource Tables component with Flask app"""
    app.register_blueprint(resource_tables_bp)
    return resource_tables_bp


__all__ = [
    'resource_tables_bp',
    'ResourceDescriptor',
    'ResourceTableService',
    'UnknownResource',
    'ViewField',
    'init_resource_tables',
]
