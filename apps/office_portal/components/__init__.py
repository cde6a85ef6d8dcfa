"""
Resource registry for portal components
Every list page is described by a ResourceDescriptor registered here.
"""


class ResourceRegistry:
    """Registry for list-resource descriptors"""

    def __init__(self):
        self.resources = {}

    def register(self, descriptor):
        """Register a resource descriptor (slugs are unique)"""
        if descriptor.slug in self.resources:
            raise ValueError(f"Resource already registered: {descriptor.slug}")
        self.resources[descriptor.slug] = descriptor
        return descriptor

    def get(self, slug):
        """Get a registered resource"""
        return self.resources.get(slug)

    def all(self):
        """Get all registered resources"""
        return list(self.resources.values())

    def for_section(self, section):
        """Resources shown under one portal area"""
        return [d for d in self.resources.values() if d.section == section]


# Global registry instance
registry = ResourceRegistry()


def register_resource(descriptor):
    """Register a descriptor in the global registry"""
    return registry.register(descriptor)


__all__ = ['ResourceRegistry', 'registry', 'register_resource']
