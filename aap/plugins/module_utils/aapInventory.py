from .aapResourceBase import ResourceBase, INVENTORY_FIELDS

from typing import Any, Dict, Optional


class Inventory(ResourceBase):

    endpoint = 'inventories'
    compareFields = INVENTORY_FIELDS
    semanticFields = ['variables']

    def byNameInOrganization(self, name: str, organization: int) -> Optional[Dict[str, Any]]:
        return self.byName(name, organization=organization)
