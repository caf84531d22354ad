from .aapResourceBase import ResourceBase, GROUP_FIELDS

from typing import Any, Dict, Optional


class Group(ResourceBase):

    endpoint = 'groups'
    compareFields = GROUP_FIELDS
    semanticFields = ['variables']

    def byNameInInventory(self, name: str, inventory: int) -> Optional[Dict[str, Any]]:
        return self.byName(name, inventory=inventory)
