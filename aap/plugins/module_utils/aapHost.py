from .aapResourceBase import ResourceBase, HOST_FIELDS

from typing import Any, Dict, List, Optional, Tuple


def determine_group_changes(current: List[int], desired: List[int]) -> Tuple[List[int], List[int]]:
    """Returns the group ids to associate and to disassociate, in the order
    they were given."""
    to_add = [g for g in desired if g not in current]
    to_remove = [g for g in current if g not in desired]
    return to_add, to_remove


class Host(ResourceBase):

    endpoint = 'hosts'
    compareFields = HOST_FIELDS
    semanticFields = ['variables']

    def byNameInInventory(self, name: str, inventory: int) -> Optional[Dict[str, Any]]:
        return self.byName(name, inventory=inventory)

    def groupIds(self, id: int) -> List[int]:
        groups = []
        path, params = f"{self.itemPath(id)}groups/", None
        while path:
            res = self.request('GET', path, params=params)
            groups.extend(g['id'] for g in res.get('results', []))
            path, params = self.nextPage(res.get('next'))
        return groups

    def associateGroup(self, id: int, group_id: int) -> None:
        self.request('POST', f"{self.itemPath(id)}groups/",
                     {'id': group_id}, expected=(204,))

    def disassociateGroup(self, id: int, group_id: int) -> None:
        self.request('POST', f"{self.itemPath(id)}groups/",
                     {'id': group_id, 'disassociate': True}, expected=(204,))

    def syncGroups(self, id: int, desired: List[int]) -> bool:
        """Makes the host a member of exactly the desired groups. Returns
        whether any membership changed."""
        # Hosts created in check mode carry a negative placeholder id.
        current = self.groupIds(id) if id > 0 else []
        to_add, to_remove = determine_group_changes(current, desired)
        self.v(f"Host {id} groups to add: {to_add}, to remove: {to_remove}")
        if self.client.checkMode:
            return bool(to_add or to_remove)
        for group_id in to_add:
            self.associateGroup(id, group_id)
        for group_id in to_remove:
            self.disassociateGroup(id, group_id)
        return bool(to_add or to_remove)
