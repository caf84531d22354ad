from .aapResourceBase import ResourceBase

from ansible.errors import AnsibleError


class Organization(ResourceBase):

    endpoint = 'organizations'

    def idFromName(self, name: str) -> int:
        organization = self.byName(name)
        if organization is None:
            raise AnsibleError(f"Organization '{name}' not found")
        return organization['id']
