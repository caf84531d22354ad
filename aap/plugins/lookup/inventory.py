from __future__ import (absolute_import, division, print_function)
__metaclass__ = type

from . import AAPLookupBase
from ..module_utils.aapError import ResourceError
from ..module_utils.aapInventory import Inventory
from ..module_utils.aapOrganization import Organization

from ansible.errors import AnsibleError
from ansible.utils.display import Display

DOCUMENTATION = """
  name: inventory
  short_description: get an AAP inventory
  description:
      - This lookup returns the details of AAP inventories, by id or by name.
  options:
    _terms:
      description: Ids or names of the inventories to fetch.
      required: True
    organization:
      description: Id of the organization owning the inventories, when looking up by name.
      type: integer
    organization_name:
      description: Name of the organization owning the inventories, when looking up by name.
      type: string
    aap_host:
      description: URL of the AAP controller.
      type: string
      required: True
      vars:
        - name: aap_host
      env:
        - name: AAP_HOST
    aap_username:
      description: Username for HTTP basic authentication.
      type: string
      vars:
        - name: aap_username
      env:
        - name: AAP_USERNAME
    aap_password:
      description: Password for HTTP basic authentication.
      type: string
      vars:
        - name: aap_password
      env:
        - name: AAP_PASSWORD
    aap_insecure_skip_verify:
      description: Skip validation of the server's TLS certificate.
      type: boolean
      default: False
      vars:
        - name: aap_insecure_skip_verify
      env:
        - name: AAP_INSECURE_SKIP_VERIFY
    aap_timeout:
      description: How long to wait for the server to send data before giving up.
      type: integer
      default: 5
      vars:
        - name: aap_timeout
      env:
        - name: AAP_TIMEOUT
    headers:
      description: HTTP request headers
      type: dictionary
      default: {}
"""

EXAMPLES = """
- name: retrieve an inventory by id
  debug: msg="{{ lookup('infra.aap.inventory', 2) }}"

- name: retrieve an inventory by name
  debug: msg="{{ lookup('infra.aap.inventory', 'web servers', organization_name='Default') }}"
"""

display = Display()


def get_inventory(inventories: Inventory, term, organization: int = None) -> dict:
    if isinstance(term, int) or str(term).isdigit():
        inventory = inventories.get(int(term))
    elif organization is not None:
        inventory = inventories.byNameInOrganization(term, organization)
    else:
        inventory = inventories.byName(term)

    display.v(f"Inventory lookup result: {inventory}")
    if inventory is None:
        raise AnsibleError(
            f"Unable to get details for inventory {term}; please make sure the inventory exists")
    return inventory


class LookupModule(AAPLookupBase):

    def run(self, terms, variables=None, **kwargs):

        ret = []

        self.set_options(var_options=variables, direct=kwargs)
        self.createClient()

        try:
            organization = self.get_option('organization')
            if self.get_option('organization_name'):
                organization = Organization(self.client).idFromName(
                    self.get_option('organization_name'))

            inventories = Inventory(self.client)
            for term in terms:
                ret.append(get_inventory(inventories, term, organization))
        except ResourceError as e:
            raise AnsibleError(str(e))

        return ret
