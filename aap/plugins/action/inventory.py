from . import AAPResourceActionBase, ResourceActionConfig
from ..module_utils.aapInventory import Inventory
from ..module_utils.aapOrganization import Organization


class ActionModule(AAPResourceActionBase):

    actionConfig = ResourceActionConfig(
        resourceClass=Inventory,
        argSpec=dict(
            name=dict(type='str', required=True),
            organization=dict(type='int'),
            organization_name=dict(type='str'),
            description=dict(type='str'),
            variables=dict(type='raw'),
        ),
        lookupFields=['name', 'organization'],
    )

    def prepareDesired(self, desired):
        organization_name = desired.pop('organization_name', None)
        if organization_name is not None:
            desired['organization'] = Organization(self.client).idFromName(organization_name)
        elif desired.get('organization') is None:
            # The default organization every controller ships with.
            desired['organization'] = 1
        return desired
