from . import AAPResourceActionBase, ResourceActionConfig
from ..module_utils.aapGroup import Group


class ActionModule(AAPResourceActionBase):

    actionConfig = ResourceActionConfig(
        resourceClass=Group,
        argSpec=dict(
            name=dict(type='str', required=True),
            inventory=dict(type='int', required=True, aliases=['inventory_id']),
            description=dict(type='str'),
            variables=dict(type='raw'),
        ),
        lookupFields=['name', 'inventory'],
    )
