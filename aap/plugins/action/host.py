from . import AAPResourceActionBase, ResourceActionConfig
from ..module_utils.aapHost import Host


class ActionModule(AAPResourceActionBase):

    actionConfig = ResourceActionConfig(
        resourceClass=Host,
        argSpec=dict(
            name=dict(type='str', required=True),
            inventory=dict(type='int', required=True, aliases=['inventory_id']),
            description=dict(type='str'),
            enabled=dict(type='bool'),
            variables=dict(type='raw'),
            groups=dict(type='list', elements='int'),
        ),
        lookupFields=['name', 'inventory'],
    )

    def ensurePresent(self, resource, record, desired, result):
        super(ActionModule, self).ensurePresent(resource, record, desired, result)

        if desired.get('groups') is None:
            return

        groupsChanged = resource.syncGroups(result['result']['id'], desired['groups'])
        if groupsChanged:
            result['changed'] = True
            result.setdefault('changed_fields', []).append('groups')
