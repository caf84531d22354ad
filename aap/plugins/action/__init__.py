from __future__ import annotations

import os

from ..module_utils.aapError import ResourceError
from ..module_utils.aapResourceBase import ResourceBase
from ..module_utils.api_client import AAPClient, DEFAULT_TIMEOUT

from ansible.errors import AnsibleError
from ansible.module_utils.parsing.convert_bool import boolean
from ansible.plugins.action import ActionBase
from typing import Any, Dict, List, Optional, Type

CONNECTION_OPTIONS = ['host', 'username', 'password', 'insecure_skip_verify', 'timeout']


def auth_argument_spec(spec=None) -> dict:
  arg_spec = (dict(
    aap_host=dict(type='str', aliases=['host']),
    aap_username=dict(type='str', aliases=['username']),
    aap_password=dict(type='str', no_log=True, aliases=['password']),
    aap_insecure_skip_verify=dict(type='bool', aliases=['insecure_skip_verify']),
    aap_timeout=dict(type='int', aliases=['timeout']),
  ))
  if spec:
    arg_spec.update(spec)
  return arg_spec


def resolve_connection_options(args: dict, task_vars: dict, environ=None) -> dict:
  """Connection settings come from the task args first, then from aap_*
  task vars, then from AAP_* environment variables."""
  if environ is None:
    environ = os.environ

  options = {}
  for name in CONNECTION_OPTIONS:
    value = args.get(f"aap_{name}", args.get(name))
    if value is None:
      value = task_vars.get(f"aap_{name}")
    if value is None:
      value = environ.get(f"AAP_{name.upper()}")
    options[name] = value

  if not options['host']:
    raise AnsibleError("aap_host is required")

  options['insecure_skip_verify'] = boolean(options['insecure_skip_verify'] or False)
  options['timeout'] = int(options['timeout']) if options['timeout'] else DEFAULT_TIMEOUT
  return options


class AAPActionBase(ActionBase):

  def run(self, tmp=None, task_vars=None):
    if task_vars is None:
      task_vars = dict()

    result = super(AAPActionBase, self).run(tmp, task_vars)
    del tmp

    self._display.v("Task args: %s" % self._task.args)
    return result

  def createClient(self, task_vars):
    options = resolve_connection_options(self._task.args, task_vars)
    for name in ('host', 'username', 'password'):
      if options[name] is not None:
        options[name] = self._templar.template(options[name]).strip()

    self.client = AAPClient(
      options['host'],
      options['username'],
      options['password'],
      options['insecure_skip_verify'],
      options['timeout'],
      self._task.args.get('headers', {}),
      self._task.check_mode
    )

  def taskArgs(self, argSpec: dict) -> dict:
    """Validates the task args against argSpec and drops the unset ones."""
    _, moduleArgs = self.validate_argument_spec(argSpec)
    moduleArgs = {k: v for k, v in moduleArgs.items() if v is not None}
    self._display.vvv(f"Validated module args: {moduleArgs}")
    return moduleArgs


class ResourceActionConfig:

  # The resource class handling the API endpoint, e.g, Inventory.
  resourceClass: Type[ResourceBase]

  # Task arguments, in addition to the common auth and state arguments.
  argSpec: dict

  # Fields identifying an existing record, e.g, ['name', 'inventory'].
  # The first one is the record name; the rest are extra list filters.
  lookupFields: List[str]

  def __init__(self, resourceClass: Type[ResourceBase], argSpec: dict,
               lookupFields: List[str]) -> None:
    self.resourceClass = resourceClass
    self.argSpec = argSpec
    self.lookupFields = lookupFields

  def findExistingRecord(self, resource: ResourceBase, moduleArgs: dict) -> Optional[dict]:
    name, *filterFields = self.lookupFields
    filters = {f: moduleArgs[f] for f in filterFields if moduleArgs.get(f) is not None}
    return resource.byName(moduleArgs[name], **filters)


class AAPResourceActionBase(AAPActionBase):
  """Action plugins base class for AAP resources.

  Finds the existing record from the lookup fields, then creates it,
  updates it when its fields differ from the task args, or deletes it
  when state is absent. Payload fields such as variables are compared
  by structure, so a reformatted value on the server is not a change.
  """

  # The main config for the plugin, and drives the whole process.
  actionConfig: ResourceActionConfig

  def run(self, tmp=None, task_vars=None):
    if task_vars is None:
      task_vars = dict()

    result = super(AAPResourceActionBase, self).run(tmp, task_vars)

    self.createClient(task_vars)

    argSpec = auth_argument_spec(self.actionConfig.argSpec)
    argSpec['headers'] = dict(type='dict')
    argSpec['state'] = dict(type='str', default='present', choices=['absent', 'present'])
    moduleArgs = self.taskArgs(argSpec)

    state = moduleArgs.pop('state')
    desired = {k: v for k, v in moduleArgs.items() if k in self.actionConfig.argSpec}

    resource = self.actionConfig.resourceClass(self.client)
    try:
      desired = self.prepareDesired(desired)
      record = self.actionConfig.findExistingRecord(resource, desired)
      if state == 'absent':
        result['changed'] = record is not None and resource.delete(record['id'])
        return result

      self.ensurePresent(resource, record, desired, result)
    except ResourceError as e:
      raise AnsibleError(str(e))

    return result

  def prepareDesired(self, desired: Dict[str, Any]) -> Dict[str, Any]:
    """Hook to resolve names to ids before the lookup."""
    return desired

  def ensurePresent(self, resource: ResourceBase, record: Optional[dict],
                    desired: Dict[str, Any], result: dict) -> None:
    payload = resource.buildPayload(desired)

    if record is None:
      result['result'] = resource.create(payload)
      result['changed'] = True
      return

    changedFields, diagnostics = resource.diffRecord(record, payload)
    if diagnostics:
      result['warnings'] = [f"{d.summary}: {d.detail}" for d in diagnostics]

    result['changed_fields'] = changedFields
    if not changedFields:
      self._display.v(f"Record {record['id']} is up to date")
      result['changed'] = False
      result['result'] = record
      return

    self._display.v(f"Record {record['id']} differs in {changedFields}")
    current = {f: record[f] for f in resource.compareFields if f in record}
    result['result'] = resource.update(record['id'], {**current, **payload})
    result['changed'] = True
