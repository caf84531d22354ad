# -*- coding: utf-8 -*-

DOCUMENTATION = r'''
module: host
short_description: Manage a host in an AAP inventory
description:
    - Creates, updates or deletes a host, and optionally sets the groups it
      belongs to.
extends_documentation_fragment:
  - infra.aap.auth_options
options:
  name:
    description:
      - The host name.
    required: true
    type: str
  inventory:
    description:
      - Id of the inventory holding the host.
    required: true
    type: int
    aliases: [ inventory_id ]
  description:
    description:
      - The host description.
    type: str
  enabled:
    description:
      - Whether the host is enabled.
    type: bool
  variables:
    description:
      - Host variables, as a JSON or YAML string or a dictionary.
    type: raw
  groups:
    description:
      - Ids of the groups the host belongs to.
      - The host is removed from any other group.
      - Group membership is left untouched when this is not set.
    type: list
    elements: int
  state:
    description:
      - Whether the host should exist.
    type: str
    default: present
    choices: [ absent, present ]
'''

EXAMPLES = r'''
- name: Ensure the host exists in two groups
  infra.aap.host:
    name: web01.example.com
    inventory: 2
    groups: [3, 4]
    variables: '{"ansible_host": "10.0.0.11"}'
'''
