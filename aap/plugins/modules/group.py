# -*- coding: utf-8 -*-

DOCUMENTATION = r'''
module: group
short_description: Manage a group in an AAP inventory
extends_documentation_fragment:
  - infra.aap.auth_options
options:
  name:
    description:
      - The group name.
    required: true
    type: str
  inventory:
    description:
      - Id of the inventory holding the group.
    required: true
    type: int
    aliases: [ inventory_id ]
  description:
    description:
      - The group description.
    type: str
  variables:
    description:
      - Group variables, as a JSON or YAML string or a dictionary.
    type: raw
  state:
    description:
      - Whether the group should exist.
    type: str
    default: present
    choices: [ absent, present ]
'''

EXAMPLES = r'''
- name: Ensure the webservers group exists
  infra.aap.group:
    name: webservers
    inventory: 2
    variables: |
      http_port: 8080
'''
