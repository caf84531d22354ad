# -*- coding: utf-8 -*-

DOCUMENTATION = r'''
module: inventory
short_description: Manage an AAP inventory
description:
    - Creates, updates or deletes an inventory on the AAP controller.
    - The inventory is identified by its name and organization.
    - Variables are compared by their JSON or YAML structure, so formatting
      applied by the controller does not report a change.
extends_documentation_fragment:
  - infra.aap.auth_options
options:
  name:
    description:
      - The inventory name.
    required: true
    type: str
  organization:
    description:
      - Id of the organization owning the inventory.
      - Defaults to 1 when neither this nor organization_name is set.
    type: int
  organization_name:
    description:
      - Name of the organization owning the inventory.
      - Takes precedence over organization.
    type: str
  description:
    description:
      - The inventory description.
    type: str
  variables:
    description:
      - Inventory variables, as a JSON or YAML string or a dictionary.
    type: raw
  state:
    description:
      - Whether the inventory should exist.
    type: str
    default: present
    choices: [ absent, present ]
'''

EXAMPLES = r'''
- name: Ensure the inventory exists
  infra.aap.inventory:
    name: web servers
    organization_name: Default
    description: Managed by Ansible
    variables:
      os: Linux
      automation: ansible

- name: Remove the inventory
  infra.aap.inventory:
    name: web servers
    state: absent
'''
