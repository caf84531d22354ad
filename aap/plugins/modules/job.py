# -*- coding: utf-8 -*-

DOCUMENTATION = r'''
module: job
short_description: Launch an AAP job template
description:
    - Launches a job template or a workflow job template and optionally waits
      for the job to finish.
    - Warns when the controller drops some of the extra_vars, which happens
      when the template does not prompt for variables on launch.
extends_documentation_fragment:
  - infra.aap.auth_options
options:
  job_template:
    description:
      - Id of the job template to launch.
    required: true
    type: int
    aliases: [ job_template_id ]
  workflow:
    description:
      - Whether job_template refers to a workflow job template.
    type: bool
    default: false
  inventory:
    description:
      - Id of the inventory to run against, overriding the template's.
    type: int
    aliases: [ inventory_id ]
  extra_vars:
    description:
      - Extra variables, as a JSON or YAML string or a dictionary.
    type: raw
  wait_for_completion:
    description:
      - Wait until the job reaches a final status.
      - The task fails when that status is not successful.
    type: bool
    default: false
  wait_delay:
    description:
      - Seconds between two job status checks.
    type: int
    default: 10
  wait_retries:
    description:
      - Number of job status checks before giving up.
    type: int
    default: 30
'''

EXAMPLES = r'''
- name: Run the deploy template and wait for it
  infra.aap.job:
    job_template: 7
    extra_vars:
      release: 1.4.2
    wait_for_completion: true
'''
