# -*- coding: utf-8 -*-

# Options for connecting to the AAP controller API.


class ModuleDocFragment(object):

    DOCUMENTATION = r'''
options:
  aap_host:
    description:
    - URL of the AAP controller, e.g. https://aap.example.com.
    - Falls back to the C(aap_host) variable, then the C(AAP_HOST) environment variable.
    type: str
    aliases: [ host ]
  aap_username:
    description:
    - Username for HTTP basic authentication.
    - Falls back to the C(aap_username) variable, then C(AAP_USERNAME).
    type: str
    aliases: [ username ]
  aap_password:
    description:
    - Password for HTTP basic authentication.
    - Falls back to the C(aap_password) variable, then C(AAP_PASSWORD).
    type: str
    aliases: [ password ]
  aap_insecure_skip_verify:
    description:
    - Skip validation of the server's TLS certificate.
    - Falls back to the C(aap_insecure_skip_verify) variable, then C(AAP_INSECURE_SKIP_VERIFY).
    type: bool
    default: false
    aliases: [ insecure_skip_verify ]
  aap_timeout:
    description:
    - Seconds to wait for the API before giving up.
    - Falls back to the C(aap_timeout) variable, then C(AAP_TIMEOUT).
    type: int
    default: 5
    aliases: [ timeout ]
  headers:
    description:
    - Additional HTTP request headers.
    type: dict
'''
