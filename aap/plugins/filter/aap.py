from __future__ import absolute_import, division, print_function
__metaclass__ = type

from ansible.errors import AnsibleFilterError
from ansible.utils.display import Display
from ..module_utils.semantic_string import SEVERITY_ERROR, SemanticStringValue

display = Display()


class FilterModule(object):

    def semanticEquals(self, current, desired):
        """
        Compare two JSON or YAML payloads by structure rather than text.
        Strings are parsed first; dictionaries and lists are used as is.
        Examples:

        - name: Only push variables that actually differ.
          infra.aap.inventory:
            name: web servers
            variables: "{{ desired_vars }}"
          when: not (current.variables | infra.aap.semantic_equals(desired_vars))
        """
        matched, diagnostics = SemanticStringValue.from_native(current).semantic_equals(
            SemanticStringValue.from_native(desired))

        for d in diagnostics:
            if d.severity == SEVERITY_ERROR:
                raise AnsibleFilterError(f"{d.summary}: {d.detail}")
            display.warning(f"{d.summary}: {d.detail}")

        return matched

    def filters(self):
        return {
            "semantic_equals": self.semanticEquals,
        }
