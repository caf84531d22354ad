from ..module_utils.api_client import AAPClient

from ansible.plugins.lookup import LookupBase


class AAPLookupBase(LookupBase):

    def createClient(self):
        self.client = AAPClient(
            self._templar.template(self.get_option('aap_host')),
            self.get_option('aap_username'),
            self.get_option('aap_password'),
            self.get_option('aap_insecure_skip_verify'),
            self.get_option('aap_timeout'),
            self.get_option('headers'),
        )
