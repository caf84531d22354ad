from __future__ import annotations

import json

from .display import Display

from ansible.errors import AnsibleError
from ansible.module_utils.common.text.converters import to_native
from ansible.module_utils.urls import open_url, ConnectionError, SSLValidationError
from random import randint
from typing import Dict, Optional, Tuple
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode, urljoin

DEFAULT_TIMEOUT = 5


class AAPClient(Display):
    """HTTP transport for the AAP controller API.

    Requests go through Ansible's open_url, authenticated with basic auth
    when both a username and a password are set. HTTP error statuses are
    returned to the caller as (status, body); only transport failures raise.
    """

    checkMode: bool = False

    def __init__(self, host: str, username: Optional[str] = None,
                 password: Optional[str] = None, insecure_skip_verify: bool = False,
                 timeout: int = DEFAULT_TIMEOUT, headers: Dict[str, str] = None,
                 checkMode: bool = False) -> None:
        super().__init__('aap_client')

        if headers is not None and not isinstance(headers, dict):
            raise AnsibleError("Expecting client headers to be dictionary.")

        self.host_url = host if host.endswith('/') else host + '/'
        self.username = username
        self.password = password
        self.insecure_skip_verify = insecure_skip_verify
        self.timeout = timeout if timeout else DEFAULT_TIMEOUT
        self.checkMode = checkMode

        self.headers = dict(headers or {})
        self.headers['Accept'] = 'application/json'
        self.headers['Content-Type'] = 'application/json'

    def compute_url_path(self, path: str, params: Optional[dict] = None) -> str:
        full_path = urljoin(self.host_url, path.lstrip('/'))
        if not full_path.endswith('/'):
            full_path += '/'
        if params:
            full_path += '?' + urlencode(params)
        return full_path

    def do_request(self, method: str, path: str, data: Optional[str] = None,
                   params: Optional[dict] = None) -> Tuple[int, bytes]:
        url = self.compute_url_path(path, params)
        self.vvv(f"{method} {url}")
        if data is not None:
            self.vvvv(f"Request body: {data}")

        if self.checkMode and method != 'GET':
            self.info(f"Check mode enabled, skipping request: {method} {url}")
            return self._check_mode_response(method, data)

        use_basic_auth = self.username is not None and self.password is not None
        try:
            response = open_url(url, data=data, method=method,
                                headers=self.headers,
                                url_username=self.username if use_basic_auth else None,
                                url_password=self.password if use_basic_auth else None,
                                force_basic_auth=use_basic_auth,
                                validate_certs=not self.insecure_skip_verify,
                                timeout=self.timeout)
        except HTTPError as e:
            body = e.read() or b''
            self.vvv(f"HTTP {e.code} from {url}: {body}")
            return e.code, body
        except URLError as e:
            raise AnsibleError("Failed to reach url %s: %s" % (url, to_native(e)))
        except SSLValidationError as e:
            raise AnsibleError(
                "Error validating the server's certificate: %s" % to_native(e))
        except ConnectionError as e:
            raise AnsibleError("Error connecting: %s" % to_native(e))

        body = response.read()
        status = response.getcode()
        self.vvv(f"HTTP {status} from {url}")
        return status, body

    def _check_mode_response(self, method: str, data: Optional[str]) -> Tuple[int, bytes]:
        if method == 'DELETE':
            return 204, b''

        payload = json.loads(data) if data else {}
        if method == 'POST':
            payload.setdefault('id', -1 * randint(1, 1000))
            return 201, json.dumps(payload).encode()
        return 200, json.dumps(payload).encode()
