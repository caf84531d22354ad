import json

from unittest.mock import MagicMock

from ...plugins.module_utils.api_client import AAPClient


def response(status: int, body=None) -> tuple:
    if body is None:
        return status, b''
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    return status, body.encode() if isinstance(body, str) else body


def page(results: list, next_link: str = None) -> tuple:
    return response(200, {
        'count': len(results),
        'next': next_link,
        'previous': None,
        'results': results,
    })


def get_mock_aap_client(*responses, checkMode: bool = False) -> AAPClient:
    client = AAPClient('https://aap.example.com', 'admin', 'secret', checkMode=checkMode)
    client.do_request = MagicMock()
    if responses:
        client.do_request.side_effect = list(responses)
    return client


def request_payload(client: AAPClient, call_index: int = -1) -> dict:
    """Returns the decoded JSON body of a recorded do_request call."""
    args = client.do_request.call_args_list[call_index].args
    return json.loads(args[2]) if args[2] is not None else None
