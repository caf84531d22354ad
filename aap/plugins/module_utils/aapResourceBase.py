from __future__ import annotations

import json

from .api_client import AAPClient
from .aapError import ResourceError
from .display import Display
from .semantic_string import Diagnostic, SemanticStringValue

from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlsplit

API_PATH = 'api/v2/'

INVENTORY_FIELDS = [
    'description',
    'name',
    'organization',
    'variables',
]

GROUP_FIELDS = [
    'description',
    'inventory',
    'name',
    'variables',
]

HOST_FIELDS = [
    'description',
    'enabled',
    'inventory',
    'name',
    'variables',
]


class ResourceBase(Display):
    """Common CRUD operations for a collection endpoint of the AAP API, such
    as api/v2/inventories/.

    Subclasses set the endpoint and which fields take part in change
    detection. Fields listed in semanticFields hold JSON or YAML text and are
    compared with SemanticStringValue rather than byte for byte.
    """

    endpoint: str = None
    compareFields: List[str] = []
    semanticFields: List[str] = []

    def __init__(self, client: AAPClient, options: dict = None) -> None:
        super().__init__(self.__class__.__name__.lower())
        self.client = client
        self.errors = []
        self.options = options or {}

    def collectionPath(self) -> str:
        return f"{API_PATH}{self.endpoint}/"

    def itemPath(self, id: int) -> str:
        return f"{API_PATH}{self.endpoint}/{id}/"

    def request(self, method: str, path: str, payload: Optional[dict] = None,
                params: Optional[dict] = None, expected: Tuple[int, ...] = (200,)) -> dict:
        data = json.dumps(payload) if payload is not None else None
        status, body = self.client.do_request(method, path, data, params)

        if status not in expected:
            message = f"{method} {path} returned {status}, expected {' or '.join(str(s) for s in expected)}"
            error = body.decode(errors='replace') if isinstance(body, bytes) else str(body)
            self.errors.append(error)
            raise ResourceError([error], message, status, error)

        if not body:
            return {}
        return json.loads(body)

    def list(self, **filters) -> List[Dict[str, Any]]:
        """Returns every record matching the filters, following the API's
        pagination links."""
        results = []
        path = self.collectionPath()
        params = filters
        while path:
            res = self.request('GET', path, params=params)
            results.extend(res.get('results', []))
            path, params = self.nextPage(res.get('next'))
        return results

    def nextPage(self, next_link: Optional[str]) -> Tuple[Optional[str], Optional[dict]]:
        if not next_link:
            return None, None
        parts = urlsplit(next_link)
        return parts.path, dict(parse_qsl(parts.query))

    def get(self, id: int) -> Optional[Dict[str, Any]]:
        try:
            return self.request('GET', self.itemPath(id))
        except ResourceError as e:
            if e.status == 404:
                return None
            raise

    def byName(self, name: str, **filters) -> Optional[Dict[str, Any]]:
        records = self.list(name=name, **filters)
        if not records:
            return None
        if len(records) > 1:
            self.warning(f"Found {len(records)} records named '{name}', using the first one")
        return records[0]

    def create(self, payload: dict) -> Dict[str, Any]:
        return self.request('POST', self.collectionPath(), payload, expected=(201,))

    def update(self, id: int, payload: dict) -> Dict[str, Any]:
        return self.request('PUT', self.itemPath(id), payload)

    def delete(self, id: int) -> bool:
        try:
            self.request('DELETE', self.itemPath(id), expected=(202, 204))
        except ResourceError as e:
            if e.status == 404:
                return False
            raise
        return True

    def buildPayload(self, args: dict) -> dict:
        payload = {}
        for field in self.compareFields:
            if args.get(field) is None:
                continue
            if field in self.semanticFields:
                payload[field] = SemanticStringValue.from_native(args[field]).raw_value()
            else:
                payload[field] = args[field]
        return payload

    def diffRecord(self, record: dict, desired: dict) -> Tuple[List[str], List[Diagnostic]]:
        """
        Lists the fields whose desired value differs from the record.

        Only fields present in desired are considered; anything left unset
        keeps whatever the server holds.
        """
        changed = []
        diagnostics = []
        for field in self.compareFields:
            if field not in desired:
                continue

            if field in self.semanticFields:
                current = SemanticStringValue.from_native(record.get(field))
                wanted = SemanticStringValue.from_native(desired[field])
                if current == wanted:
                    continue
                matched, diags = current.semantic_equals(wanted)
                diagnostics.extend(diags)
                if not matched:
                    changed.append(field)
            elif record.get(field) != desired[field]:
                changed.append(field)

        return changed, diagnostics
