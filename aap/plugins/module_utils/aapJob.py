from __future__ import annotations

import time

from .aapResourceBase import API_PATH, ResourceBase
from .aapError import ResourceError
from .semantic_string import (
    PARSE_ERRORS, SEVERITY_WARNING, Diagnostic, SemanticStringValue, parse_payload, trees_equal
)

from typing import Any, Dict, List, Optional, Tuple

JOB_FINISHED_STATUSES = ['successful', 'failed', 'error', 'canceled']


class Job(ResourceBase):
    """Launches job templates (or workflow job templates) and tracks the
    resulting job."""

    endpoint = 'jobs'

    def __init__(self, client, options: dict = None, workflow: bool = False) -> None:
        super().__init__(client, options)
        self.workflow = workflow
        if workflow:
            self.endpoint = 'workflow_jobs'

    def templatePath(self, template_id: int) -> str:
        if self.workflow:
            return f"{API_PATH}workflow_job_templates/{template_id}/launch/"
        return f"{API_PATH}job_templates/{template_id}/launch/"

    def launch(self, template_id: int, inventory: Optional[int] = None,
               extra_vars: Any = None) -> Dict[str, Any]:
        payload = {}
        if inventory is not None:
            payload['inventory'] = inventory
        if extra_vars is not None:
            payload['extra_vars'] = SemanticStringValue.from_native(extra_vars).raw_value()

        res = self.request('POST', self.templatePath(template_id), payload, expected=(201,))
        self.v(f"Launched template {template_id}: {res}")
        return res

    def waitForCompletion(self, id: int, delay: int = 10, retries: int = 30) -> Dict[str, Any]:
        for attempt in range(1, retries + 1):
            job = self.get(id)
            if job is None:
                raise ResourceError([], f"Job {id} not found while waiting for completion", 404)
            if job.get('status') in JOB_FINISHED_STATUSES:
                return job

            self.info(
                "\033[30;1mWait for job %s completion, status %s (%s retries left).\033[0m" % (
                    id, job.get('status'), retries - attempt))
            time.sleep(delay)

        raise ResourceError(
            [], 'Maximum number of retries reached; view the job output for more information.')


def ignored_extra_vars(requested: Any, launched: Dict[str, Any]) -> Tuple[List[str], List[Diagnostic]]:
    """Lists the requested extra_vars the launched job did not keep.

    The controller silently drops extra_vars when the template does not
    prompt for them on launch. The job's extra_vars also hold template
    defaults, so each requested top-level variable is checked on its own.
    """
    if requested is None:
        return [], []

    ignored = launched.get('ignored_fields', {}).get('extra_vars')
    if isinstance(ignored, dict):
        return sorted(ignored.keys()), []

    try:
        sent = parse_payload(SemanticStringValue.from_native(requested).raw_value())
        kept = parse_payload(launched.get('extra_vars') or '{}')
    except PARSE_ERRORS as e:
        return [], [Diagnostic(
            SEVERITY_WARNING,
            'Extra Vars Check Skipped',
            f'The extra_vars of the launched job could not be parsed: {e}')]

    if not isinstance(sent, dict) or not isinstance(kept, dict):
        return [], []

    return [k for k in sent if k not in kept or not trees_equal(sent[k], kept[k])], []
