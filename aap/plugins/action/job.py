from . import AAPActionBase, auth_argument_spec
from ..module_utils.aapError import ResourceError
from ..module_utils.aapJob import Job, ignored_extra_vars

from ansible.errors import AnsibleError


class ActionModule(AAPActionBase):

    def run(self, tmp=None, task_vars=None):

        if task_vars is None:
            task_vars = dict()

        result = super(ActionModule, self).run(tmp, task_vars)

        self.createClient(task_vars)

        argSpec = auth_argument_spec(dict(
            headers=dict(type='dict'),
            job_template=dict(type='int', required=True, aliases=['job_template_id']),
            workflow=dict(type='bool', default=False),
            inventory=dict(type='int', aliases=['inventory_id']),
            extra_vars=dict(type='raw'),
            wait_for_completion=dict(type='bool', default=False),
            wait_delay=dict(type='int', default=10),
            wait_retries=dict(type='int', default=30),
        ))
        args = self.taskArgs(argSpec)

        job = Job(self.client, workflow=args['workflow'])
        try:
            launched = job.launch(
                args['job_template'], args.get('inventory'), args.get('extra_vars'))
            result['changed'] = True

            ignored, diagnostics = ignored_extra_vars(args.get('extra_vars'), launched)
            if diagnostics:
                result['warnings'] = [f"{d.summary}: {d.detail}" for d in diagnostics]
            if ignored:
                self._display.warning(
                    f"The job ignored the following extra_vars: {', '.join(ignored)}. "
                    "Enable 'Prompt on launch' for variables on the template to pass them.")
            result['ignored_extra_vars'] = ignored

            job_id = launched.get('workflow_job' if args['workflow'] else 'job', launched.get('id'))
            result['job_id'] = job_id
            result['result'] = launched

            if args['wait_for_completion'] and not self._task.check_mode:
                finished = job.waitForCompletion(job_id, args['wait_delay'], args['wait_retries'])
                result['result'] = finished
                result['status'] = finished['status']
                if finished['status'] != 'successful':
                    result['failed'] = True
                    result['msg'] = f"Job {job_id} finished with status {finished['status']}"
            else:
                result['status'] = launched.get('status')
        except ResourceError as e:
            raise AnsibleError(str(e))

        return result
