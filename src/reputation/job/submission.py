"""SubmitJob: log a job against an onboarded vendor, and list a vendor's jobs."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from reputation.domain import reputation
from reputation.job.job import Job
from reputation.vendor.vendor import Vendor

DEFAULT_JOB_LIMIT = 10


@reputation.command(part_of="Job")
class SubmitJob:
    vendor_id = Identifier(required=True)
    job_number = String(required=True, max_length=100)
    client_name = String(required=True, max_length=200)
    client_contact = String(max_length=200)
    service_type = String(max_length=100)
    description = Text()


@reputation.command_handler(part_of=Job)
class SubmitJobHandler:
    @handle(SubmitJob)
    def submit_job(self, command):
        current_domain.repository_for(Vendor).get(command.vendor_id)

        job = Job.submit(
            vendor_id=command.vendor_id,
            job_number=command.job_number,
            client_name=command.client_name,
            client_contact=command.client_contact,
            service_type=command.service_type,
            description=command.description,
        )
        current_domain.repository_for(Job).add(job)
        return str(job.id)


def list_jobs(vendor_id, limit=DEFAULT_JOB_LIMIT):
    """The vendor's most recent jobs, newest first."""
    if limit is None or limit < 1:
        raise ValidationError({"limit": ["Limit must be at least 1"]})

    current_domain.repository_for(Vendor).get(vendor_id)

    query = current_domain.repository_for(Job)._dao.query.filter(vendor_id=str(vendor_id))
    return query.order_by(["-created_at", "id"]).limit(limit).all().items
