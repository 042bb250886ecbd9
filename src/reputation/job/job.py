"""Job aggregate: a piece of work a vendor carried out for a client.

Jobs are logged by the vendor and start out ``pending``. Nothing in this
context moves a job to ``verified`` or ``rejected``; the statuses exist so
records written elsewhere can be read back. A review may name the job it
is about.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from reputation.domain import reputation
from reputation.job.events import JobSubmitted


class JobStatus(Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


@reputation.aggregate
class Job:
    vendor_id = Identifier(required=True)
    job_number = String(required=True, max_length=100)
    client_name = String(required=True, max_length=200)
    client_contact = String(max_length=200)
    service_type = String(max_length=100)
    description = Text()
    status = String(choices=JobStatus, default=JobStatus.PENDING.value)
    created_at = DateTime()
    verified_at = DateTime()

    @invariant.post
    def job_number_must_not_be_blank(self):
        if self.job_number is not None and len(self.job_number.strip()) == 0:
            raise ValidationError({"job_number": ["Job number cannot be empty"]})

    @invariant.post
    def client_name_must_not_be_blank(self):
        if self.client_name is not None and len(self.client_name.strip()) == 0:
            raise ValidationError({"client_name": ["Client name cannot be empty"]})

    @classmethod
    def submit(
        cls,
        vendor_id,
        job_number,
        client_name,
        client_contact=None,
        service_type=None,
        description=None,
    ):
        now = datetime.now(UTC)

        job = cls(
            vendor_id=vendor_id,
            job_number=job_number.strip() if job_number else job_number,
            client_name=client_name.strip() if client_name else client_name,
            client_contact=client_contact,
            service_type=service_type,
            description=description,
            status=JobStatus.PENDING.value,
            created_at=now,
        )

        job.raise_(
            JobSubmitted(
                job_id=str(job.id),
                vendor_id=str(vendor_id),
                job_number=job.job_number,
                service_type=service_type,
                submitted_at=now,
            )
        )

        return job
