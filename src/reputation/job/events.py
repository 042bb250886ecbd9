"""Domain events for the Job aggregate."""

from protean.fields import DateTime, Identifier, String

from reputation.domain import reputation


@reputation.event(part_of="Job")
class JobSubmitted:
    """A vendor logged a job it carried out for a client."""

    __version__ = 1

    job_id = Identifier(required=True)
    vendor_id = Identifier(required=True)
    job_number = String(required=True)
    service_type = String()
    submitted_at = DateTime(required=True)
