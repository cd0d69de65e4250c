"""Jobs API: job definitions and their runs."""

from pydantic import Field

from ..exceptions import InvalidParametersError
from ..types import (
    ApiModel,
    Job,
    JobCreateRequest,
    JobRunListRequest,
    JobRunNowRequest,
    JobSettings,
    JobSubmitRequest,
    Run,
    RunNowResponse,
    RunOutput,
    RunsListResponse,
    ViewItem,
    ViewsToExport,
)
from .base import Service


class _CreateResponse(ApiModel):
    job_id: int = 0


class _SubmitResponse(ApiModel):
    run_id: int = 0


class _JobList(ApiModel):
    jobs: list[Job] = Field(default_factory=list)


class _ViewList(ApiModel):
    views: list[ViewItem] = Field(default_factory=list)


class JobsService(Service):
    """Operations on ``2.0/jobs``."""

    resource = "jobs"

    def create(self, create_req: JobCreateRequest) -> int:
        """Create a job and return its ID."""
        return self._post("create", create_req, _CreateResponse).job_id

    def delete(self, job_id: int) -> None:
        """Delete a job and cancel its active runs."""
        self._post("delete", {"job_id": job_id})

    def get(self, job_id: int) -> Job:
        """Return the settings and metadata of a job."""
        return self._get("get", {"job_id": job_id}, Job)

    def reset(self, job_id: int, new_settings: JobSettings) -> None:
        """Overwrite all the settings of a job."""
        self._post(
            "reset",
            {
                "job_id": job_id,
                "new_settings": new_settings.model_dump(mode="json", exclude_none=True),
            },
        )

    def run_now(self, run_now_req: JobRunNowRequest) -> RunNowResponse:
        """Trigger a run of an existing job."""
        return self._post("run-now", run_now_req, RunNowResponse)

    def runs_submit(self, submit_req: JobSubmitRequest) -> int:
        """Submit a one-time run without creating a job; return the run ID.

        Such runs do not show up in the UI; poll them with :meth:`runs_get`.
        """
        return self._post("runs/submit", submit_req, _SubmitResponse).run_id

    def runs_list(self, list_req: JobRunListRequest) -> RunsListResponse:
        """Return one page of runs, most recently started first.

        Raises:
            InvalidParametersError: If both ``active_only`` and
                ``complete_only`` are set.
        """
        if list_req.active_only is not None and list_req.complete_only is not None:
            msg = "Can only request active_only OR complete_only"
            raise InvalidParametersError(msg)
        return self._get("runs/list", list_req, RunsListResponse)

    def runs_get(self, run_id: int) -> Run:
        """Return the metadata of a run."""
        return self._get("runs/get", {"run_id": run_id}, Run)

    def runs_export(
        self,
        run_id: int,
        views_to_export: str = ViewsToExport.CODE,
    ) -> list[ViewItem]:
        """Export the notebook views of a run."""
        return self._get(
            "runs/export",
            {"run_id": run_id, "views_to_export": views_to_export},
            _ViewList,
        ).views

    def runs_cancel(self, run_id: int) -> None:
        """Cancel a run.

        Cancellation is asynchronous, so the run may still be running when
        this returns. Runs already in a terminal state are left alone.
        """
        self._post("runs/cancel", {"run_id": run_id})

    def runs_get_output(self, run_id: int) -> RunOutput:
        """Return the output and metadata of a run.

        Only the first 5 MB of notebook output are returned, and runs are
        removed after 60 days. A failed run has ``error`` set instead of
        ``notebook_output``.
        """
        return self._get("runs/get-output", {"run_id": run_id}, RunOutput)

    def runs_delete(self, run_id: int) -> None:
        """Delete a non-active run."""
        self._post("runs/delete", {"run_id": run_id})

    def list(self) -> list[Job]:
        """Return all jobs."""
        return self._get("list", response_model=_JobList).jobs
