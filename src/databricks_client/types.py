"""Request and response types for the Databricks REST API 2.0.

Pydantic models mirroring the JSON bodies accepted and returned by the API.
Field names are the JSON keys. Optional request keys default to ``None`` and
are left out of the serialized body; response fields default to the zero
value so partial bodies still validate.

Enumerations are open: the constant classes below name the values the
server documents, but model fields are plain ``str`` so new server values
pass through untouched.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ApiModel(BaseModel):
    """Base of every request and response model.

    An explicit JSON ``null`` is treated like a missing key, so the field
    falls back to its default.
    """

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


# ---------------------------------------------------------------------------
# Enumerated string values
# ---------------------------------------------------------------------------


class ListOrder:
    """Ordering of paginated listings."""

    DESC = "DESC"
    ASC = "ASC"


class ClusterState:
    """Lifecycle state of a cluster.

    Allowed transitions: PENDING -> RUNNING | TERMINATING,
    RUNNING -> RESIZING | RESTARTING | TERMINATING,
    RESTARTING -> RUNNING | TERMINATING, RESIZING -> RUNNING | TERMINATING,
    TERMINATING -> TERMINATED.
    """

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    RESTARTING = "RESTARTING"
    RESIZING = "RESIZING"
    TERMINATING = "TERMINATING"
    TERMINATED = "TERMINATED"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"


class ClusterSource:
    """Service that created a cluster."""

    UI = "UI"
    JOB = "JOB"
    API = "API"


class AwsAvailability:
    SPOT = "SPOT"
    ON_DEMAND = "ON_DEMAND"
    SPOT_WITH_FALLBACK = "SPOT_WITH_FALLBACK"


class EbsVolumeType:
    GENERAL_PURPOSE_SSD = "GENERAL_PURPOSE_SSD"
    THROUGHPUT_OPTIMIZED_HDD = "THROUGHPUT_OPTIMIZED_HDD"


class RunLifeCycleState:
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    TERMINATING = "TERMINATING"
    TERMINATED = "TERMINATED"
    SKIPPED = "SKIPPED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class RunResultState:
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    TIMEDOUT = "TIMEDOUT"
    CANCELED = "CANCELED"


class ViewsToExport:
    """Which views ``jobs/runs/export`` returns."""

    CODE = "CODE"
    DASHBOARDS = "DASHBOARDS"
    ALL = "ALL"


class LibraryInstallStatus:
    PENDING = "PENDING"
    RESOLVING = "RESOLVING"
    INSTALLING = "INSTALLING"
    INSTALLED = "INSTALLED"
    FAILED = "FAILED"
    UNINSTALL_ON_RESTART = "UNINSTALL_ON_RESTART"


class AclPermission:
    """Permission levels on a secret scope."""

    MANAGE = "MANAGE"
    WRITE = "WRITE"
    READ = "READ"


class Language:
    SCALA = "SCALA"
    PYTHON = "PYTHON"
    SQL = "SQL"
    R = "R"


class ObjectType:
    NOTEBOOK = "NOTEBOOK"
    DIRECTORY = "DIRECTORY"
    LIBRARY = "LIBRARY"


class ExportFormat:
    """Formats for workspace import and export."""

    SOURCE = "SOURCE"
    HTML = "HTML"
    JUPYTER = "JUPYTER"
    DBC = "DBC"


# ---------------------------------------------------------------------------
# Clusters
# ---------------------------------------------------------------------------


class Autoscale(ApiModel):
    """Bounds on the number of workers of an autoscaling cluster."""

    min_workers: int = 0
    max_workers: int = 0


class DbfsStorageInfo(ApiModel):
    destination: str = ""


class S3StorageInfo(ApiModel):
    destination: str = ""
    region: str | None = None
    endpoint: str | None = None
    enable_encryption: bool | None = None
    encryption_type: str | None = None
    kms_key: str | None = None
    canned_acl: str | None = None


class ClusterLogConf(ApiModel):
    """Where cluster logs are delivered. Set exactly one destination."""

    dbfs: DbfsStorageInfo | None = None
    s3: S3StorageInfo | None = None


class InitScriptInfo(ApiModel):
    dbfs: DbfsStorageInfo | None = None
    s3: S3StorageInfo | None = None


class AwsAttributes(ApiModel):
    """AWS placement settings of a cluster."""

    first_on_demand: int | None = None
    availability: str | None = None
    zone_id: str | None = None
    instance_profile_arn: str | None = None
    spot_bid_price_percent: int | None = None
    ebs_volume_type: str | None = None
    ebs_volume_count: int | None = None
    ebs_volume_size: int | None = None


class SparkNodeAwsAttributes(ApiModel):
    is_spot: bool = False


class SparkNode(ApiModel):
    private_ip: str = ""
    public_dns: str = ""
    node_id: str = ""
    instance_id: str = ""
    start_timestamp: int = 0
    node_aws_attributes: SparkNodeAwsAttributes | None = None
    host_private_ip: str = ""


class TerminationReason(ApiModel):
    code: str = ""
    type: str | None = None
    parameters: dict[str, str] | None = None


class LogSyncStatus(ApiModel):
    last_attempted: int = 0
    last_exception: str | None = None


class ClusterAttributes(ApiModel):
    """Settings shared by cluster creation, editing and job clusters."""

    cluster_name: str | None = None
    spark_version: str | None = None
    spark_conf: dict[str, str] | None = None
    aws_attributes: AwsAttributes | None = None
    node_type_id: str | None = None
    driver_node_type_id: str | None = None
    ssh_public_keys: list[str] | None = None
    custom_tags: dict[str, str] | None = None
    cluster_log_conf: ClusterLogConf | None = None
    init_scripts: list[InitScriptInfo] | None = None
    spark_env_vars: dict[str, str] | None = None
    autotermination_minutes: int | None = None
    enable_elastic_disk: bool | None = None
    cluster_source: str | None = None


class NewCluster(ClusterAttributes):
    """Cluster specification: attributes plus a fixed or autoscaling size.

    Set either ``num_workers`` or ``autoscale``.
    """

    num_workers: int | None = None
    autoscale: Autoscale | None = None


class ClusterCreateRequest(NewCluster):
    """Body of ``clusters/create``."""


class ClusterEditRequest(NewCluster):
    """Body of ``clusters/edit``."""

    cluster_id: str = ""


class ClusterInfo(NewCluster):
    """Metadata about a single Spark cluster.

    Returned by ``clusters/get`` and, wrapped in a ``clusters`` envelope,
    by ``clusters/list``. Times are epoch milliseconds.
    """

    cluster_id: str = ""
    creator_user_name: str = ""
    driver: SparkNode | None = None
    executors: list[SparkNode] | None = None
    spark_context_id: int = 0
    jdbc_port: int = 0
    state: str = ""
    state_message: str = ""
    start_time: int = 0
    terminated_time: int = 0
    last_state_loss_time: int = 0
    last_activity_time: int = 0
    cluster_memory_mb: int = 0
    cluster_cores: float = 0.0
    default_tags: dict[str, str] | None = None
    cluster_log_status: LogSyncStatus | None = None
    termination_reason: TerminationReason | None = None


class ClusterSize(ApiModel):
    num_workers: int | None = None
    autoscale: Autoscale | None = None


class EventDetails(ApiModel):
    current_num_workers: int | None = None
    target_num_workers: int | None = None
    previous_attributes: ClusterAttributes | None = None
    attributes: ClusterAttributes | None = None
    previous_cluster_size: ClusterSize | None = None
    cluster_size: ClusterSize | None = None
    cause: str | None = None
    reason: TerminationReason | None = None
    user: str | None = None


class ClusterEvent(ApiModel):
    cluster_id: str = ""
    timestamp: int = 0
    type: str = ""
    details: EventDetails | None = None


class ClusterEventRequest(ApiModel):
    """Body of ``clusters/events``; also the shape of ``next_page``."""

    cluster_id: str = ""
    start_time: int | None = None
    end_time: int | None = None
    order: str | None = None
    event_types: list[str] | None = None
    offset: int | None = None
    limit: int | None = None


class ClusterEventResponse(ApiModel):
    events: list[ClusterEvent] = Field(default_factory=list)
    next_page: ClusterEventRequest | None = None
    total_count: int = 0


class ClusterZoneResponse(ApiModel):
    zones: list[str] = Field(default_factory=list)
    default_zone: str = ""


class NodeType(ApiModel):
    node_type_id: str = ""
    memory_mb: int = 0
    num_cores: float = 0.0
    description: str = ""
    instance_type_id: str = ""
    is_deprecated: bool = False


class SparkVersion(ApiModel):
    """A Databricks runtime version usable as ``spark_version``."""

    key: str = ""
    name: str = ""


# ---------------------------------------------------------------------------
# DBFS
# ---------------------------------------------------------------------------


class FileInfo(ApiModel):
    path: str = ""
    is_dir: bool = False
    file_size: int = 0
    modification_time: int | None = None


class ReadResult(ApiModel):
    """Decoded result of ``dbfs/read``."""

    bytes_read: int = 0
    data: bytes = b""


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


class PrincipalName(ApiModel):
    """A member of a group: either a user name or a group name."""

    user_name: str | None = None
    group_name: str | None = None


# ---------------------------------------------------------------------------
# Libraries
# ---------------------------------------------------------------------------


class MavenLibrary(ApiModel):
    coordinates: str = ""
    repo: str | None = None
    exclusions: list[str] | None = None


class PythonPyPiLibrary(ApiModel):
    package: str = ""
    repo: str | None = None


class RCranLibrary(ApiModel):
    package: str = ""
    repo: str | None = None


class Library(ApiModel):
    """A library to install. Set exactly one field."""

    jar: str | None = None
    egg: str | None = None
    whl: str | None = None
    pypi: PythonPyPiLibrary | None = None
    maven: MavenLibrary | None = None
    cran: RCranLibrary | None = None


class LibraryFullStatus(ApiModel):
    """Status of one library on one cluster."""

    library: Library | None = None
    status: str = ""
    messages: list[str] | None = None
    is_library_for_all_clusters: bool = False


class ClusterLibraryStatuses(ApiModel):
    cluster_id: str = ""
    library_statuses: list[LibraryFullStatus] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------


class CronSchedule(ApiModel):
    quartz_cron_expression: str = ""
    timezone_id: str = ""
    pause_status: str | None = None


class NotebookTask(ApiModel):
    notebook_path: str = ""
    base_parameters: dict[str, str] | None = None


class SparkJarTask(ApiModel):
    jar_uri: str | None = None
    main_class_name: str = ""
    parameters: list[str] | None = None


class SparkPythonTask(ApiModel):
    python_file: str = ""
    parameters: list[str] | None = None


class SparkSubmitTask(ApiModel):
    parameters: list[str] | None = None


class JobEmailNotifications(ApiModel):
    """Addresses notified when runs start, succeed or fail."""

    on_start: list[str] | None = None
    on_success: list[str] | None = None
    on_failure: list[str] | None = None
    no_alert_for_skipped_runs: bool | None = None


class JobSettings(ApiModel):
    """Settings of a job, as created, reset or returned by ``jobs/get``.

    Set either ``existing_cluster_id`` or ``new_cluster``, and exactly one
    task field.
    """

    existing_cluster_id: str | None = None
    new_cluster: NewCluster | None = None
    notebook_task: NotebookTask | None = None
    spark_jar_task: SparkJarTask | None = None
    spark_python_task: SparkPythonTask | None = None
    spark_submit_task: SparkSubmitTask | None = None
    name: str | None = None
    libraries: list[Library] | None = None
    email_notifications: JobEmailNotifications | None = None
    timeout_seconds: int | None = None
    max_retries: int | None = None
    min_retry_interval_millis: int | None = None
    retry_on_timeout: bool | None = None
    schedule: CronSchedule | None = None
    max_concurrent_runs: int | None = None


class JobCreateRequest(JobSettings):
    """Body of ``jobs/create``."""


class Job(ApiModel):
    job_id: int = 0
    creator_user_name: str = ""
    settings: JobSettings | None = None
    created_time: int = 0


class JobRunNowRequest(ApiModel):
    """Body of ``jobs/run-now``.

    Only the parameter kind matching the job's task type should be set.
    """

    job_id: int = 0
    jar_params: list[str] | None = None
    notebook_params: dict[str, str] | None = None
    python_params: list[str] | None = None
    spark_submit_params: list[str] | None = None


class RunNowResponse(ApiModel):
    run_id: int = 0
    number_in_job: int = 0


class JobSubmitRequest(ApiModel):
    """Body of ``jobs/runs/submit``: a one-time run without a job."""

    existing_cluster_id: str | None = None
    new_cluster: NewCluster | None = None
    notebook_task: NotebookTask | None = None
    spark_jar_task: SparkJarTask | None = None
    spark_python_task: SparkPythonTask | None = None
    spark_submit_task: SparkSubmitTask | None = None
    run_name: str | None = None
    libraries: list[Library] | None = None
    timeout_seconds: int | None = None


class JobRunListRequest(ApiModel):
    """Query parameters of ``jobs/runs/list``.

    ``active_only`` and ``complete_only`` are mutually exclusive.
    """

    active_only: bool | None = None
    complete_only: bool | None = None
    job_id: int | None = None
    offset: int | None = None
    limit: int | None = None


class RunState(ApiModel):
    life_cycle_state: str = ""
    result_state: str | None = None
    state_message: str = ""


class ClusterInstance(ApiModel):
    """Cluster and Spark context used by a run."""

    cluster_id: str = ""
    spark_context_id: str | None = None


class ClusterSpec(ApiModel):
    existing_cluster_id: str | None = None
    new_cluster: NewCluster | None = None
    libraries: list[Library] | None = None


class RunParameters(ApiModel):
    jar_params: list[str] | None = None
    notebook_params: dict[str, str] | None = None
    python_params: list[str] | None = None
    spark_submit_params: list[str] | None = None


class JobTask(ApiModel):
    notebook_task: NotebookTask | None = None
    spark_jar_task: SparkJarTask | None = None
    spark_python_task: SparkPythonTask | None = None
    spark_submit_task: SparkSubmitTask | None = None


class Run(ApiModel):
    """All the information about a run except its output."""

    job_id: int = 0
    run_id: int = 0
    creator_user_name: str = ""
    number_in_job: int = 0
    original_attempt_run_id: int = 0
    state: RunState | None = None
    schedule: CronSchedule | None = None
    task: JobTask | None = None
    cluster_spec: ClusterSpec | None = None
    cluster_instance: ClusterInstance | None = None
    overriding_parameters: RunParameters | None = None
    start_time: int = 0
    setup_duration: int = 0
    execution_duration: int = 0
    cleanup_duration: int = 0
    trigger: str | None = None
    run_name: str | None = None
    run_page_url: str | None = None
    run_type: str | None = None


class RunsListResponse(ApiModel):
    runs: list[Run] = Field(default_factory=list)
    has_more: bool = False


class ViewItem(ApiModel):
    """One exported view of a run (a notebook or a dashboard)."""

    content: str = ""
    name: str = ""
    type: str = ""


class NotebookOutput(ApiModel):
    result: str | None = None
    truncated: bool = False


class RunOutput(ApiModel):
    """Output of a run, as returned by ``jobs/runs/get-output``.

    ``error`` is set when the run failed; ``notebook_output`` holds the
    value passed to ``dbutils.notebook.exit``.
    """

    notebook_output: NotebookOutput | None = None
    error: str | None = None
    error_trace: str | None = None
    metadata: Run | None = None


# ---------------------------------------------------------------------------
# Instance profiles
# ---------------------------------------------------------------------------


class InstanceProfile(ApiModel):
    """An IAM instance profile that clusters can be launched with."""

    instance_profile_arn: str = ""
    is_meta_instance_profile: bool | None = None


# ---------------------------------------------------------------------------
# Secrets
# ---------------------------------------------------------------------------


class SecretScope(ApiModel):
    name: str = ""
    backend_type: str = ""


class SecretMetadata(ApiModel):
    """Metadata of a secret; never contains the secret value."""

    key: str = ""
    last_updated_timestamp: int = 0


class AclItem(ApiModel):
    """An ACL rule granting a principal a permission on a secret scope."""

    principal: str = ""
    permission: str = ""


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


class PublicTokenInfo(ApiModel):
    """Public metadata of an access token."""

    token_id: str = ""
    creation_time: int = 0
    expiry_time: int = 0
    comment: str = ""


class TokenCreateResponse(ApiModel):
    token_value: str = ""
    token_info: PublicTokenInfo | None = None


# ---------------------------------------------------------------------------
# Workspace
# ---------------------------------------------------------------------------


class ObjectInfo(ApiModel):
    """A workspace object, as returned by list and get-status."""

    object_type: str = ""
    path: str = ""
    language: str | None = None
    object_id: int | None = None
