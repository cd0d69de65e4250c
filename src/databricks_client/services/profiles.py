"""Instance Profiles API: IAM instance profiles clusters may launch with."""

from pydantic import Field

from ..types import ApiModel, InstanceProfile
from .base import Service


class _ProfileList(ApiModel):
    instance_profiles: list[InstanceProfile] = Field(default_factory=list)


class ProfilesService(Service):
    """Operations on ``2.0/instance-profiles``. Writes are admin only."""

    resource = "instance-profiles"

    def add(self, instance_profile_arn: str, skip_validation: bool = False) -> None:
        """Register an instance profile.

        Unless ``skip_validation`` is set, the profile is checked by launching
        an instance with it.
        """
        self._post(
            "add",
            {
                "instance_profile_arn": instance_profile_arn,
                "skip_validation": skip_validation,
            },
        )

    def remove(self, instance_profile_arn: str) -> None:
        """Remove an instance profile.

        Clusters already running with it keep working.
        """
        self._post("remove", {"instance_profile_arn": instance_profile_arn})

    def list(self) -> list[InstanceProfile]:
        """Return the instance profiles the calling user can use."""
        return self._get("list", response_model=_ProfileList).instance_profiles
