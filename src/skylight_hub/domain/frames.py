"""Frame (household) domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureFlag:
    """Whether one feature is enabled for a frame."""

    enabled: bool = False
    unsupported_hardware: bool | None = None


@dataclass(frozen=True)
class FeatureBundle:
    """Feature flags attached to a frame."""

    chores: FeatureFlag | None = None
    lists: FeatureFlag | None = None
    rewards: FeatureFlag | None = None
    calendar: FeatureFlag | None = None
    bundle_name: str | None = None


@dataclass(frozen=True)
class Frame:
    """A household unit scoping calendar, chores, lists and devices."""

    id: str
    name: str
    type: str | None = None
    timezone: str = "UTC"
    is_plus: bool = False
    feature_bundle: FeatureBundle | None = None

    @property
    def has_chores(self) -> bool:
        return _enabled(self.feature_bundle and self.feature_bundle.chores)

    @property
    def has_lists(self) -> bool:
        return _enabled(self.feature_bundle and self.feature_bundle.lists)

    @property
    def has_rewards(self) -> bool:
        return _enabled(self.feature_bundle and self.feature_bundle.rewards)

    @property
    def has_calendar(self) -> bool:
        return _enabled(self.feature_bundle and self.feature_bundle.calendar)


def _enabled(flag: FeatureFlag | None) -> bool:
    return bool(flag and flag.enabled)
