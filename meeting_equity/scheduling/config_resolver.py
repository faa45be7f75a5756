"""Effective configuration resolution.

Precedence, highest first:
1. Configuration attached to the participant record
2. Configuration registered for the participant's country code
3. The injected default configuration

Whichever level matches wins wholesale; fields are never merged across levels.
"""

from collections.abc import Mapping

from meeting_equity.scheduling.types import ConfigSource, CountryConfig, Participant


def _country_config(participant: Participant, country_configs: Mapping[str, CountryConfig]) -> CountryConfig | None:
    config = country_configs.get(participant.country_code)
    if config is None:
        # Registries keyed by lower-case codes still match
        config = country_configs.get(participant.country_code.lower())
    return config


def resolve_source(participant: Participant, country_configs: Mapping[str, CountryConfig]) -> ConfigSource:
    """Return the precedence level that supplies a participant's configuration."""
    if participant.config is not None:
        return ConfigSource.PARTICIPANT
    if _country_config(participant, country_configs) is not None:
        return ConfigSource.COUNTRY
    return ConfigSource.DEFAULT


def resolve(
    participant: Participant,
    country_configs: Mapping[str, CountryConfig],
    default_config: CountryConfig,
) -> CountryConfig:
    """Resolve the effective configuration for a participant.

    A country code with no registered configuration silently falls through
    to the default; this is not an error.

    Args:
        participant: Participant to resolve for
        country_configs: Registry of configurations keyed by country code
        default_config: Fallback configuration

    Returns:
        The effective CountryConfig
    """
    if participant.config is not None:
        return participant.config
    config = _country_config(participant, country_configs)
    if config is not None:
        return config
    return default_config
