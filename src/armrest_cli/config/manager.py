"""Configuration manager — read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from armrest_cli.client.errors import ConfigurationError
from armrest_cli.config.constants import (
    CONFIG_FILE,
    DEFAULT_MAX_THREADS,
    DEFAULT_TIMEOUT,
    ENV_ACCESS_TOKEN,
    ENV_CLIENT_ID,
    ENV_CLIENT_SECRET,
    ENV_PROFILE,
    ENV_RESOURCE_GROUP,
    ENV_SUBSCRIPTION_ID,
    ENV_TENANT_ID,
)
from armrest_cli.config.models import ArmrestConfiguration, CLIConfig

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

# Values equal to these are left out of the saved file
_DEFAULTS: dict[str, Any] = {
    "verify_ssl": True,
    "timeout": DEFAULT_TIMEOUT,
    "max_threads": DEFAULT_MAX_THREADS,
}


class ConfigManager:
    """Manages CLI configuration on disk and resolves subscription profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        data = tomllib.loads(raw.decode())
        profiles: dict[str, ArmrestConfiguration] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = ArmrestConfiguration(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Secure directory permissions (owner-only)
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.default_format != "table":
            data["default_format"] = self.config.default_format
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(exclude={"name"}, exclude_none=True)
                for key, default in _DEFAULTS.items():
                    if prof_dict.get(key) == default:
                        del prof_dict[key]
                data["profiles"][name] = prof_dict
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.rename(self.config_path)

    def add_profile(self, profile: ArmrestConfiguration) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ArmrestConfiguration | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_configuration(
        self,
        profile_name: str | None = None,
        subscription_id: str | None = None,
        token: str | None = None,
        resource_group: str | None = None,
    ) -> ArmrestConfiguration:
        """Resolve the subscription configuration.

        Precedence: CLI flags > env vars > config profile.
        """
        env_profile = os.environ.get(ENV_PROFILE)
        profile = self.get_profile(profile_name or env_profile)

        def pick(flag: str | None, env_name: str, attr: str) -> Any:
            if flag:
                return flag
            env_value = os.environ.get(env_name)
            if env_value:
                return env_value
            return getattr(profile, attr) if profile else None

        resolved_subscription = pick(subscription_id, ENV_SUBSCRIPTION_ID, "subscription_id")
        if not resolved_subscription:
            raise ConfigurationError(
                "No subscription configured. Use 'armrest config add' or set "
                f"{ENV_SUBSCRIPTION_ID} or pass --subscription."
            )

        settings: dict[str, Any] = {}
        if profile:
            settings = profile.model_dump(exclude={"name"})
        settings.update(
            subscription_id=resolved_subscription,
            tenant_id=pick(None, ENV_TENANT_ID, "tenant_id"),
            client_id=pick(None, ENV_CLIENT_ID, "client_id"),
            client_key=pick(None, ENV_CLIENT_SECRET, "client_key"),
            token=pick(token, ENV_ACCESS_TOKEN, "token"),
            resource_group=pick(resource_group, ENV_RESOURCE_GROUP, "resource_group"),
        )
        return ArmrestConfiguration(
            name=profile.name if profile else "cli",
            **settings,
        )
