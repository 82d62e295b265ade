"""Supports for loading pydantic_settings.BaseSettings into attribute maps."""

import logging
from typing import Any, TypeVar

from pydantic_core import ValidationError
from pydantic_settings import BaseSettings
from pydantic_settings.sources import DotenvType

from attrmap.container import BaseAttributeMap
from attrmap.types import resolve_type_name

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=BaseSettings)


class SettingsAttributeLoader:
    """Set the fields of a settings object as attributes keyed by field name.

    Fields holding None are skipped since attribute values cannot be None.
    """

    __slots__ = ("_env_file",)

    def __init__(self, env_file: DotenvType | None = None) -> None:
        self._env_file = env_file

    @property
    def env_file(self) -> DotenvType | None:
        return self._env_file

    def _create_settings(self, settings_type: type[S]) -> S:
        if self._env_file is None:
            # Keep whatever env_file the settings model_config declares.
            return settings_type()
        return settings_type(_env_file=self._env_file)  # type: ignore[call-arg]

    def load(
        self, settings_type: type[S], attribute_map: BaseAttributeMap[str]
    ) -> S:
        """Create the settings and set their fields in the attribute map.

        Args:
            settings_type (type[S]): The settings class to instantiate.
            attribute_map (BaseAttributeMap[str]): The map to set the fields in.

        Raises:
            ValidationError: If the settings cannot be created.

        Returns:
            S: The created settings.
        """
        settings = self._create_settings(settings_type)
        self.load_instance(settings, attribute_map)
        return settings

    def try_load(
        self, settings_type: type[S], attribute_map: BaseAttributeMap[str]
    ) -> S | None:
        """Same as load, but returns None when the settings are invalid."""
        try:
            return self.load(settings_type, attribute_map)
        except ValidationError as exc:
            logger.debug(
                "Skipped loading %s: %s",
                resolve_type_name(settings_type),
                exc,
            )
            return None

    @staticmethod
    def load_instance(
        settings: BaseSettings, attribute_map: BaseAttributeMap[str]
    ) -> None:
        """Set the fields of an existing settings object in the attribute map."""
        values: dict[str, Any] = {}
        for name in type(settings).model_fields:
            value = getattr(settings, name)
            if value is not None:
                values[name] = value
        attribute_map.update(values)
