"""Settings sources that each contribute one layer of configuration.

Every source exposes its layer as a nested dictionary shaped like the
Config model. The resolver merges the layers in a fixed order, so a source
only carries the keys it explicitly sets.
"""

import types
from pathlib import Path
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import EnvSettingsSource, PydanticBaseSettingsSource, SettingsError

from perses.config.errors import ConfigParseError
from perses.config.loader import load_file
from perses.config.settings import ENV_PREFIX


class LayerSettingsSource(PydanticBaseSettingsSource):
    """Base for sources whose whole layer is computed up front."""

    name = "layer"

    def __init__(self, settings_cls: type[Any]) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}

    def get_field_value(
        self, field: FieldInfo, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        """Get a top-level field value from this layer."""
        value = self._data.get(field_name)
        return value, field_name, isinstance(value, dict)

    def __call__(self) -> dict[str, Any]:
        """Return the values set by this layer."""
        return self._data.copy()


class DefaultsSettingsSource(LayerSettingsSource):
    """Caller-supplied database defaults, the lowest precedence layer.

    The file backend is seeded only when a non-empty folder is given;
    the extension alone is never applied.
    """

    name = "defaults"

    def __init__(self, settings_cls: type[Any], db_folder: str = "", db_extension: str = "") -> None:
        super().__init__(settings_cls)
        if db_folder:
            self._data = {
                "database": {
                    "file": {"folder": db_folder, "file_extension": db_extension},
                }
            }


class FileSettingsSource(LayerSettingsSource):
    """Values read from a YAML or JSON configuration file.

    An empty path means there is no file layer.
    """

    name = "file"

    def __init__(self, settings_cls: type[Any], config_file: str = "") -> None:
        super().__init__(settings_cls)
        self.config_file = config_file
        if config_file:
            self._data = load_file(Path(config_file))


class PrefixedEnvSettingsSource(EnvSettingsSource):
    """Values read from prefixed environment variables.

    The variable for a field is the prefix followed by the field path joined
    with underscores, e.g. PERSES_DATABASE_FILE_FOLDER. Names are matched
    case-insensitively. Each value is coerced to the type of its field so a
    bad value is reported against its variable.
    """

    name = "env"

    def __init__(self, settings_cls: type[Any], env_prefix: str = ENV_PREFIX) -> None:
        self.prefix = env_prefix.upper().rstrip("_")
        super().__init__(
            settings_cls,
            env_prefix=f"{self.prefix}_",
            env_nested_delimiter="_",
            # database_file_file_extension -> database / file / file_extension
            env_nested_max_split=2,
        )

    def __call__(self) -> dict[str, Any]:
        """Return the values set by the environment, coerced to their field types.

        Raises:
            ConfigParseError: If a variable holds a value invalid for its field
        """
        try:
            layer = super().__call__()
        except SettingsError as e:
            raise ConfigParseError(str(e), self.variable("*")) from e
        return self._coerce(self.settings_cls, layer, ())

    def _coerce(
        self, model: type[BaseModel], layer: dict[str, Any], path: tuple[str, ...]
    ) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in layer.items():
            field = model.model_fields.get(key)
            if field is None:
                # unknown keys are left for validation to reject
                result[key] = value
                continue
            nested = _nested_model(field.annotation)
            if nested is not None and isinstance(value, dict):
                result[key] = self._coerce(nested, value, (*path, key))
            else:
                result[key] = coerce_value(self.variable(*path, key), value, field)
        return result

    def variable(self, *path: str) -> str:
        """Build the environment variable name for a field path."""
        return "_".join((self.prefix, *path)).upper()


def coerce_value(variable: str, raw: Any, field: FieldInfo) -> Any:
    """Coerce a raw environment value to the type of field.

    Raises:
        ConfigParseError: If the value is not valid for the field
    """
    annotation: Any = field.annotation
    if field.metadata:
        annotation = Annotated[(annotation, *field.metadata)]
    try:
        return TypeAdapter(annotation).validate_python(raw)
    except ValidationError as e:
        details = "; ".join(err["msg"] for err in e.errors())
        raise ConfigParseError(
            f"Invalid value for environment variable {variable}: {details}", variable
        ) from e


def _nested_model(annotation: Any) -> type[BaseModel] | None:
    # Unwraps Optional[Model] / Model | None
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) != 1:
            return None
        annotation = args[0]
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    return None
