"""
Selector configuration.

Classes:
    SelectorConfig: Immutable display/selection options

Functions:
    load_config: Read a SelectorConfig from a YAML or JSON file
"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from coreselector.core.errors import ConfigurationError, ErrorCodes, wrap_external_error
from coreselector.models.entity import NodeType

logger = logging.getLogger(__name__)

# Host property names -> dataclass field names
_KEY_ALIASES = {
    'displayCycles': 'display_cycles',
    'showPrimaryFlag': 'show_primary_flag',
    'propagate': 'propagate',
    'multiple': 'multiple',
    'leafType': 'leaf_type',
    'showPins': 'show_pins',
}

_BOOL_FIELDS = ('display_cycles', 'show_primary_flag', 'propagate', 'multiple', 'show_pins')

SUPPORTED_FORMATS = {'.yaml', '.yml', '.json'}


@dataclass(frozen=True)
class SelectorConfig:
    """
    Immutable configuration for one selector.

    Attributes:
        display_cycles: Render CYCLE entities; when False their children are
            spliced into the cycle's position
        show_primary_flag: Mark primary scenarios
        propagate: Whether selection notifications ask the host to propagate
        multiple: Reserved; selection is always single
        leaf_type: The node type that can be selected
        show_pins: Enable pin buttons and pin propagation

    Example:
        >>> config = SelectorConfig(leaf_type=NodeType.SCENARIO, display_cycles=False)
        >>> valid, errors = config.validate()
    """

    display_cycles: bool = True
    show_primary_flag: bool = True
    propagate: bool = True
    multiple: bool = False
    leaf_type: NodeType = NodeType.NODE
    show_pins: bool = True

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Validate the configuration.

        Returns:
            Tuple of (is_valid, list_of_error_messages)
        """
        errors = []

        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                errors.append(f"{name} must be a boolean: {value!r}")

        if not isinstance(self.leaf_type, NodeType):
            errors.append(f"leaf_type must be a NodeType: {self.leaf_type!r}")

        return (len(errors) == 0, errors)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['leaf_type'] = self.leaf_type.name
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SelectorConfig':
        """
        Create a config from snake_case keys or the host's camelCase names.

        Raises:
            ConfigurationError: If a value has the wrong type or the result
                does not validate
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}",
                error_code=ErrorCodes.CONFIG_INVALID
            )

        valid_fields = set(cls.__dataclass_fields__)
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in valid_fields:
                logger.debug(f"Ignoring unknown configuration key '{key}'")
                continue
            kwargs[name] = value

        if 'leaf_type' in kwargs:
            try:
                kwargs['leaf_type'] = NodeType.parse(kwargs['leaf_type'])
            except ValueError as e:
                raise ConfigurationError(
                    str(e),
                    setting_name='leaf_type',
                    error_code=ErrorCodes.CONFIG_INVALID,
                    cause=e
                )

        config = cls(**kwargs)
        valid, errors = config.validate()
        if not valid:
            raise ConfigurationError(
                f"Invalid selector configuration: {'; '.join(errors)}",
                error_code=ErrorCodes.CONFIG_INVALID,
                context={'errors': errors}
            )
        return config


def load_config(path: Union[str, Path]) -> SelectorConfig:
    """
    Load a SelectorConfig from a YAML or JSON file.

    Args:
        path: Path to a .yaml, .yml or .json file

    Raises:
        ConfigurationError: If the file is missing, has an unsupported
            format, cannot be parsed or holds invalid values
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}",
            error_code=ErrorCodes.CONFIG_NOT_FOUND,
            suggestions=["Check the --config path"]
        )

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_FORMATS:
        raise ConfigurationError(
            f"Unsupported format: {suffix}. "
            f"Supported formats: {', '.join(sorted(SUPPORTED_FORMATS))}",
            error_code=ErrorCodes.UNSUPPORTED_FORMAT
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if suffix == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise wrap_external_error(e, f"Failed to read configuration file {path}",
                                  ConfigurationError, error_code=ErrorCodes.CONFIG_INVALID,
                                  file_path=str(path))

    config = SelectorConfig.from_dict(data or {})
    logger.info(f"Loaded selector configuration from {path}")
    return config
