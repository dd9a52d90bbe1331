"""
Configuration Parser for Vecthrust.

This module handles parsing, validation, and extraction of configuration elements
from the JSON batch files processed by the Vecthrust pipeline: named input vectors,
the operations to evaluate over them, and logging settings.
"""

import json
import os
import logging
from typing import Dict, List, Any
from jsonschema import validate, ValidationError
from .error_handling import success, error, is_error, get_value, get_error

# Set up logging
logger = logging.getLogger(__name__)

SUPPORTED_OPERATIONS = ["add", "subtract", "scale", "equals"]

# Configuration schema for validation
CONFIG_SCHEMA = {
    "type": "object",
    "required": ["vectors"],
    "properties": {
        "vectors": {
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "minItems": 1,
                "items": {"type": "number"}
            }
        },
        "operations": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "operation", "operands"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "operation": {"type": "string", "enum": SUPPORTED_OPERATIONS},
                    "operands": {
                        "type": "array",
                        "minItems": 1,
                        "maxItems": 2,
                        "items": {"type": "string"}
                    },
                    "factor": {"type": "number"}
                }
            }
        },
        "logging": {
            "type": "object",
            "properties": {
                "log_level": {"type": "string", "enum": ["debug", "info", "warning", "error"]},
                "log_path": {"type": "string"},
                "include_vector_operations": {"type": "boolean"}
            }
        }
    }
}

def parse_input_config(input_path: str) -> Dict[str, Any]:
    """
    Parse input JSON configuration file.

    Args:
        input_path (str): Path to the JSON configuration file.

    Returns:
        Result: (config, None) on success, (None, message) if the file is
                missing or does not contain valid JSON.
    """
    if not os.path.exists(input_path):
        return error(f"Configuration file not found: {input_path}")

    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        return error(f"Invalid JSON in configuration file: {str(e)}")
    except OSError as e:
        return error(f"Error reading configuration: {str(e)}")

    logger.info(f"Successfully parsed configuration file: {input_path}")
    return success(config)

def validate_config(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate configuration dictionary and provide defaults for missing values.

    Args:
        config_dict (dict): Raw configuration dictionary from parsed JSON.

    Returns:
        Result: (config, None) with defaults applied, or (None, message).
    """
    try:
        validate(instance=config_dict, schema=CONFIG_SCHEMA)
    except ValidationError as e:
        logger.error(f"Configuration validation error: {e.message}")
        return error(f"Invalid configuration: {e.message}")

    for operation in config_dict.get("operations", []):
        if operation["operation"] == "scale":
            if "factor" not in operation:
                return error(f"Operation '{operation['name']}': scale requires a factor")
            if len(operation["operands"]) != 1:
                return error(f"Operation '{operation['name']}': scale takes exactly one operand")
        elif len(operation["operands"]) != 2:
            return error(f"Operation '{operation['name']}': {operation['operation']} takes exactly two operands")

    config_dict.setdefault("operations", [])

    config_dict.setdefault("logging", {})
    config_dict["logging"].setdefault("log_level", "info")
    config_dict["logging"].setdefault("include_vector_operations", False)

    logger.info("Configuration validated and defaults applied")
    return success(config_dict)

def extract_vectors(config_dict: Dict[str, Any]) -> Dict[str, List[float]]:
    """
    Extract the named input vectors from configuration.

    Args:
        config_dict (dict): Validated configuration dictionary.

    Returns:
        dict: Mapping of vector name to its coordinate list.
    """
    vectors = {name: list(coordinates) for name, coordinates in config_dict["vectors"].items()}
    logger.info(f"Extracted {len(vectors)} vectors from configuration")
    return vectors

def extract_operations(config_dict: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Extract the operation list from configuration, in evaluation order."""
    operations = [dict(operation) for operation in config_dict.get("operations", [])]
    logger.debug(f"Extracted {len(operations)} operations")
    return operations

def extract_logging_options(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract logging-related options from configuration.

    Args:
        config_dict (dict): Validated configuration dictionary.

    Returns:
        dict: Logging options such as log level, log path and whether
             individual vector operations are logged.
    """
    if "logging" not in config_dict:
        logger.warning("No logging options found in configuration")
        return {}

    logging_options = config_dict["logging"].copy()
    logger.debug(f"Extracted logging options: {logging_options}")
    return logging_options

def process_config_file(input_path: str) -> Dict[str, Any]:
    """
    Process configuration file from parsing to validation and extraction.

    Args:
        input_path (str): Path to the configuration file.

    Returns:
        dict: Dictionary with all processed configuration components.

    Raises:
        ValueError: If the file is missing, is not valid JSON or fails validation.
    """
    raw_config_result = parse_input_config(input_path)
    if is_error(raw_config_result):
        raise ValueError(get_error(raw_config_result))

    validated_config_result = validate_config(get_value(raw_config_result))
    if is_error(validated_config_result):
        raise ValueError(get_error(validated_config_result))

    validated_config = get_value(validated_config_result)

    processed_config = {
        "vectors": extract_vectors(validated_config),
        "operations": extract_operations(validated_config),
        "logging_options": extract_logging_options(validated_config),
        "raw_config": validated_config
    }

    logger.info("Configuration processing complete")
    return processed_config
