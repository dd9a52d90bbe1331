"""
Vecthrust Logging Utilities

This module provides a functional approach to logging for the Vecthrust library.
It handles initialization of loggers, structured logging of vector operations
performed by the batch pipeline, and timing of operations.

Vector operation records are emitted as JSON on the ``vecthrust.vector`` logger
at debug level, and only when the configuration asks for them.
"""

import os
import json
import time
import logging
from datetime import datetime
from typing import Dict, Any, Optional, Callable

import numpy as np

from .vectors import Vector

# Custom JSON encoder to handle vectors, NumPy arrays and other special types
class VecthrustJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, Vector):
            return obj.to_string()
        if isinstance(obj, np.ndarray):
            if obj.size > 10:  # Only show a few elements for large arrays
                return f"ndarray(shape={obj.shape}, sample=[{', '.join(map(str, obj.flatten()[:3]))}...])"
            return obj.tolist()
        if isinstance(obj, np.generic):
            return obj.item()
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, (set, tuple)):
            return list(obj)
        return super().default(obj)

LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR
}

def initialize_logger(log_level: str, log_path: Optional[str] = None) -> logging.Logger:
    """
    Initialize the logging system.

    Args:
        log_level (str): Minimum log level to record. Options include:
                         "debug", "info", "warning", "error".
        log_path (str, optional): Directory where log files should be stored.
                                  When omitted only console output is configured.

    Returns:
        logging.Logger: Configured logger object.
    """
    level = LEVEL_MAP.get(str(log_level).lower(), logging.INFO)

    logger = logging.getLogger("vecthrust.main")
    logger.setLevel(level)

    # Close and clear existing handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    if log_path:
        os.makedirs(log_path, exist_ok=True)
        log_file = os.path.join(log_path, f"vecthrust_{datetime.now().strftime('%Y%m%d')}.log")
        file_handler = logging.FileHandler(log_file)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                           datefmt='%Y-%m-%d %H:%M:%S')
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s',
                                          datefmt='%H:%M:%S')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    logger.info("Logging system initialized with level: %s", logging.getLevelName(level))

    return logger

def create_logger_config(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the logger configuration used by the logging helpers.

    Args:
        settings (Dict[str, Any]): Logging section of a validated configuration
                                   ("log_level", "log_path", "include_vector_operations").

    Returns:
        Dict[str, Any]: Dictionary with "main" and "vector" loggers and the settings.
    """
    settings = dict(settings)
    settings.setdefault("log_level", "info")
    settings.setdefault("log_path", None)
    settings.setdefault("include_vector_operations", False)

    main_logger = initialize_logger(settings["log_level"], settings["log_path"])

    vector_logger = logging.getLogger("vecthrust.vector")
    vector_logger.setLevel(logging.DEBUG if settings["include_vector_operations"] else logging.INFO)
    vector_logger.handlers.clear()
    for handler in main_logger.handlers:
        vector_logger.addHandler(handler)

    return {
        "main": main_logger,
        "vector": vector_logger,
        "settings": settings
    }

def log_vector_operation(
    logger_config: Dict[str, Any],
    operation_type: str,
    inputs: Dict[str, Any],
    outputs: Dict[str, Any],
    metadata: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log a vector operation.

    Args:
        logger_config (Dict[str, Any]): Logger configuration from create_logger_config.
        operation_type (str): Type of vector operation (e.g., "add", "scale").
        inputs (Dict[str, Any]): Dictionary of input vectors and parameters.
        outputs (Dict[str, Any]): Dictionary of output vectors and results.
        metadata (Dict[str, Any], optional): Additional metadata about the operation.

    Returns:
        None
    """
    if not logger_config["settings"]["include_vector_operations"]:
        return

    if "vector" not in logger_config:
        logger_config["main"].warning("Vector logging requested but not configured")
        return

    log_entry = {
        "timestamp": datetime.now().isoformat(),
        "operation_type": operation_type,
        "inputs": _prepare_vectors_for_logging(inputs),
        "outputs": _prepare_vectors_for_logging(outputs),
        "metadata": metadata or {}
    }

    try:
        log_message = json.dumps(log_entry, cls=VecthrustJSONEncoder)
    except TypeError as e:
        logger_config["main"].error(f"Failed to log vector operation: {str(e)}")
        return
    logger_config["vector"].debug(log_message)

def log_performance_metrics(
    logger_config: Dict[str, Any],
    operation: str,
    execution_time: float,
    metrics: Dict[str, Any]
) -> None:
    """
    Log performance metrics for an operation.

    Args:
        logger_config (Dict[str, Any]): Logger configuration from create_logger_config.
        operation (str): Name of the operation being measured.
        execution_time (float): Execution time in seconds.
        metrics (Dict[str, Any]): Additional metrics specific to the operation.
    """
    logger_config["main"].info(
        f"Performance - {operation} - Time: {execution_time:.4f}s - "
        f"Metrics: {json.dumps(metrics, cls=VecthrustJSONEncoder)}"
    )

def timer(logger_config: Dict[str, Any], operation_name: str) -> Callable:
    """
    Function decorator to time and log the execution of functions.

    Args:
        logger_config (Dict[str, Any]): Logger configuration from create_logger_config.
        operation_name (str): Name of the operation to log.

    Returns:
        Callable: Decorator function that times and logs the execution.
    """
    def decorator(func):
        def wrapper(*args, **kwargs):
            start_time = time.time()
            result = func(*args, **kwargs)
            execution_time = time.time() - start_time

            log_performance_metrics(
                logger_config,
                operation_name,
                execution_time,
                {"function": func.__name__}
            )

            return result
        return wrapper
    return decorator

def _prepare_vectors_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Prepare vector data for logging, trimming large vectors for readability.
    """
    result = {}
    for key, value in data.items():
        if isinstance(value, Vector):
            value = value.as_array()
        if isinstance(value, np.ndarray):
            if value.size > 10:  # Summarize large vectors
                result[key] = {
                    "dimension": value.size,
                    "sample": value.flatten()[:3].tolist()
                }
            else:
                result[key] = value.tolist()
        elif isinstance(value, dict):
            result[key] = _prepare_vectors_for_logging(value)
        else:
            result[key] = value
    return result
