"""
Test logging utilities module
"""

import os
import json
import logging
import numpy as np
import pytest
from vecthrust.vectors import Vector
from vecthrust.logging_utils import (
    VecthrustJSONEncoder, initialize_logger, create_logger_config,
    log_vector_operation, timer
)

@pytest.fixture(autouse=True)
def reset_loggers():
    """Detach handlers added by each test"""
    yield
    for name in ("vecthrust.main", "vecthrust.vector"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

def test_json_encoder():
    """Test encoding of vectors and numpy values"""
    encoded = json.loads(json.dumps({
        "vector": Vector([1.0, 2.5099]),
        "small": np.array([1.0, 2.0]),
        "scalar": np.float64(0.5)
    }, cls=VecthrustJSONEncoder))

    assert encoded["vector"] == "Vector: [1.0, 2.5099]"
    assert encoded["small"] == [1.0, 2.0]
    assert encoded["scalar"] == 0.5

    large = json.dumps(np.arange(20.0), cls=VecthrustJSONEncoder)
    assert "shape=(20,)" in large

def test_initialize_logger(tmp_path):
    """Test logger level and handlers"""
    logger = initialize_logger("debug")
    assert logger.name == "vecthrust.main"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    # Unknown levels fall back to info; a log path adds a file handler
    log_dir = tmp_path / "logs"
    logger = initialize_logger("verbose", str(log_dir))
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2
    assert os.path.isdir(log_dir)
    assert any(name.startswith("vecthrust_") for name in os.listdir(log_dir))

def test_log_vector_operation(caplog):
    """Test vector operations are logged only when enabled"""
    logger_config = create_logger_config({"log_level": "info", "include_vector_operations": True})

    with caplog.at_level(logging.DEBUG, logger="vecthrust.vector"):
        log_vector_operation(
            logger_config, "add",
            {"a": Vector([1.0, 2.0]), "b": Vector([0.0, 4.0])},
            {"sum": Vector([1.0, 6.0])}
        )

    records = [r for r in caplog.records if r.name == "vecthrust.vector"]
    assert len(records) == 1
    entry = json.loads(records[0].getMessage())
    assert entry["operation_type"] == "add"
    assert entry["inputs"]["a"] == [1.0, 2.0]
    assert entry["outputs"]["sum"] == [1.0, 6.0]

    caplog.clear()
    logger_config = create_logger_config({"log_level": "info"})
    with caplog.at_level(logging.DEBUG, logger="vecthrust.vector"):
        log_vector_operation(logger_config, "add", {}, {"sum": Vector([1.0])})
    assert not [r for r in caplog.records if r.name == "vecthrust.vector"]

def test_large_vectors_are_summarized(caplog):
    """Test long vectors are trimmed in operation logs"""
    logger_config = create_logger_config({"include_vector_operations": True})
    big = Vector([float(i) for i in range(50)])

    with caplog.at_level(logging.DEBUG, logger="vecthrust.vector"):
        log_vector_operation(logger_config, "scale", {"v": big}, {"w": big * 2.0}, {"factor": 2.0})

    entry = json.loads([r for r in caplog.records if r.name == "vecthrust.vector"][0].getMessage())
    assert entry["inputs"]["v"] == {"dimension": 50, "sample": [0.0, 1.0, 2.0]}
    assert entry["metadata"] == {"factor": 2.0}

def test_timer(caplog):
    """Test the timing decorator logs and returns the wrapped result"""
    logger_config = create_logger_config({"log_level": "info"})

    @timer(logger_config, "sum_vectors")
    def sum_vectors(a, b):
        return a + b

    with caplog.at_level(logging.INFO, logger="vecthrust.main"):
        result = sum_vectors(Vector([1.0]), Vector([2.0]))

    assert result == Vector([3.0])
    assert any("Performance - sum_vectors" in r.getMessage() for r in caplog.records)

def test_reinitialize_closes_previous_handlers(tmp_path):
    """Test re-initializing the logger closes the old file handler"""
    logger = initialize_logger("info", str(tmp_path))
    old_file_handler = [h for h in logger.handlers if isinstance(h, logging.FileHandler)][0]

    logger = initialize_logger("info", str(tmp_path))
    assert old_file_handler not in logger.handlers
    assert old_file_handler.stream is None
