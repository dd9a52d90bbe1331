#!/usr/bin/env python3
"""
Vecthrust: Batch Processing Pipeline

This module evaluates a JSON batch file of named vectors and arithmetic
operations. The pipeline includes:
1. Configuration parsing and validation
2. Construction of the named input vectors
3. Evaluation of each operation in order, storing named results
4. Result generation, optionally written to a JSON file

Each operation result is stored under its name and can be used as an operand
by later operations. A failing operation is recorded in its result entry and
does not stop the rest of the batch.
"""

import os
import json
import time
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from .config_parser import process_config_file
from .vectors import Vector, try_create_vector
from .error_handling import VectorError, is_error, get_value, get_error
from .logging_utils import create_logger_config, log_vector_operation, log_performance_metrics

logger = logging.getLogger(__name__)

def build_vectors(coordinates_by_name: Dict[str, Any]) -> Dict[str, Vector]:
    """
    Construct the named input vectors.

    Raises:
        VectorError: If any coordinate list cannot be turned into a vector.
    """
    vectors = {}
    for name, coordinates in coordinates_by_name.items():
        vector_result = try_create_vector(coordinates)
        if is_error(vector_result):
            raise VectorError(f"Vector '{name}': {get_error(vector_result)}")
        vectors[name] = get_value(vector_result)
    return vectors

def evaluate_operation(operation: Dict[str, Any], vectors: Dict[str, Vector]) -> Any:
    """
    Evaluate a single operation over the named vectors.

    Args:
        operation (Dict[str, Any]): Operation entry with "operation", "operands"
                                    and, for scale, "factor".
        vectors (Dict[str, Vector]): Vectors available as operands.

    Returns:
        Vector for add, subtract and scale; bool for equals.

    Raises:
        KeyError: If an operand names an unknown vector.
        VectorError: If the vector arithmetic fails.
    """
    operands = []
    for operand_name in operation["operands"]:
        if operand_name not in vectors:
            raise KeyError(f"Unknown vector: {operand_name}")
        operands.append(vectors[operand_name])

    op = operation["operation"]
    if op == "add":
        return operands[0] + operands[1]
    elif op == "subtract":
        return operands[0] - operands[1]
    elif op == "scale":
        return operands[0] * operation["factor"]
    elif op == "equals":
        return operands[0] == operands[1]
    else:
        raise ValueError(f"Unsupported operation: {op}")

def _describe_result(name: str, operation: str, value: Any) -> Dict[str, Any]:
    if isinstance(value, Vector):
        return {
            "name": name,
            "operation": operation,
            "vector": value.to_string(),
            "coordinates": list(value.coordinates),
            "dimension": value.dimension
        }
    return {"name": name, "operation": operation, "value": value}

def process_input_file(input_path: str, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Process a batch file of vectors and operations.

    Args:
        input_path (str): Path to the input JSON configuration file.
        options (dict, optional): Processing options:
            - verbose (bool): Print progress to stdout
            - output_path (str): Write the results as JSON to this path
            - log_level (str), log_path (str): Override the logging section

    Returns:
        dict: Results with per-operation entries, counts, timing and metadata.
              On a configuration failure the dict carries an "error" key.
    """
    options = options or {}
    verbose = options.get("verbose", False)
    output_path = options.get("output_path")
    start_time = time.time()

    try:
        config = process_config_file(input_path)
        vectors = build_vectors(config["vectors"])
    except ValueError as e:
        logger.error(f"Error in processing: {str(e)}")
        return {
            "error": str(e),
            "vectors_processed": 0,
            "operations_performed": 0,
            "errors": 0,
            "processing_time": time.time() - start_time,
            "results": [],
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "input_path": input_path,
                "error": True
            }
        }

    logging_options = config["logging_options"]
    for key in ("log_level", "log_path"):
        if options.get(key):
            logging_options[key] = options[key]
    logger_config = create_logger_config(logging_options)
    main_logger = logger_config["main"]

    main_logger.info(f"Loaded {len(vectors)} input vectors")

    results = []
    error_count = 0
    for operation in config["operations"]:
        name = operation["name"]
        op = operation["operation"]
        try:
            value = evaluate_operation(operation, vectors)
        except (KeyError, VectorError) as e:
            message = e.args[0] if isinstance(e, KeyError) else str(e)
            main_logger.warning(f"Operation '{name}' ({op}) failed: {message}")
            results.append({"name": name, "operation": op, "error": message})
            error_count += 1
            continue

        log_vector_operation(
            logger_config,
            op,
            {operand: vectors[operand] for operand in operation["operands"]},
            {name: value},
            {"factor": operation["factor"]} if "factor" in operation else None
        )
        results.append(_describe_result(name, op, value))

        if isinstance(value, Vector):
            vectors[name] = value

        if verbose:
            print(f"{name} = {value}")

    processing_time = time.time() - start_time
    log_performance_metrics(
        logger_config,
        "process_input_file",
        processing_time,
        {"operations": len(results), "errors": error_count}
    )

    final_results = {
        "vectors_processed": len(config["vectors"]),
        "operations_performed": len(results) - error_count,
        "errors": error_count,
        "processing_time": processing_time,
        "results": results,
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "input_path": input_path
        }
    }

    if output_path:
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(final_results, f, indent=2)

        if verbose:
            print(f"Saved results to {output_path}")

    if verbose:
        print(f"Processing completed in {processing_time:.2f} seconds")

    return final_results

def main(argv=None) -> int:
    import argparse
    from dotenv import load_dotenv

    load_dotenv()

    parser = argparse.ArgumentParser(description="Vecthrust Batch Vector Processing")
    parser.add_argument("input_file", help="Path to the input JSON configuration file")
    parser.add_argument("--output", "-o", help="Path to save the output JSON results")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    args = parser.parse_args(argv)

    options = {
        "verbose": args.verbose,
        "output_path": args.output,
        "log_level": os.environ.get("VECTHRUST_LOG_LEVEL"),
        "log_path": os.environ.get("VECTHRUST_LOG_PATH")
    }

    results = process_input_file(args.input_file, options)
    if "error" in results:
        print(f"Error: {results['error']}")
        return 1

    if not args.output:
        print(json.dumps(results, indent=2))
    return 1 if results["errors"] else 0

if __name__ == "__main__":
    raise SystemExit(main())
