# logger_setup.py

import logging
import os

from config import load_config

def setup_logging(config=None, config_path='config.json', log_root='runs'):
    """
    Attaches console and per-run file output to the "particle_collider" logger.

    The logger does not propagate, so records from numba or pygame that reach
    the root logger stay out of the simulation log. Calling this again swaps
    the old handlers for new ones.

    Data Contract:
    - Inputs:
        - config (dict | None) - Loaded configuration; read from config_path when None.
        - config_path (str) - Where to find config.json.
        - log_root (str) - Parent directory of the per-run folders.
    - Outputs: The configured logger.
    - Side Effects: Creates <log_root>/<run_id>/ and opens simulation.log in it.
    - Invariants: config holds 'run_id' and a 'logging' section with 'level' and 'format'.
    """
    if config is None:
        config = load_config(config_path)

    run_id = config['run_id']
    log_config = config['logging']

    logger = logging.getLogger("particle_collider")
    logger.setLevel(log_config['level'])
    logger.propagate = False

    log_dir = os.path.join(log_root, run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'simulation.log')

    formatter = logging.Formatter(log_config['format'])
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    logger.info(f"Logging ready for run {run_id}, writing to {log_file}")
    return logger
