import os
import logging
import numpy as np
from json import dumps
from json import loads


def get_config_filepath():
  if "DIGISURF_CONFIG" in os.environ:
    return os.environ["DIGISURF_CONFIG"]
  return os.path.join(os.getcwd(), "config.json")


def write_config(debug=True,
                 max_surfels=10000000,
                 interior_adjacency=True,
                 log_level="WARNING"):
  config_struct = {"debug": debug,
                   "max_surfels": max_surfels,
                   "interior_adjacency": interior_adjacency,
                   "log_level": log_level}
  with open(get_config_filepath(), "w") as config_file:
    config_file.write(dumps(config_struct, indent=2))


def parse_config_file():
  config_filename = get_config_filepath()
  if not os.path.isfile(config_filename):
    print("Config file is not written, writing default config file as fallback")
    write_config()
  with open(config_filename, "r") as f:
    config_vars = loads(f.read())
  return config_vars


def configure_logging(level):
  """
  Attach a single stream handler to the package logger.

  Parameters
  ----------
  level : `str` or `int`
      Logging level understood by `logging.Logger.setLevel`.

  Returns
  -------
  logger : `logging.Logger`
      The `digisurf` logger.
  """
  logger = logging.getLogger("digisurf")
  if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
  logger.setLevel(level)
  return logger


config_vars = parse_config_file()

DEBUG = config_vars.get("debug", True)

max_surfels = int(config_vars.get("max_surfels", 10000000))
interior_adjacency = config_vars.get("interior_adjacency", True)
log_level = config_vars.get("log_level", "WARNING").upper()

configure_logging(log_level)
