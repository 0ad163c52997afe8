from argparse import ArgumentParser
from .config import write_config


if __name__ == "__main__":
  parser = ArgumentParser(prog='digisurf_config',
                          description='Set runtime configuration before tracking digital surfaces.')
  parser.add_argument('-n', '--no_debug', action='store_true', default=False)
  parser.add_argument('-e', '--exterior', action='store_true', default=False,
                      help="resolve ambiguous configurations with exterior surfel adjacency")
  parser.add_argument('-m', '--max_surfels', type=int, default=10000000)
  parser.add_argument('-l', '--log_level', default="WARNING")

  args = parser.parse_args()
  valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
  log_level = args.log_level.upper()
  assert log_level in valid_levels, f"Invalid log level: {args.log_level}, must be one of {valid_levels}"
  assert args.max_surfels > 0, f"Invalid surfel bound: {args.max_surfels}"
  write_config(debug=not args.no_debug,
               max_surfels=args.max_surfels,
               interior_adjacency=not args.exterior,
               log_level=log_level)
