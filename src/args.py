"""Argument parsing functionality for sanepack."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="sanepack",
        description=(
            "sanepack - generate packaging scaffolding from a package descriptor"
        ),
        add_help=True,
    )

    parser.add_argument("-f", "--file",
                        dest="FILE",
                        help=f"Package descriptor to read (default: {Constants.DESCRIPTOR_FILE})",
                        action="store", type=str,
                        default=Constants.DESCRIPTOR_FILE)
    parser.add_argument("-c", "--create",
                        dest="CREATE",
                        help="Write a template descriptor to --file and exit",
                        action="store_true")
    parser.add_argument("-t", "--target",
                        dest="TARGET",
                        help="Packaging target, i.e: debian",
                        action="store", type=str.lower,
                        choices=Constants.SUPPORTED_TARGETS)
    parser.add_argument("--templates",
                        dest="TEMPLATES",
                        help="Template directory (contains one subdirectory per target)",
                        action="store", type=str)
    parser.add_argument("-o", "--output-dir",
                        dest="OUTPUT_DIR",
                        help="Directory to create for the packaging files (default: the target's convention)",
                        action="store", type=str)
    parser.add_argument("--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store", type=str)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("-v", "--verbose",
                        dest="VERBOSE",
                        help="Enable verbose log output (INFO)",
                        action="store_true")
    parser.add_argument("--debug",
                        dest="DEBUG",
                        help="Enable debugging log output",
                        action="store_true")
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not log to console.",
                        action="store_true")
    parser.add_argument("--version",
                        action="version",
                        version=f"%(prog)s {Constants.VERSION}")

    return parser.parse_args(argv)
