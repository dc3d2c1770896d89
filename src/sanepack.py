"""sanepack - packaging scaffolding generator

Reads a package descriptor and writes the files a packaging toolchain needs
(e.g. a ``debian/`` directory), then tells the user how to finish the build.

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from constants import ExitCodes, Constants
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import resolve_config, resolve_log_level
from descriptor import create_descriptor_file, load_descriptor
from errors import (
    ConfigError,
    DescriptorError,
    HistoryUnavailableError,
    MissingFieldError,
    RenderError,
    TemplateNotFoundError,
    UnsupportedTargetError,
)
from backends import get_backend

logger = logging.getLogger(__name__)


def create_template(path):
    """Writes a template descriptor file.

    Args:
        path (str): Descriptor file to write.

    Returns:
        int: Exit code
    """
    logger.debug("Trying to write template file %r", path)
    try:
        create_descriptor_file(path)
    except OSError as e:
        logger.error("Failed to write template file: %s", e)
        return ExitCodes.FILE_ERROR.value
    logger.info("Wrote template file %r successfully", path)
    return ExitCodes.SUCCESS.value


def build_framework(args):
    """Loads the descriptor and runs the selected backend.

    Args:
        args (argparse.Namespace): Parsed CLI arguments.

    Returns:
        int: Exit code
    """
    try:
        config = resolve_config(args)
    except ConfigError as e:
        logger.error("%s", e)
        return ExitCodes.FILE_ERROR.value

    logger.debug("Trying to open file: %r", args.FILE)
    try:
        descriptor = load_descriptor(args.FILE)
    except FileNotFoundError as e:
        logger.error("Failed to open %r: %s", args.FILE, e)
        return ExitCodes.FILE_ERROR.value
    except DescriptorError as e:
        logger.error("Could not decode project: %s", e)
        return ExitCodes.FILE_ERROR.value
    except OSError as e:
        logger.error("Failed to read %r: %s", args.FILE, e)
        return ExitCodes.FILE_ERROR.value
    logger.debug("Descriptor loaded for project %r", descriptor.name)

    options = {}
    if config.templates:
        options["template_dir"] = config.templates
    if config.output_dir:
        options["output_dir"] = config.output_dir
    try:
        backend = get_backend(config.target, **options)
    except UnsupportedTargetError as e:
        logger.error("%s", e)
        return ExitCodes.VALIDATION_ERROR.value

    if is_debug_enabled(logger):
        logger.debug(
            "Running backend",
            extra=extra_context(event="function_entry", component="cli",
                                action="framework", target=config.target),
        )
    try:
        backend.framework(descriptor)
    except MissingFieldError as e:
        logger.error("%s", e)
        return ExitCodes.VALIDATION_ERROR.value
    except HistoryUnavailableError as e:
        logger.error("%s", e)
        return ExitCodes.HISTORY_ERROR.value
    except FileExistsError as e:
        logger.error("Output directory already exists: %s", e.filename or e)
        return ExitCodes.OUTPUT_ERROR.value
    except (TemplateNotFoundError, RenderError, OSError) as e:
        logger.error("%s", e)
        return ExitCodes.OUTPUT_ERROR.value

    print(backend.info())
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(resolve_log_level(args), log_file=args.LOG_FILE, quiet=args.QUIET)
    logger.info("Starting sanepack version %s in %s", Constants.VERSION, os.getcwd())

    if args.CREATE:
        code = create_template(args.FILE)
    else:
        code = build_framework(args)
    sys.exit(code)


if __name__ == "__main__":
    main()
