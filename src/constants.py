"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    VALIDATION_ERROR = 2
    HISTORY_ERROR = 3
    OUTPUT_ERROR = 4


class PackagingTargets(Enum):
    """Packaging targets supported by the program.

    Args:
        Enum (string): Packaging targets supported by the program.
    """

    DEBIAN = "debian"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    VERSION = "0.1.0"
    SUPPORTED_TARGETS = [
        PackagingTargets.DEBIAN.value,
    ]
    DEFAULT_TARGET = PackagingTargets.DEBIAN.value
    DESCRIPTOR_FILE = "sanepack.json"
    YAML_SUFFIXES = (".yml", ".yaml")
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "SANEPACK_LOG_LEVEL"
    ENV_CONFIG = "SANEPACK_CONFIG"

    # Version control queries
    TAG_MATCH_PATTERNS = ["v*", "V*"]
    VERSION_PREFIXES = "vV"

    # Debian target
    DEBIAN_OUTPUT_DIR = "debian"
    DEBIAN_STANDARDS_VERSION = "3.9.3"
    DEBIAN_COMPAT_VERSION = "8"
    DEBIAN_HELPER_DEPENDENCY = "debhelper"
    DEBIAN_DISTRIBUTION = "unstable"
    DEBIAN_URGENCY = "low"
    DEBIAN_RULES_MODE = 0o755
    DEBIAN_INFO = (
        "To complete building the package, invoke:\n"
        "    fakeroot dpkg-buildpackage"
    )

    # Template descriptor placeholders
    PLACEHOLDER_MANPAGE = "path/to/manpage.1"
    PLACEHOLDER_LICENSE = "abbreviated license name (such as GPL 3.0+)"
    PLACEHOLDER_FILE_LICENSE = "GPL 3.0+"
    PLACEHOLDER_BUILD_DEPENDS = "package for your compiler here"
    PLACEHOLDER_DEPENDS = "package(s) required to run this package"
    PLACEHOLDER_DESCRIPTION = "one line description of the project"
    PLACEHOLDER_SECTION = "main"
    PLACEHOLDER_PRIORITY = "optional"
    PLACEHOLDER_ARCHITECTURE = "any"
