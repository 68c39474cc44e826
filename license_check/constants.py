"""Constants for license-check."""

# Exit codes
EXIT_SUCCESS = 0  # Every dependency passed, or the run was skipped offline
EXIT_FAILURE = 1  # A dependency failed license validation
EXIT_ERROR = 2  # Invalid configuration or input

DEFAULT_HOST = "http://complykit.org/api/license-check/"

# Value of ``licenseDeclared`` for an approved dependency
DECLARED_OK = "ok"

NO_LICENSE_FOUND = "NO LICENSE FOUND"

BANNER_RULE = "-" * 72
BANNER_TITLE = "VALIDATING LICENSES"

OFFLINE_NOTICE = "currently offline, skipping this step"

OSI_NOTICE = (
    "This plugin will validate that the artifacts you're using have a license "
    "file. When the plugin recognizes that an artifact is one of the Open "
    "Source Initiative (OSI) approved licenses, it will give you the URL for "
    "the license. This plugin and its author are not associated with the OSI."
)

# Configuration files discovered in the working directory, in order
CONFIG_FILE_NAMES = [".license-check.yaml", ".license-check.yml"]
