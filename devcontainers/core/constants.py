"""Constants used throughout the devcontainers package."""


# Environment variable selecting the optional field groups of the default schema
FEATURES_ENV_VAR = "DEVCONTAINERS_FEATURES"

# Optional field group names
ALLOW_UNKNOWN_FIELDS = "allow-unknown-fields"
IDE_CUSTOMIZATIONS = "ide-customizations"
COMPOSE_INTEGRATION = "compose-integration"

FEATURE_NAMES = (
    ALLOW_UNKNOWN_FIELDS,
    IDE_CUSTOMIZATIONS,
    COMPOSE_INTEGRATION,
)

# Locations searched for a devcontainer.json, relative to the project root
DEVCONTAINER_DIR_NAME = ".devcontainer"
DEVCONTAINER_FILE_NAME = "devcontainer.json"
DEVCONTAINER_PATHS = [
    ".devcontainer/devcontainer.json",
    ".devcontainer.json",
]

# Highest TCP/UDP port number accepted for a forwarded port
MAX_PORT = 65535

# Indentation used when writing documents back out
DEFAULT_INDENT = 2
