import logging
import os
from typing import List, Optional, Union

from awswire.constants import (
    FALSE_STRINGS,
    LOG_LEVELS,
    S3_CLASSIC_REGION_LOCATION,
    TRACE_LOG_LEVELS,
    TRUE_STRINGS,
)


def eval_log_type(env_var_name: str) -> Union[str, bool]:
    """Get the log type from environment variable"""
    log_type = os.environ.get(env_var_name, "").lower().strip()
    return log_type if log_type in LOG_LEVELS else False


def parse_boolean_env(env_var_name: str) -> Optional[bool]:
    """Parse the value of the given env variable and return True/False, or None if it is not a boolean value."""
    value = os.environ.get(env_var_name, "").lower().strip()
    if value in TRUE_STRINGS:
        return True
    if value in FALSE_STRINGS:
        return False
    return None


def is_env_true(env_var_name: str) -> bool:
    """Whether the given environment variable has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() in TRUE_STRINGS


def is_env_not_false(env_var_name: str) -> bool:
    """Whether the given environment variable is empty or has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() not in FALSE_STRINGS


def load_environment(profiles: str = None, env=os.environ) -> List[str]:
    """Loads the environment variables from ~/.awswire/{profile}.env, for each profile listed in the profiles.
    :param env: environment to load profile to. Defaults to `os.environ`
    :param profiles: a comma separated list of profiles to load (defaults to "default")
    :returns str: the list of the actually loaded profiles (might be the fallback)
    """
    if not profiles:
        profiles = "default"

    profiles = [profile.strip() for profile in profiles.split(",")]
    environment = {}
    import dotenv

    for profile in profiles:
        path = os.path.join(CONFIG_DIR, f"{profile}.env")
        if not os.path.exists(path):
            continue
        environment.update(dotenv.dotenv_values(path))

    for k, v in environment.items():
        # we do not want to override the environment
        if k not in env and v is not None:
            env[k] = v

    return profiles


# the configuration profile to load
CONFIG_PROFILE = os.environ.get("CONFIG_PROFILE", "").strip()

# host configuration directory
CONFIG_DIR = os.environ.get("CONFIG_DIR", os.path.expanduser("~/.awswire"))

# keep this on top to populate environment
LOADED_PROFILES = load_environment(CONFIG_PROFILE)

# whether to enable verbose debug logging
AWSWIRE_LOG = eval_log_type("AWSWIRE_LOG")
DEBUG = is_env_true("DEBUG") or AWSWIRE_LOG in TRACE_LOG_LEVELS

# whether request parameters are validated against the input shape before they are marshalled
VALIDATE_REQUESTS = is_env_not_false("VALIDATE_REQUESTS")

# whether the service models bundled with botocore are used in addition to the builtin ones
USE_BOTOCORE_SPECS = is_env_true("USE_BOTOCORE_SPECS")

# path to a JSON patch file which replaces the builtin spec patches
SPEC_PATCHES_FILE = os.environ.get("SPEC_PATCHES_FILE", "").strip()

# location reported for S3 buckets which do not return a location constraint
S3_DEFAULT_BUCKET_LOCATION = (
    os.environ.get("S3_DEFAULT_BUCKET_LOCATION", "").strip() or S3_CLASSIC_REGION_LOCATION
)

# default encoding used to convert strings to byte arrays
DEFAULT_ENCODING = "utf-8"


def is_trace_logging_enabled():
    if AWSWIRE_LOG:
        log_level = str(AWSWIRE_LOG).upper()
        return log_level.lower() in TRACE_LOG_LEVELS
    return False


# set log levels immediately, but will be overwritten later by setup_logging
if DEBUG:
    logging.getLogger("").setLevel(logging.DEBUG)
    logging.getLogger("awswire").setLevel(logging.DEBUG)
