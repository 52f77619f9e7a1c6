"""Configuration for favicon-discovery"""

from pathlib import Path

from dynaconf import Dynaconf, Validator

# Validators for favicon-discovery settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    # Set an upper bound on timeouts as one stalled candidate holds up the whole run.
    Validator("http.timeout_sec", is_type_of=float, gt=0, lte=60.0, must_exist=True),
    Validator("http.connect_timeout_sec", is_type_of=float, gt=0, lte=60.0, must_exist=True),
    Validator("http.max_connections", is_type_of=int, gte=1, must_exist=True),
    Validator("http.follow_redirects", is_type_of=bool, must_exist=True),
    Validator("http.user_agent", is_type_of=str, must_exist=True),
]

# `root_path` = Locate the settings files next to this module.
# `envvar_prefix` = Export envvars with `export FAVICON_DISCOVERY_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `testing` etc.
# `env_switcher` = Switch environments by `export FAVICON_DISCOVERY_ENV=testing`.
#                  Default: `development`.
# `merge_enabled` = Merge environment tables into the defaults instead of replacing them.
# `validators` = Define validators for the settings.

settings = Dynaconf(
    root_path=str(Path(__file__).parent),
    envvar_prefix="FAVICON_DISCOVERY",
    settings_files=[
        "default.toml",
        "testing.toml",
    ],
    environments=True,
    env_switcher="FAVICON_DISCOVERY_ENV",
    merge_enabled=True,
    validators=_validators,
)
