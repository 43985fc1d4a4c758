import logging
import os
import sys

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def validate_ops_rules(rules: Rules, env: dict[str, str] | None = None) -> None:
    """
    Validate operational requirements before startup.
    """
    environ = os.environ if env is None else env

    # 1. Check Required Env
    missing = [env_var for env_var in rules.ops.required_env if env_var not in environ]

    if missing:
        print(
            f"CRITICAL: Missing required environment variables: {', '.join(missing)}",
            file=sys.stderr,
        )
        sys.exit(1)

    # 2. CMS endpoints must be absolute
    for name, url in (("cms.base_url", rules.cms.base_url), ("cms.public_url", rules.cms.public_url)):
        if not url.startswith(("http://", "https://")):
            print(f"CRITICAL: {name} must be an http(s) URL, got {url!r}", file=sys.stderr)
            sys.exit(1)

    logger.info("Configuration validated (CMS: %s)", rules.cms.base_url)
