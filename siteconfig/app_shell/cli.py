import argparse
import json
import logging
import sys

import yaml

from siteconfig.components.site_config import LoadSiteConfigInput, run_load
from siteconfig.components.site_config.adapters import default_environment, default_filesystem
from siteconfig.core.services.site_config import ConfigStore, ValidationError, Violation

logger = logging.getLogger("cli")


def _report(violations: list[Violation]) -> None:
    for v in violations:
        print(f"{v.field}: [{v.code}] {v.message}", file=sys.stderr)


def load_store(args: argparse.Namespace) -> ConfigStore | None:
    """Load the config file into a fresh store, or report and return None."""
    result = run_load(
        LoadSiteConfigInput(config_path=args.path, apply_env=not args.no_env),
        fs=default_filesystem,
        env=default_environment,
    )
    if not result.success:
        _report(result.errors)
        return None

    store = ConfigStore()
    try:
        store.load(result.raw)
    except ValidationError as e:
        logger.error(f"Invalid site config in {result.source}")
        _report(e.violations)
        return None
    return store


def handle_check(args: argparse.Namespace) -> int:
    store = load_store(args)
    if store is None:
        return 1

    config = store.get()
    print(f"OK: {config.title} by {config.author}")
    return 0


def handle_show(args: argparse.Namespace) -> int:
    store = load_store(args)
    if store is None:
        return 1

    raw = store.get().to_raw()
    if args.format == "json":
        print(json.dumps(raw, indent=2))
    else:
        print(yaml.safe_dump(raw, sort_keys=False), end="")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Site config CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "path", nargs="?", default=None, help="Config file (default: SITE_CONFIG_PATH or site.yaml)"
    )
    common.add_argument("--no-env", action="store_true", help="Ignore SITE_* overrides")

    # check
    subparsers.add_parser("check", parents=[common], help="Validate the site config")

    # show
    show_parser = subparsers.add_parser(
        "show", parents=[common], help="Print the resolved site config"
    )
    show_parser.add_argument("--format", choices=["yaml", "json"], default="yaml")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "check":
        return handle_check(args)
    elif args.command == "show":
        return handle_show(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
