"""CLI entrypoints for inspecting loader roots."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, LoaderConfig, load_config
from .errors import InvalidRootError
from .loader import PathResourceLoader
from .logging import configure_logging, get_logger
from .privileged import UNRESTRICTED

_LOGGER = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resloader",
        description="Inspect the classes, resources and libraries a directory root serves.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to .resloader.yml (defaults to the current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def _command(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("root", help="Root directory or a root name from .resloader.yml.")
        return sub

    _command("paths", "List every directory below the root.")
    list_parser = _command("list", "List resources below a start path.")
    list_parser.add_argument("start", nargs="?", default="", help="Start path inside the root.")
    list_parser.add_argument(
        "-r", "--recursive", action="store_true", help="Descend into subdirectories."
    )
    _command("show", "Print the bytes of a resource.").add_argument("name")
    _command("class", "Describe a compiled class file.").add_argument("file")
    _command("package", "Print the manifest attributes of a package.").add_argument("name")
    _command("library", "Locate a native library.").add_argument("name")
    _command("location", "Print the root URI.")
    return parser


def _open_loader(root: str, config: LoaderConfig) -> PathResourceLoader:
    configured = config.find_root(root)
    if configured is not None:
        name, path = configured.name, configured.path
    else:
        path = Path(root)
        name = path.name or root
    return PathResourceLoader(
        name, path, UNRESTRICTED, search_paths=config.native.search_paths
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for resloader commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config) if args.config else Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    configure_logging(config.logging, verbose=bool(args.verbose))

    try:
        loader = _open_loader(args.root, config)
    except InvalidRootError as exc:
        parser.exit(1, f"{exc}\n")
    _LOGGER.debug("Opened %r", loader)

    if args.command == "paths":
        for path in loader.get_paths():
            print(path or ".")
    elif args.command == "list":
        for resource in loader.iterate_resources(args.start, args.recursive):
            print(resource.name)
    elif args.command == "show":
        resource = loader.get_resource(args.name)
        if resource is None:
            parser.exit(1, f"Resource not found: {args.name}\n")
        sys.stdout.buffer.write(resource.read_bytes())
        sys.stdout.flush()
    elif args.command == "class":
        try:
            spec = loader.get_class_spec(args.file)
        except OSError as exc:
            parser.exit(1, f"Cannot read {args.file}: {exc}\n")
        if spec is None:
            parser.exit(1, f"Class file not found: {args.file}\n")
        print(f"{args.file}: {len(spec.content)} bytes from {spec.provenance.location}")
    elif args.command == "package":
        try:
            spec = loader.get_package_spec(args.name)
        except OSError as exc:
            parser.exit(1, f"Cannot read package {args.name}: {exc}\n")
        for field_name, value in vars(spec).items():
            if value is not None:
                print(f"{field_name}: {value}")
        print(f"sealed: {str(spec.sealed).lower()}")
    elif args.command == "library":
        library = loader.get_library(args.name)
        if library is None:
            parser.exit(1, f"Native library not found: {args.name}\n")
        print(library)
    elif args.command == "location":
        print(loader.get_location())
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
