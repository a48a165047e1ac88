# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This is the main entrypoint to run pommeta."""

import argparse
import json
import logging
import os
import sys
from importlib import metadata as importlib_metadata

from pommeta.config.defaults import create_defaults, defaults, load_defaults
from pommeta.errors import PomMetadataError
from pommeta.maven.project_metadata import MetadataNames, load_project_metadata

logger: logging.Logger = logging.getLogger(__name__)


def extract(extract_args: argparse.Namespace) -> int:
    """Extract the project metadata of the given POM files and write it as JSON.

    Returns
    -------
    int
        ``os.EX_OK`` if all POM files were processed, ``os.EX_DATAERR`` otherwise.
    """
    names = MetadataNames.from_config(defaults)
    results = []
    failed = False
    for pom_path in extract_args.pom_files:
        try:
            project_metadata = load_project_metadata(pom_path, names)
        except PomMetadataError as error:
            logger.error(error)
            failed = True
            continue

        logger.info("Extracted the metadata of %s.", project_metadata.identity)
        results.append(project_metadata.to_dict())

    output = json.dumps(results, indent=4)
    if extract_args.output:
        try:
            with open(extract_args.output, "w", encoding="utf-8") as file:
                file.write(output)
        except OSError as error:
            logger.error("Failed to write the metadata to %s: %s", extract_args.output, error)
            return os.EX_CANTCREAT
        logger.info("The metadata is stored in %s", os.path.relpath(extract_args.output, os.getcwd()))
    else:
        print(output)  # noqa: T201

    return os.EX_DATAERR if failed else os.EX_OK


def dump_defaults(dump_args: argparse.Namespace) -> int:
    """Dump the default configuration file in the given directory."""
    if not create_defaults(dump_args.output_dir, os.getcwd()):
        return os.EX_CANTCREAT
    return os.EX_OK


def perform_action(action_args: argparse.Namespace) -> None:
    """Perform the indicated action of pommeta."""
    match action_args.action:
        case "extract":
            sys.exit(extract(action_args))
        case "dump-defaults":
            sys.exit(dump_defaults(action_args))
        case _:
            logger.error("Unexpected action %s", action_args.action)
            sys.exit(os.EX_USAGE)


def main(argv: list[str] | None = None) -> None:
    """Execute pommeta as a standalone command-line tool.

    Parameters
    ----------
    argv: list[str] | None
        Command-line arguments.
        If ``argv`` is ``None``, argparse automatically looks at ``sys.argv``.
        Hence, we set ``argv = None`` by default.
    """
    main_parser = argparse.ArgumentParser(prog="pommeta")

    main_parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {importlib_metadata.version('pommeta')}",
        help="Show pommeta's version number and exit",
    )

    main_parser.add_argument(
        "-v",
        "--verbose",
        help="Run pommeta with more debug logs",
        action="store_true",
    )

    main_parser.add_argument(
        "-dp",
        "--defaults-path",
        default="",
        help="The path to the defaults configuration file.",
    )

    # Add sub parsers for each action.
    sub_parser = main_parser.add_subparsers(dest="action", help="Run pommeta <action> --help for help")

    extract_parser = sub_parser.add_parser(name="extract")

    extract_parser.add_argument(
        "pom_files",
        nargs="+",
        help="The paths to the POM files to extract the metadata from.",
    )

    extract_parser.add_argument(
        "-o",
        "--output",
        required=False,
        type=str,
        default="",
        help="The path to the JSON output file. If not set, the metadata is printed to stdout.",
    )

    dump_defaults_parser = sub_parser.add_parser(name="dump-defaults")

    dump_defaults_parser.add_argument(
        "-o",
        "--output-dir",
        default=os.getcwd(),
        help="The directory where defaults.ini will be created.",
    )

    args = main_parser.parse_args(argv)

    if not args.action:
        main_parser.print_help()
        sys.exit(os.EX_USAGE)

    if args.verbose:
        log_level = logging.DEBUG
        log_format = "%(asctime)s [%(name)s:%(funcName)s:%(lineno)d] [%(levelname)s] %(message)s"
    else:
        log_level = logging.INFO
        log_format = "%(asctime)s [%(levelname)s] %(message)s"

    # Logs go to stderr so that the JSON printed to stdout stays parsable.
    logging.basicConfig(format=log_format, handlers=[logging.StreamHandler(sys.stderr)], force=True, level=log_level)

    # Load the default values from defaults.ini files.
    if not load_defaults(args.defaults_path):
        logger.error("Exiting because the defaults configuration could not be loaded.")
        sys.exit(os.EX_NOINPUT)

    perform_action(args)


if __name__ == "__main__":
    main()
