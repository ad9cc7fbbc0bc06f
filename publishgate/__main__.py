# This file is part of publishgate - publish security gate
# Copyright © 2011-2017 Guillaume Ayoub
# Copyright © 2017-2019 Unrud <unrud@outlook.com>
# Copyright © 2026 publishgate contributors
#
# This library is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with publishgate.  If not, see <http://www.gnu.org/licenses/>.

"""
publishgate executable module.

This module can be executed from a command line with
``$python -m publishgate``. It runs the publish item pipeline for the
given items without writing anything and prints the result per item.

"""

import argparse
import contextlib
import os
import sys
from typing import List, Optional, Sequence, cast

from publishgate import VERSION, config, create_pipeline, log, pipeline
from publishgate import storage, types, utils
from publishgate.log import logger


def _build_parser() -> argparse.ArgumentParser:
    # Configuration options are stored in dest with format "c:SECTION:OPTION"
    parser = argparse.ArgumentParser(
        prog="publishgate", usage="%(prog)s [OPTIONS] ITEM_ID...",
        allow_abbrev=False)

    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument("-C", "--config",
                        help="use specific configuration files", nargs="*")
    parser.add_argument("-D", "--debug", action="store_const", const="debug",
                        dest="c:logging:level", default=argparse.SUPPRESS,
                        help="print debug information")
    parser.add_argument("-u", "--user", required=True,
                        help="name of the publishing user")
    parser.add_argument("-g", "--group", action="append", default=[],
                        dest="groups", help="group of the publishing user")
    parser.add_argument("--deep", action="store_true",
                        help="publish the children of the items too")
    parser.add_argument("item_ids", nargs="+", metavar="ITEM_ID",
                        help="id of an item to publish")

    for section, section_data in config.DEFAULT_CONFIG_SCHEMA.items():
        assert ":" not in section  # check field separator
        group_description = None
        if "type" in section_data:
            group_description = "backend specific options omitted"
        group = parser.add_argument_group(section, group_description)
        for option, data in section_data.items():
            if option.startswith("_"):
                continue
            kwargs = data.copy()
            long_name = "--%s-%s" % (section, option.replace("_", "-"))
            args: List[str] = list(kwargs.pop("aliases", ()))
            args.append(long_name)
            kwargs["dest"] = "c:%s:%s" % (section, option)
            kwargs["metavar"] = "VALUE"
            kwargs["default"] = argparse.SUPPRESS
            del kwargs["value"]
            with contextlib.suppress(KeyError):
                del kwargs["internal"]

            if kwargs["type"] == bool:
                del kwargs["type"]
                opposite_args = ["--no%s" % long_name[1:]]
                group.add_argument(*args, nargs="?", const="True", **kwargs)
                # Opposite argument
                kwargs["help"] = "do not %s (opposite of %s)" % (
                    kwargs["help"], long_name)
                group.add_argument(*opposite_args, action="store_const",
                                   const="False", **kwargs)
            else:
                del kwargs["type"]
                group.add_argument(*args, **kwargs)
    return parser


def run(argv: Optional[Sequence[str]] = None) -> None:
    """Run the publish item pipeline for the items given on the command
    line."""
    log.setup()

    parser = _build_parser()
    args_ns = parser.parse_args(argv)

    # Preliminary configure logging
    with contextlib.suppress(ValueError):
        log.set_level(config.DEFAULT_CONFIG_SCHEMA["logging"]["level"]["type"](
            vars(args_ns).get("c:logging:level", "")), True)

    # Update configuration according to arguments
    arguments_config: types.MUTABLE_CONFIG = {}
    for key, value in vars(args_ns).items():
        if key.startswith("c:"):
            _, section, option = key.split(":", maxsplit=2)
            arguments_config[section] = arguments_config.get(section, {})
            arguments_config[section][option] = value

    try:
        configuration = config.load(config.parse_compound_paths(
            config.DEFAULT_CONFIG_PATH,
            os.environ.get("PUBLISHGATE_CONFIG"),
            os.pathsep.join(args_ns.config) if args_ns.config is not None
            else None))
        if arguments_config:
            configuration.update(arguments_config, "command line arguments")
    except Exception as e:
        logger.critical("Invalid configuration: %s", e, exc_info=True)
        sys.exit(1)

    # Configure logging
    log.set_level(cast(str, configuration.get("logging", "level")),
                  configuration.get("logging", "backtrace_on_debug"))
    logger.info("Starting publishgate version %s", VERSION)
    logger.debug("Packages: %s", utils.packages_version())

    # Log configuration after logger is configured
    for source, miss in configuration.sources():
        logger.info("%s %s", "Skipped missing/unreadable" if miss
                    else "Loaded", source)

    options = pipeline.PublishOptions(
        user_name=args_ns.user,
        source_database=configuration.get("publishing", "source_database"),
        target_database=configuration.get("publishing", "target_database"),
        groups=frozenset(args_ns.groups),
        deep=args_ns.deep)
    try:
        helper = pipeline.PublishHelper(options, storage.load(configuration))
        publish_pipeline = create_pipeline(configuration)
        results = publish_pipeline.publish(args_ns.item_ids, options, helper)
    except Exception as e:
        logger.critical("An exception occurred during publishing: %s", e,
                        exc_info=True)
        sys.exit(1)

    for item_id, result in results:
        line = "%s %s" % (item_id, result.operation.value)
        if result.explanation:
            line += ": %s" % result.explanation
        print(line)


if __name__ == "__main__":
    run()
