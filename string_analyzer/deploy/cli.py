# This file is the command-line entrypoint for remote deployment.
# It merges CLI flags over DEPLOY_* environment settings and mirrors all log output to a file.

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from string_analyzer.common.logging import add_file_handler, configure_logging
from string_analyzer.deploy.deploy_config import load_deploy_config
from string_analyzer.deploy.deployer import Deployer
from string_analyzer.deploy.runner import COMMAND_LOGGER_NAME, DeployError

LOGGER = logging.getLogger("deploy")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Deploy this repository to a remote host with Docker and Nginx"
    )
    parser.add_argument(
        "--cleanup",
        action="store_true",
        help="Remove deployed containers, images, app folder and Nginx site instead of deploying",
    )
    parser.add_argument("--git-repo", dest="git_repo", help="e.g. github.com/your/repo.git")
    parser.add_argument("--token", dest="personal_access_token", help="Personal access token used for cloning")
    parser.add_argument("--branch", dest="branch_name")
    parser.add_argument("--remote-user", dest="remote_user")
    parser.add_argument("--remote-host", dest="remote_host")
    parser.add_argument("--ssh-key", dest="ssh_key", type=Path)
    parser.add_argument("--app-port", dest="app_port", type=int)
    parser.add_argument("--container-port", dest="container_port", type=int)
    parser.add_argument("--health-path", dest="health_path", help="Path checked over HTTP after deployment")
    parser.add_argument("--app-name", dest="app_name")
    parser.add_argument("--remote-app-dir", dest="remote_app_dir")
    parser.add_argument("--checkout-dir", dest="local_checkout_dir", type=Path)
    parser.add_argument("--log-file", dest="log_file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    overrides = {key: value for key, value in vars(args).items() if key != "cleanup"}
    overrides["cleanup"] = args.cleanup or None
    try:
        config = load_deploy_config(overrides)
    except ValidationError as exc:
        LOGGER.error("Invalid deployment configuration: %s", exc)
        return 2

    # Command lines and their output go to the log file only; the console keeps step summaries.
    handler = add_file_handler(config.log_file)
    handler.setLevel(logging.DEBUG)
    command_logger = logging.getLogger(COMMAND_LOGGER_NAME)
    previous_level, previous_propagate = command_logger.level, command_logger.propagate
    command_logger.addHandler(handler)
    command_logger.setLevel(logging.DEBUG)
    command_logger.propagate = False
    try:
        Deployer(config=config).run()
    except DeployError as exc:
        LOGGER.error("Deployment failed: %s. See %s for details.", exc, config.log_file)
        return 1
    finally:
        command_logger.removeHandler(handler)
        command_logger.setLevel(previous_level)
        command_logger.propagate = previous_propagate
        logging.getLogger().removeHandler(handler)
        handler.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
