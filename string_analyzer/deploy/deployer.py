# This file orchestrates a single deployment run against one remote host.
# Steps run in a fixed order and every step is idempotent, so re-running after a failure is safe.
# Any failing step raises DeployError; the CLI turns that into a non-zero exit code.

from __future__ import annotations

import logging
from pathlib import Path

import requests

from string_analyzer.deploy.deploy_config import DeployConfig
from string_analyzer.deploy.nginx import render_proxy_site
from string_analyzer.deploy.remote_script import REMOTE_NGINX_UPLOAD, REMOTE_SCRIPT, remote_script_args
from string_analyzer.deploy.runner import CommandRunner, DeployError

LOGGER = logging.getLogger("deploy")

DEPLOY_MODE_DOCKERFILE = "dockerfile"
DEPLOY_MODE_COMPOSE = "compose"
HEALTHY_STATUS_CODES = frozenset({200, 301, 302})


class Deployer:
    def __init__(
        self,
        *,
        config: DeployConfig,
        runner: CommandRunner | None = None,
        http_session: requests.Session | None = None,
    ) -> None:
        self.config = config
        self.runner = runner or CommandRunner(secrets=config.secrets())
        self.http_session = http_session or requests.Session()

    def run(self) -> str:
        """Execute the full deployment (or cleanup) and return the deploy mode used."""

        config = self.config
        LOGGER.info("Starting deployment. Log: %s", config.log_file)
        LOGGER.info(
            "Target host: %s, app name: %s, port: %s%s",
            config.remote_host,
            config.app_name,
            config.app_port,
            " (cleanup mode)" if config.cleanup else "",
        )

        self.check_prerequisites()
        checkout = self.sync_repository()
        deploy_mode = self.detect_deploy_mode(checkout)
        self.check_connectivity()
        self.copy_files(checkout)
        self.upload_nginx_config()
        self.run_remote(deploy_mode)

        if config.cleanup:
            LOGGER.info("Cleanup completed on %s", config.remote_host)
            return deploy_mode

        self.validate_remote_endpoint()
        LOGGER.info("Deployment completed successfully. Log saved: %s", config.log_file)
        return deploy_mode

    def check_prerequisites(self) -> None:
        if not self.config.git_repo:
            raise DeployError("Git repository is not set (DEPLOY_GIT_REPO or --git-repo).")
        if not self.config.ssh_key.is_file():
            raise DeployError(f"SSH key not found at {self.config.ssh_key}")

    def sync_repository(self) -> Path:
        checkout = self.config.local_checkout_dir
        if checkout.is_dir():
            LOGGER.info("Updating local repository in %s", checkout)
            self.runner.run(["git", "pull", "origin", self.config.branch_name], cwd=checkout)
        else:
            LOGGER.info("Cloning %s (branch %s)", self.config.git_repo, self.config.branch_name)
            self.runner.run(
                [
                    "git",
                    "clone",
                    "-b",
                    self.config.branch_name,
                    self.config.clone_url(),
                    str(checkout),
                ]
            )
        return checkout

    def detect_deploy_mode(self, checkout: Path) -> str:
        if (checkout / "Dockerfile").is_file():
            mode = DEPLOY_MODE_DOCKERFILE
        elif (checkout / "docker-compose.yml").is_file():
            mode = DEPLOY_MODE_COMPOSE
        else:
            raise DeployError(f"Neither Dockerfile nor docker-compose.yml found in {checkout}")
        LOGGER.info("Deploy mode: %s", mode)
        return mode

    def check_connectivity(self) -> None:
        LOGGER.info("Checking network connectivity to %s", self.config.remote_host)
        result = self.runner.run(["ping", "-c", "2", self.config.remote_host], check=False)
        if not result.ok:
            raise DeployError(f"Cannot reach {self.config.remote_host} (ping failed).")
        LOGGER.info("Host reachable.")

    def copy_files(self, checkout: Path) -> None:
        LOGGER.info("Copying app files to %s:%s", self.config.remote_host, self.config.remote_app_dir)
        self.ssh(f"mkdir -p {self.config.remote_app_dir}")
        entries = sorted(str(path) for path in checkout.iterdir() if not path.name.startswith("."))
        if not entries:
            raise DeployError(f"Nothing to copy from {checkout}")
        self.runner.run(
            [
                "scp",
                *self._ssh_options(),
                "-r",
                *entries,
                f"{self.config.remote_target}:{self.config.remote_app_dir}/",
            ]
        )
        LOGGER.info("Files copied.")

    def upload_nginx_config(self) -> None:
        if self.config.cleanup:
            return
        site = render_proxy_site(server_name=self.config.remote_host, app_port=self.config.app_port)
        self.ssh(f"cat > {REMOTE_NGINX_UPLOAD}", input_text=site)
        LOGGER.info("Nginx site uploaded to %s", REMOTE_NGINX_UPLOAD)

    def run_remote(self, deploy_mode: str) -> None:
        LOGGER.info("Running deployment commands on remote host")
        args = remote_script_args(
            app_name=self.config.app_name,
            app_port=self.config.app_port,
            deploy_mode=deploy_mode,
            cleanup=self.config.cleanup,
            remote_app_dir=self.config.remote_app_dir,
            docker_network=self.config.docker_network,
            container_port=self.config.container_port,
            health_path=self.config.health_path,
        )
        self.runner.run(
            ["ssh", *self._ssh_options(), self.config.remote_target, "bash", "-s", "--", *args],
            input_text=REMOTE_SCRIPT,
        )

    def validate_remote_endpoint(self) -> None:
        url = f"http://{self.config.remote_host}{self.config.health_path}"
        LOGGER.info("Performing remote accessibility check: %s", url)
        try:
            response = self.http_session.get(
                url,
                timeout=self.config.http_timeout_seconds,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            raise DeployError(f"Remote endpoint not responding: {url} ({exc})") from exc

        if response.status_code not in HEALTHY_STATUS_CODES:
            raise DeployError(f"Remote endpoint {url} answered with status {response.status_code}")
        LOGGER.info("Remote endpoint responsive: %s", url)

    def ssh(self, command: str, *, input_text: str | None = None) -> None:
        self.runner.run(
            ["ssh", *self._ssh_options(), self.config.remote_target, command],
            input_text=input_text,
        )

    def _ssh_options(self) -> list[str]:
        return ["-i", str(self.config.ssh_key), "-o", "BatchMode=yes"]
