# This file holds the bash program executed on the remote host over `ssh ... bash -s`.
# Positional arguments carry the per-deploy values so the script text itself stays constant.

from __future__ import annotations

from string_analyzer.deploy.nginx import NOT_FOUND_SITE

REMOTE_NGINX_UPLOAD = "~/nginx_config.tmp"

_REMOTE_SCRIPT_TEMPLATE = r"""set -e
set -o pipefail

APP_NAME="$1"
APP_PORT="$2"
DEPLOY_MODE="$3"
CLEANUP_MODE="$4"
REMOTE_APP_DIR="${5/#\~/$HOME}"
DOCKER_NETWORK="$6"
CONTAINER_PORT="$7"
HEALTH_PATH="$8"

log() { echo "$(date '+%Y-%m-%d %H:%M:%S') | remote | $1"; }

log "starting on host $(hostname)"

sudo apt-get update -y
sudo apt-get install -y docker.io docker-compose nginx curl
sudo systemctl enable --now docker
sudo systemctl enable --now nginx

if [ "$CLEANUP_MODE" = "true" ]; then
  log "cleanup: removing containers, images, networks, app folder and nginx site"
  sudo docker ps -aq | xargs -r sudo docker stop || true
  sudo docker ps -aq | xargs -r sudo docker rm || true
  sudo docker images -q | xargs -r sudo docker rmi -f || true
  sudo docker network prune -f || true
  sudo rm -rf "$REMOTE_APP_DIR" || true
  if [ -f /etc/nginx/sites-available/default ]; then
    sudo tee /etc/nginx/sites-available/default >/dev/null <<'NGCONF'
__NOT_FOUND_SITE__NGCONF
    sudo systemctl restart nginx || true
  fi
  log "cleanup complete"
  exit 0
fi

if sudo docker ps -a --format '{{.Names}}' | grep -q "^${APP_NAME}$"; then
  log "removing existing container ${APP_NAME}"
  sudo docker stop "${APP_NAME}" || true
  sudo docker rm "${APP_NAME}" || true
fi

if [ -n "$(sudo docker images -q "${APP_NAME}")" ]; then
  log "removing existing image ${APP_NAME}"
  sudo docker rmi -f "${APP_NAME}" || true
fi

if sudo docker network ls --format '{{.Name}}' | grep -q "^${DOCKER_NETWORK}$"; then
  log "docker network ${DOCKER_NETWORK} exists"
else
  log "creating docker network ${DOCKER_NETWORK}"
  sudo docker network create "${DOCKER_NETWORK}"
fi

cd "$REMOTE_APP_DIR" || { log "ERROR: app dir $REMOTE_APP_DIR not found"; exit 1; }

case "$DEPLOY_MODE" in
  dockerfile)
    log "building image ${APP_NAME}"
    sudo docker build -t "${APP_NAME}" .
    log "running container ${APP_NAME}"
    sudo docker run -d --restart unless-stopped --name "${APP_NAME}" \
      --network "${DOCKER_NETWORK}" -p "${APP_PORT}:${CONTAINER_PORT}" "${APP_NAME}" >/dev/null
    ;;
  compose)
    log "deploying with docker-compose"
    sudo docker-compose down || true
    sudo docker-compose up -d --build
    ;;
  *)
    log "ERROR: unknown deploy mode ${DEPLOY_MODE}"
    exit 1
    ;;
esac

if [ -f ~/nginx_config.tmp ]; then
  sudo mv ~/nginx_config.tmp /etc/nginx/sites-available/default
  sudo nginx -t
  sudo systemctl restart nginx
  log "nginx configured and restarted"
else
  log "no nginx_config.tmp uploaded, skipping nginx"
fi

sudo systemctl is-active --quiet docker || { log "ERROR: docker is not active"; exit 1; }
sudo docker ps --format "table {{.Names}}\t{{.Status}}\t{{.Ports}}"

if [ "$DEPLOY_MODE" = "dockerfile" ]; then
  sudo docker ps --format '{{.Names}}' | grep -q "^${APP_NAME}$" \
    || { log "ERROR: container ${APP_NAME} is not running"; exit 1; }
fi

sudo systemctl is-active --quiet nginx || { log "ERROR: nginx is not active"; exit 1; }

for attempt in 1 2 3 4 5; do
  if curl -s -o /dev/null -w '%{http_code}' "http://localhost:${APP_PORT}${HEALTH_PATH}" | grep -qE '^(200|301|302)$'; then
    log "local endpoint answered"
    log "deployment finished"
    exit 0
  fi
  sleep 2
done
log "ERROR: local endpoint http://localhost:${APP_PORT}${HEALTH_PATH} did not answer"
exit 1
"""

REMOTE_SCRIPT = _REMOTE_SCRIPT_TEMPLATE.replace("__NOT_FOUND_SITE__", NOT_FOUND_SITE)


def remote_script_args(
    *,
    app_name: str,
    app_port: int,
    deploy_mode: str,
    cleanup: bool,
    remote_app_dir: str,
    docker_network: str,
    container_port: int,
    health_path: str,
) -> list[str]:
    """Positional arguments matching `$1..$8` of REMOTE_SCRIPT."""

    return [
        app_name,
        str(app_port),
        deploy_mode,
        "true" if cleanup else "false",
        remote_app_dir,
        docker_network,
        str(container_port),
        health_path,
    ]
